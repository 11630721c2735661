"""
Base58 codec used for address text.

Addresses are converted as big numbers over the alphabet in
:data:`pda_sdk.constants.BASE58_ALPHABET`. Unlike Base58Check, the trimming
helpers drop every zero-valued leading digit, so genuine leading ``0x00``
bytes do not survive a ``trim_encode``/``trim_decode`` round trip.
"""

import logging
import math
from types import MappingProxyType

from .constants import BASE58_ALPHABET

logger = logging.getLogger(__name__)

_ZERO_DIGIT = BASE58_ALPHABET[0]
_DIGITS = MappingProxyType({char: index for index, char in enumerate(BASE58_ALPHABET)})
# log(58) / log(256)
_DECODE_RATIO = math.log(58) / math.log(256)


def encode(data: bytes) -> str:
    """
    Encode bytes as base58 digits, most significant first.

    The output is padded with the zero digit to twice the input length, which
    always fits the base-256 to base-58 expansion.
    """
    num = int.from_bytes(bytes(data), 'big')
    digits = bytearray(len(data) * 2)
    for pos in range(len(digits) - 1, -1, -1):
        if num == 0:
            break
        num, rem = divmod(num, 58)
        digits[pos] = rem
    return ''.join(BASE58_ALPHABET[d] for d in digits)


def decode(text: str) -> bytes:
    """
    Decode base58 text into bytes with leading zero bytes removed.

    Returns an empty byte string if ``text`` contains a character outside the
    alphabet.
    """
    size = math.ceil(len(text) * _DECODE_RATIO) + 1
    num = 0
    for char in text:
        digit = _DIGITS.get(char)
        if digit is None:
            logger.debug('Rejecting base58 text with invalid character %r', char)
            return b''
        num = num * 58 + digit
    return num.to_bytes(size, 'big').lstrip(b'\x00')


def trim_encode(data: bytes) -> str:
    # Strips zero digits at both ends of the padded buffer
    return encode(data).strip(_ZERO_DIGIT)


def trim_decode(text: str) -> bytes:
    return decode(text).lstrip(b'\x00')

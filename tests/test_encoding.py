"""
Base58 codec tests
"""

import base58
import pytest

from pda_sdk.constants import BASE58_ALPHABET
from pda_sdk.encoding import decode, encode, trim_decode, trim_encode


SAMPLES = [
    b'\x01',
    b'\x39',
    b'hello world',
    bytes(range(1, 33)),
    b'\xff' * 32,
    bytes([0x80] + [0] * 15),
]


class TestEncode:
    """Tests for the padded encoder."""

    def test_empty_input(self):
        assert encode(b'') == ''

    def test_output_is_padded_to_twice_the_input_length(self):
        assert encode(b'\x00\x01') == '1112'
        assert encode(b'\x3a') == '21'

    def test_digits_follow_alphabet_order(self):
        assert encode(b'\x39') == '1' + BASE58_ALPHABET[57]

    def test_matches_standard_base58_after_padding(self):
        for data in SAMPLES:
            assert encode(data).lstrip('1') == base58.b58encode(data).decode('ascii')

    def test_hello_world(self):
        assert encode(b'hello world') == '1111111StV1DL6CwTryKyV'

    def test_accepts_bytearray(self):
        assert encode(bytearray(b'hello world')) == encode(b'hello world')


class TestDecode:
    """Tests for the decoder."""

    def test_empty_text(self):
        assert decode('') == b''

    def test_round_trip_without_leading_zero(self):
        for data in SAMPLES:
            assert decode(encode(data)) == data

    def test_drops_leading_zero_digits(self):
        assert decode('1112') == b'\x01'

    @pytest.mark.parametrize('text', ['0xyz', 'abcO', 'Il', 'abc def', 'é'])
    def test_invalid_character_returns_empty(self, text):
        assert decode(text) == b''

    def test_decodes_full_width_key(self):
        text = base58.b58encode(b'\xff' * 32).decode('ascii')
        assert len(text) == 44
        assert decode(text) == b'\xff' * 32


class TestTrim:
    """The trimming helpers drop zero digits and leading zero bytes."""

    def test_trim_encode_strips_padding(self):
        assert trim_encode(b'hello world') == 'StV1DL6CwTryKyV'

    def test_trim_encode_of_zero_bytes_is_empty(self):
        assert trim_encode(b'\x00') == ''
        assert trim_encode(bytes(32)) == ''

    def test_leading_zero_byte_is_lost(self):
        encoded = trim_encode(b'\x00\x01')
        assert encoded == '2'
        assert trim_decode(encoded) == b'\x01'
        assert base58.b58encode(b'\x00\x01') == b'12'

    def test_trailing_zero_digit_is_lost(self):
        # 58 is "21" in base58; the trailing zero digit is trimmed too
        encoded = trim_encode(b'\x3a')
        assert encoded == '2'
        assert trim_decode(encoded) == b'\x01'

    def test_trim_decode_drops_leading_ones(self):
        assert trim_decode('11StV1DL6CwTryKyV') == b'hello world'

    def test_trim_decode_invalid_character(self):
        assert trim_decode('0OIl') == b''

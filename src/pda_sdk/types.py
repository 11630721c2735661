from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Union

from .constants import PUBLIC_KEY_LEN, PUBLIC_KEY_MAX_BASE58_LEN
from .crypto import is_valid_curve_point
from .encoding import decode, trim_encode
from .errors import ConstraintKind, LengthMismatchError


@dataclass(frozen=True, order=True)
class AddressKey:
    """
    A 32-byte ledger address.

    The key bytes are copied verbatim. Equality, hashing and ordering are
    byte-wise, so keys sort lexicographically.
    """

    key: bytes

    def __post_init__(self):
        if isinstance(self.key, (int, str)):
            raise TypeError(f'Address key must be bytes-like, got {type(self.key).__name__}')
        key = bytes(self.key)
        if len(key) != PUBLIC_KEY_LEN:
            raise LengthMismatchError(PUBLIC_KEY_LEN, len(key))
        object.__setattr__(self, 'key', key)

    @classmethod
    def default(cls) -> 'AddressKey':
        return cls(bytes(PUBLIC_KEY_LEN))

    @classmethod
    def from_digest(cls, digest: bytes) -> 'AddressKey':
        return cls(digest)

    @classmethod
    def from_string(cls, text: str) -> Optional['AddressKey']:
        """
        Parse base58 text. Returns None if the text is too long, is not
        valid base58, or does not decode to exactly 32 bytes.
        """
        if len(text) > PUBLIC_KEY_MAX_BASE58_LEN:
            return None
        decoded = decode(text)
        if len(decoded) != PUBLIC_KEY_LEN:
            return None
        return cls(decoded)

    @classmethod
    def deserialize(cls, data: bytes) -> 'AddressKey':
        data = bytes(data)
        if len(data) != PUBLIC_KEY_LEN:
            raise LengthMismatchError(PUBLIC_KEY_LEN, len(data))
        return cls(data)

    def serialize(self) -> bytes:
        return self.key

    def to_base58(self) -> str:
        if len(self.key) != PUBLIC_KEY_LEN:
            return ''
        return trim_encode(self.key)

    def is_on_curve(self, predicate: Optional[Callable[[bytes], bool]] = None) -> bool:
        return (predicate or is_valid_curve_point)(self.key)

    def __bytes__(self) -> bytes:
        return self.key

    def __len__(self) -> int:
        return PUBLIC_KEY_LEN

    def __getitem__(self, index):
        return self.key[index]

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f'AddressKey({self.to_base58()!r})'


class DerivedAddress(NamedTuple):
    address: AddressKey
    bump: int


# Outcomes of a single derivation attempt. The bump search branches on the
# outcome type, never on error text.

@dataclass(frozen=True)
class Accepted:
    address: AddressKey


@dataclass(frozen=True)
class RejectedOnCurve:
    address: AddressKey  # on-curve candidate, never returned to callers as an address


@dataclass(frozen=True)
class RejectedConstraint:
    kind: ConstraintKind
    message: str


DerivationOutcome = Union[Accepted, RejectedOnCurve, RejectedConstraint]

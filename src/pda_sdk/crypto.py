from nacl.encoding import RawEncoder
from nacl.hash import sha256

from .constants import PUBLIC_KEY_LEN

ED25519_P = 2**255 - 19
ED25519_D = (-121665 * pow(121666, ED25519_P - 2, ED25519_P)) % ED25519_P
_SQRT_M1 = pow(2, (ED25519_P - 1) // 4, ED25519_P)
_Y_MASK = (1 << 255) - 1


def hash32(data: bytes) -> bytes:
    """
    SHA-256 digest of data as 32 raw bytes.
    """
    return sha256(bytes(data), encoder=RawEncoder)


def is_valid_curve_point(data: bytes) -> bool:
    """
    Check whether 32 bytes decompress to a point on the Ed25519 curve.

    The sign bit is ignored and y is taken modulo p, so non-canonical
    encodings still decompress. Subgroup membership is not checked.
    """
    if len(data) != PUBLIC_KEY_LEN:
        return False
    y = (int.from_bytes(bytes(data), 'little') & _Y_MASK) % ED25519_P
    y2 = (y * y) % ED25519_P
    u = (y2 - 1) % ED25519_P
    v = (ED25519_D * y2 + 1) % ED25519_P
    x2 = (u * pow(v, ED25519_P - 2, ED25519_P)) % ED25519_P
    x = pow(x2, (ED25519_P + 3) // 8, ED25519_P)
    if (x * x - x2) % ED25519_P != 0:
        x = (x * _SQRT_M1) % ED25519_P
        if (x * x - x2) % ED25519_P != 0:
            return False
    return True

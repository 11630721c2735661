from .types import (
    Accepted,
    AddressKey,
    DerivationOutcome,
    DerivedAddress,
    RejectedConstraint,
    RejectedOnCurve,
)
from .encoding import decode, encode, trim_decode, trim_encode
from .crypto import hash32, is_valid_curve_point
from .config import DeriverConfig, configure_logging, setup_logging
from .errors import (
    AddressError,
    BumpSeedNotFoundError,
    ConstraintError,
    ConstraintKind,
    IllegalOwnerError,
    InvalidSeedsError,
    LengthMismatchError,
    SeedTooLongError,
    TooManySeedsError,
)
from .pda import (
    ProgramAddressDeriver,
    create_program_address,
    create_with_seed,
    derive_program_address,
    find_program_address,
    is_on_curve,
    try_find_program_address,
)

__all__ = [
    'AddressKey',
    'DerivedAddress',
    'DerivationOutcome',
    'Accepted',
    'RejectedOnCurve',
    'RejectedConstraint',
    'encode',
    'decode',
    'trim_encode',
    'trim_decode',
    'hash32',
    'is_valid_curve_point',
    'DeriverConfig',
    'configure_logging',
    'setup_logging',
    'AddressError',
    'LengthMismatchError',
    'ConstraintError',
    'ConstraintKind',
    'TooManySeedsError',
    'SeedTooLongError',
    'InvalidSeedsError',
    'BumpSeedNotFoundError',
    'IllegalOwnerError',
    'ProgramAddressDeriver',
    'derive_program_address',
    'create_program_address',
    'try_find_program_address',
    'find_program_address',
    'is_on_curve',
    'create_with_seed',
]

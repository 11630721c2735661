from enum import Enum
from typing import Optional


class ConstraintKind(str, Enum):
    """Seed-list violations that no bump seed can repair."""

    TOO_MANY_SEEDS = 'TooManySeeds'
    SEED_TOO_LONG = 'SeedTooLong'


class AddressError(ValueError):
    """Base class for address parsing and derivation failures."""

    kind = 'AddressError'


class LengthMismatchError(AddressError):
    kind = 'LengthMismatch'

    def __init__(self, expected: int, actual: int):
        super().__init__(f'Address key must be {expected} bytes, got {actual}')
        self.expected = expected
        self.actual = actual


class ConstraintError(AddressError):
    """
    Base for seed lists that violate the derivation limits.

    Raise one of the subclasses; the base carries no constraint of its own.
    """

    constraint: Optional[ConstraintKind] = None

    @property
    def kind(self) -> str:
        if self.constraint is None:
            return 'Constraint'
        return self.constraint.value


class TooManySeedsError(ConstraintError):
    constraint = ConstraintKind.TOO_MANY_SEEDS


class SeedTooLongError(ConstraintError):
    constraint = ConstraintKind.SEED_TOO_LONG


class InvalidSeedsError(AddressError):
    """The derived candidate is a valid curve point."""

    kind = 'InvalidSeeds'


class BumpSeedNotFoundError(AddressError):
    kind = 'BumpSeedNotFound'


class IllegalOwnerError(AddressError):
    kind = 'IllegalOwner'


def constraint_error(kind: ConstraintKind, message: str) -> ConstraintError:
    """Build the exception matching a constraint kind."""
    if kind is ConstraintKind.TOO_MANY_SEEDS:
        return TooManySeedsError(message)
    return SeedTooLongError(message)

"""
Program-derived address generation.

A program-derived address (PDA) is the SHA-256 hash of a seed list, the
program id and the ``ProgramDerivedAddress`` marker, accepted only when the
hash is not a valid Ed25519 point, so no private key can sign for it.
"""

import logging
from typing import Optional, Sequence, Union

from .config import DeriverConfig
from .constants import MAX_BUMP_SEED, MAX_SEED_LEN, MAX_SEEDS, PDA_MARKER
from .errors import (
    BumpSeedNotFoundError,
    ConstraintKind,
    IllegalOwnerError,
    InvalidSeedsError,
    SeedTooLongError,
    constraint_error,
)
from .types import (
    Accepted,
    AddressKey,
    DerivationOutcome,
    DerivedAddress,
    RejectedConstraint,
    RejectedOnCurve,
)

logger = logging.getLogger(__name__)

Seed = Union[bytes, bytearray, memoryview, AddressKey]


def _seed_bytes(seed: Seed) -> bytes:
    # bytes(5) would silently become five zero bytes
    if isinstance(seed, (int, str)):
        raise TypeError(f'Seed must be bytes-like, got {type(seed).__name__}')
    return bytes(seed)


class ProgramAddressDeriver:
    """
    Derives program addresses with injected hash and curve collaborators.

    Holds no state besides its immutable config, so one instance can be
    shared freely across threads.
    """

    def __init__(self, config: Optional[DeriverConfig] = None):
        self.config = config or DeriverConfig()

    def derive_program_address(self, seeds: Sequence[Seed], program_id: AddressKey) -> DerivationOutcome:
        """
        Run one derivation attempt and report the outcome as a tagged value.

        Seeds are validated before hashing, and the curve check only runs on a
        complete digest.
        """
        if len(seeds) > MAX_SEEDS:
            return RejectedConstraint(
                ConstraintKind.TOO_MANY_SEEDS,
                f'Got {len(seeds)} seeds, at most {MAX_SEEDS} allowed',
            )
        raw_seeds = [_seed_bytes(seed) for seed in seeds]
        for seed in raw_seeds:
            if len(seed) > MAX_SEED_LEN:
                return RejectedConstraint(
                    ConstraintKind.SEED_TOO_LONG,
                    f'Seed of {len(seed)} bytes exceeds {MAX_SEED_LEN} bytes',
                )

        digest = self.config.hash32(b''.join(raw_seeds) + bytes(program_id) + PDA_MARKER)
        candidate = AddressKey.from_digest(digest)
        if self.config.is_valid_curve_point(candidate.key):
            return RejectedOnCurve(candidate)
        return Accepted(candidate)

    def create_program_address(self, seeds: Sequence[Seed], program_id: AddressKey) -> AddressKey:
        """
        Create a program address without searching for a bump seed.

        Raises TooManySeedsError or SeedTooLongError for invalid seed lists and
        InvalidSeedsError when the derived candidate lies on the curve.
        """
        outcome = self.derive_program_address(seeds, program_id)
        if isinstance(outcome, Accepted):
            return outcome.address
        if isinstance(outcome, RejectedOnCurve):
            raise InvalidSeedsError('Derived address is a valid curve point')
        raise constraint_error(outcome.kind, outcome.message)

    def _search(self, seeds: Sequence[Seed], program_id: AddressKey) -> Union[DerivedAddress, RejectedConstraint, None]:
        seeds_with_bump = list(seeds)
        for bump in range(MAX_BUMP_SEED, 0, -1):
            outcome = self.derive_program_address(seeds_with_bump + [bytes([bump])], program_id)
            if isinstance(outcome, Accepted):
                logger.debug('Found program address %s with bump %d', outcome.address, bump)
                return DerivedAddress(outcome.address, bump)
            if isinstance(outcome, RejectedConstraint):
                logger.warning('Aborting bump seed search: %s', outcome.message)
                return outcome
        logger.warning('No viable bump seed for program %s', program_id)
        return None

    def try_find_program_address(self, seeds: Sequence[Seed], program_id: AddressKey) -> Optional[DerivedAddress]:
        """
        Find a program address and its bump seed, searching bumps 255 down to 1.

        Returns None when every bump yields an on-curve candidate, or when the
        seed list breaks a constraint that no bump can fix.
        """
        result = self._search(seeds, program_id)
        if isinstance(result, DerivedAddress):
            return result
        return None

    def find_program_address(self, seeds: Sequence[Seed], program_id: AddressKey) -> DerivedAddress:
        result = self._search(seeds, program_id)
        if isinstance(result, DerivedAddress):
            return result
        if isinstance(result, RejectedConstraint):
            raise BumpSeedNotFoundError(
                f'Unable to find a viable program address bump seed: {result.message}'
            ) from constraint_error(result.kind, result.message)
        raise BumpSeedNotFoundError('Unable to find a viable program address bump seed')

    def is_on_curve(self, text: str) -> bool:
        """
        Check whether base58 text names a key on the curve.
        Text that does not parse as an address is reported as off-curve.
        """
        key = AddressKey.from_string(text)
        if key is None:
            return False
        return self.config.is_valid_curve_point(key.key)

    def create_with_seed(self, base: AddressKey, seed: Union[str, bytes], owner: AddressKey) -> AddressKey:
        """
        Derive an address from a base key, a short seed and an owner program.

        Owners ending in the PDA marker are refused so this cannot be used to
        forge program-derived addresses.
        """
        raw_seed = seed.encode('utf-8') if isinstance(seed, str) else bytes(seed)
        if len(raw_seed) > MAX_SEED_LEN:
            raise SeedTooLongError(f'Seed of {len(raw_seed)} bytes exceeds {MAX_SEED_LEN} bytes')
        owner_bytes = bytes(owner)
        if owner_bytes.endswith(PDA_MARKER):
            raise IllegalOwnerError('Owner must not end with the program derived address marker')
        return AddressKey.from_digest(self.config.hash32(bytes(base) + raw_seed + owner_bytes))


_default_deriver = ProgramAddressDeriver()


def derive_program_address(seeds: Sequence[Seed], program_id: AddressKey) -> DerivationOutcome:
    return _default_deriver.derive_program_address(seeds, program_id)


def create_program_address(seeds: Sequence[Seed], program_id: AddressKey) -> AddressKey:
    return _default_deriver.create_program_address(seeds, program_id)


def try_find_program_address(seeds: Sequence[Seed], program_id: AddressKey) -> Optional[DerivedAddress]:
    return _default_deriver.try_find_program_address(seeds, program_id)


def find_program_address(seeds: Sequence[Seed], program_id: AddressKey) -> DerivedAddress:
    return _default_deriver.find_program_address(seeds, program_id)


def is_on_curve(text: str) -> bool:
    return _default_deriver.is_on_curve(text)


def create_with_seed(base: AddressKey, seed: Union[str, bytes], owner: AddressKey) -> AddressKey:
    return _default_deriver.create_with_seed(base, seed, owner)

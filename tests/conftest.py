"""
pda-sdk test fixtures
"""

import pytest

from pda_sdk import AddressKey, DeriverConfig, ProgramAddressDeriver, hash32, is_valid_curve_point
from pda_sdk.encoding import decode

UPGRADEABLE_LOADER_ID = 'BPFLoaderUpgradeab1e11111111111111111111111'


class CallCounter:
    """Wraps a collaborator and records every input it sees."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, data):
        self.calls.append(bytes(data))
        return self.func(data)


@pytest.fixture
def zero_program_id() -> AddressKey:
    return AddressKey(bytes(32))


@pytest.fixture
def loader_program_id() -> AddressKey:
    return AddressKey(decode(UPGRADEABLE_LOADER_ID))


@pytest.fixture
def deriver() -> ProgramAddressDeriver:
    return ProgramAddressDeriver()


@pytest.fixture
def counting_hash() -> CallCounter:
    return CallCounter(hash32)


@pytest.fixture
def counting_curve() -> CallCounter:
    return CallCounter(is_valid_curve_point)


@pytest.fixture
def counting_deriver(counting_hash, counting_curve) -> ProgramAddressDeriver:
    return ProgramAddressDeriver(
        DeriverConfig(hash32=counting_hash, is_valid_curve_point=counting_curve)
    )

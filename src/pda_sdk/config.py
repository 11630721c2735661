"""
Deriver configuration.

Wires the two external collaborators used by address derivation, a 32-byte
hash and a curve-membership predicate, and the library log level.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable

from .crypto import hash32, is_valid_curve_point

LOG_LEVEL_ENV = 'PDA_SDK_LOG_LEVEL'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_LEVEL = 'WARNING'


def _resolve_level(name: str) -> str:
    level = name.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class DeriverConfig:
    """
    Collaborators used by ProgramAddressDeriver.

    log_level is not applied by the deriver; it is read by configure_logging.
    """

    hash32: Callable[[bytes], bytes] = hash32
    is_valid_curve_point: Callable[[bytes], bool] = is_valid_curve_point
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, **overrides) -> 'DeriverConfig':
        """
        Build a config with the log level taken from PDA_SDK_LOG_LEVEL.
        Unknown levels fall back to WARNING.
        """
        level = _resolve_level(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
        overrides.setdefault('log_level', level)
        return cls(**overrides)


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure logging for applications embedding the SDK."""
    logging.basicConfig(level=getattr(logging, _resolve_level(level)), format=LOG_FORMAT)
    logging.getLogger('pda_sdk').setLevel(_resolve_level(level))


def configure_logging(config: DeriverConfig) -> None:
    setup_logging(config.log_level)

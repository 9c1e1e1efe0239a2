# gamemath/config.py
"""
Library configuration.

Only debug switches live here. Numeric constants (PI, EQUAL_EPSILON) are
fixed module constants in gamemath.core.scalar and are not configurable.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
import logging
import os

logger = logging.getLogger(__name__)

_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class MathConfig:
    """
    Process-wide switches.

    debug_checks: log a warning whenever an operation sees a degenerate
    input (zero-length normalize, zero divisor, empty projection volume).
    Results are identical with the flag on or off.
    """
    debug_checks: bool = False

    @classmethod
    def from_env(cls) -> MathConfig:
        """Build a config from GAMEMATH_* environment variables."""
        raw = os.environ.get('GAMEMATH_DEBUG_CHECKS', '')
        return cls(debug_checks=raw.strip().lower() in _TRUTHY)


_config = MathConfig.from_env()


def get_config() -> MathConfig:
    return _config


def configure(**overrides) -> MathConfig:
    """Replace fields of the active config. Unknown names raise TypeError."""
    global _config
    known = {f.name for f in fields(MathConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown MathConfig field(s): {', '.join(sorted(unknown))}")
    _config = replace(_config, **overrides)
    logger.debug("gamemath config updated: %s", _config)
    return _config


def debug_enabled() -> bool:
    return _config.debug_checks

"""Navigator configuration.

NavigatorConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from navstack.errors import ConfigurationError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{name} must be a boolean flag (1/0, true/false, yes/no, on/off), got {raw!r}"
    raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class NavigatorConfig:
    """Navigator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavigatorConfig(two_phase_removal=False)
    """

    # Keep popped activities mounted until exit_finished() is called
    two_phase_removal: bool = True

    # Log every event and the resulting state snapshot at DEBUG
    log_events: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "NavigatorConfig":
        """Build a config from ``NAVSTACK_*`` environment variables.

        Unset variables keep their defaults. Raises ``ConfigurationError``
        for values that are not recognizable boolean flags.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, bool] = {}
        for field_name in ("two_phase_removal", "log_events"):
            key = f"NAVSTACK_{field_name.upper()}"
            if key in env:
                overrides[field_name] = _parse_flag(key, env[key])
        return cls(**overrides)

"""Configuration utilities for VAXREG.

This module centralizes small helpers and constants related to application
configuration. Settings are read from environment variables:

- `VAXREG_NEGATIVE_UPDATES`: what an availability update does when it would
  leave a negative count (`reject`, `clamp` or `allow`; default `reject`).
- `VAXREG_ID_STRATEGY`: how new center ids are generated (`sequential`,
  `ulid` or `uuid4`; default `sequential`).
- `VAXREG_LOG_LEVEL`: when set (`debug`, `info`, `warning` or `error`),
  `bootstrap()` installs VAXREG's console handler at that level.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from vaxreg.domain.center import NegativeUpdatePolicy

NEGATIVE_UPDATES_ENV = "VAXREG_NEGATIVE_UPDATES"  # pragma: no mutate
ID_STRATEGY_ENV = "VAXREG_ID_STRATEGY"  # pragma: no mutate
LOG_LEVEL_ENV = "VAXREG_LOG_LEVEL"  # pragma: no mutate

ID_STRATEGIES = ("sequential", "ulid", "uuid4")
LOG_LEVELS = ("debug", "info", "warning", "error")


class InvalidSettingError(Exception):
    """Raised when an environment variable holds an unsupported value."""

    def __init__(self, name: str, value: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"{name}={value!r} is not supported; expected one of {', '.join(allowed)}"
        )
        self.name = name
        self.value = value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for a registry instance."""

    negative_updates: NegativeUpdatePolicy = NegativeUpdatePolicy.REJECT
    id_strategy: str = "sequential"
    log_level: str | None = None


def _read_choice(
    environ: Mapping[str, str], name: str, allowed: tuple[str, ...], default: str
) -> str:
    if not (raw := environ.get(name, "").strip()):
        return default
    if (value := raw.lower()) not in allowed:
        raise InvalidSettingError(name, raw, allowed)
    return value


def get_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`; override in
            tests instead of patching the process environment.

    Returns:
        The resolved `Settings`. Unset or blank variables use the defaults.

    Raises:
        InvalidSettingError: If a variable holds an unsupported value.
    """
    env = os.environ if environ is None else environ
    policies = tuple(policy.value for policy in NegativeUpdatePolicy)
    negative_updates = _read_choice(
        env, NEGATIVE_UPDATES_ENV, policies, NegativeUpdatePolicy.REJECT.value
    )
    id_strategy = _read_choice(env, ID_STRATEGY_ENV, ID_STRATEGIES, "sequential")
    log_level = _read_choice(env, LOG_LEVEL_ENV, LOG_LEVELS, "")
    return Settings(
        negative_updates=NegativeUpdatePolicy(negative_updates),
        id_strategy=id_strategy,
        log_level=log_level or None,
    )

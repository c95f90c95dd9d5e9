import os

from railclock.exceptions import ConfigurationError

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_optional_int(env_var: str, *, minimum: int | None = None) -> int | None:
    """Return the integer value of ``env_var`` or ``None`` when unset."""

    value = os.environ.get(env_var)
    if value is None or value.strip() == "":
        return None
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ConfigurationError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_optional_float(env_var: str) -> float | None:
    """Return the float value of ``env_var`` or ``None`` when unset.

    Range checks belong to whatever consumes the value.
    """

    value = os.environ.get(env_var)
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{env_var} must be a float") from exc

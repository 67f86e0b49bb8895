"""
Environment configuration for propstyle tooling.

The library itself installs no logging handlers; the command line reads its
log level from ``PROPSTYLE_LOG_LEVEL`` unless ``--verbose`` is given.

Usage:
    from propstyle.core.environment import get_log_level

    logging.basicConfig(level=get_log_level())
"""

from __future__ import annotations

import logging
import os

# Environment variable name
LOG_LEVEL_VAR = "PROPSTYLE_LOG_LEVEL"

# Default level: diagnostics (ERROR) and loader warnings are shown
_DEFAULT_LEVEL = logging.WARNING

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_log_level() -> int:
    """Get the log level from PROPSTYLE_LOG_LEVEL.

    Returns:
        int: A ``logging`` level. Defaults to WARNING if the variable is not
        set or holds an unknown value.

    Examples:
        >>> import os
        >>> os.environ["PROPSTYLE_LOG_LEVEL"] = "debug"
        >>> get_log_level() == logging.DEBUG
        True
    """
    env_value = os.environ.get(LOG_LEVEL_VAR, "").lower().strip()
    if not env_value:
        return _DEFAULT_LEVEL

    level = _LEVELS.get(env_value)
    if level is None:
        logging.getLogger(__name__).warning(
            "Unknown %s value '%s'. Valid values: %s. Defaulting to warning.",
            LOG_LEVEL_VAR,
            env_value,
            ", ".join(sorted(set(_LEVELS) - {"warn"})),
        )
        return _DEFAULT_LEVEL
    return level


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line use."""
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("propstyle").setLevel(level)

"""
LyricFinder - Configuration-Driven Timeouts

Centralized timeout defaults with environment override support.
Usage: ``get_timeout(os.environ, "api_request_s")`` returns the configured
or default value.  The override for ``api_request_s`` is read from
``LYRICFINDER_TIMEOUT_API_REQUEST_S``.
"""

from typing import Mapping


# Default timeouts — keys describe the operation and unit
TIMEOUTS = {
    "search_debounce_ms": 300,    # Autocomplete debounce after the last keystroke
    "api_request_s": 15,          # HTTP request timeout (lyrics and search)
    "worker_shutdown_ms": 2000,   # Wait for in-flight workers on window close
}

OVERRIDE_PREFIX = "LYRICFINDER_TIMEOUT_"


def override_name(key: str) -> str:
    """Environment variable name that overrides ``key``."""
    return f"{OVERRIDE_PREFIX}{key.upper()}"


def get_timeout(overrides: Mapping[str, str] | None, key: str) -> int | float:
    """Get a timeout value, checking the override mapping first.

    Args:
        overrides: Mapping such as ``os.environ`` (or None for defaults only).
        key: Timeout key from TIMEOUTS dict.

    Returns:
        The configured timeout value, or the default from TIMEOUTS.

    Raises:
        KeyError: If key is not in TIMEOUTS.
    """
    if key not in TIMEOUTS:
        raise KeyError(f"Unknown timeout key: {key!r}")
    if overrides is not None:
        override = overrides.get(override_name(key))
        if override is not None:
            try:
                value = type(TIMEOUTS[key])(override)
            except (ValueError, TypeError):
                value = None
            if value is not None and value >= 0:
                return value
    return TIMEOUTS[key]

"""
LyricFinder - Secure Credential Storage

Looks up sensitive credentials in the system keyring first, then in the
process environment.  The metadata search API key is the only secret the
application needs; it is resolved once at startup and handed to the
suggestion provider explicitly.

To keep the key out of the environment, store it with the keyring CLI::

    keyring set LyricFinder lastfm_api_key
"""

import logging
import os
from typing import Mapping

import keyring

logger = logging.getLogger("lyricfinder.security")

SERVICE_NAME = "LyricFinder"
SENSITIVE_KEYS = {"lastfm_api_key"}


def env_name(key: str) -> str:
    """Environment variable consulted for ``key`` (``lastfm_api_key`` -> ``LASTFM_API_KEY``)."""
    return key.upper()


def get_secret(key: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Retrieve a secret, trying keyring first then the environment.

    Args:
        key: One of the SENSITIVE_KEYS.
        environ: Mapping to use instead of ``os.environ``.

    Returns:
        The credential value, or None if not found.
    """
    try:
        value = keyring.get_password(SERVICE_NAME, key)
        if value:
            return value
    except Exception as e:
        logger.debug("Keyring read failed for %s: %s", key, e)

    env = os.environ if environ is None else environ
    value = (env.get(env_name(key)) or "").strip()
    return value or None


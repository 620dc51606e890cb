"""
LyricFinder - Request Token Arena

Every outbound request is stamped with a token drawn from a single
monotonically increasing counter.  The arena remembers the latest token per
key (a suggestion field, or the lyrics fetch); a completion is applied only
if its token is still the latest for that key.

Usage::

    token = tokens.issue(SuggestionField.TRACK)
    ...
    if tokens.is_current(SuggestionField.TRACK, token):
        apply(result)
"""

import itertools
from typing import Hashable


class RequestTokens:
    """Mints request tokens and answers staleness questions."""

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest: dict[Hashable, int] = {}

    def issue(self, key: Hashable) -> int:
        """Mint a new token and make it the latest for ``key``."""
        token = next(self._counter)
        self._latest[key] = token
        return token

    def invalidate(self, key: Hashable) -> None:
        """Make every token issued so far for ``key`` stale.

        A fresh token is burned as the latest, so nothing handed out before
        this call can match it.
        """
        self._latest[key] = next(self._counter)

    def invalidate_all(self) -> None:
        for key in list(self._latest):
            self.invalidate(key)

    def is_current(self, key: Hashable, token: int) -> bool:
        return self._latest.get(key) == token

    def latest(self, key: Hashable) -> int | None:
        return self._latest.get(key)

"""Delimiter generation for multiline workflow file values."""

from __future__ import annotations

import random
import string
from typing import Optional, Protocol

from actionkit.config.schema import DelimiterConfig

ALPHABET = string.ascii_letters + string.digits


class DelimiterSource(Protocol):
    """Produces the token wrapped around a multiline value."""

    def new_delimiter(self) -> str: ...


class RandomDelimiterSource:
    """Fresh ``<prefix><random alphanumerics>`` token on every call.

    Uses a non-cryptographic generator; the token only has to avoid
    colliding with the value it wraps.
    """

    def __init__(self, config: Optional[DelimiterConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or DelimiterConfig()
        self._rng = rng or random.Random()

    def new_delimiter(self) -> str:
        token = "".join(self._rng.choice(ALPHABET) for _ in range(self.config.length))
        return f"{self.config.prefix}{token}"

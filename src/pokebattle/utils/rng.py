"""Random sources used to resolve battles.

Battles draw a single uniform value in ``[0, 1)``. The draw goes through a
:class:`RandomSource` so callers can choose between:

- the process-wide generator of :mod:`random` (production default),
- a reproducible generator derived from a seed string,
- any object exposing ``random() -> float`` (tests).

Examples:
    >>> rng = seeded_source("league-finals")
    >>> again = seeded_source("league-finals")
    >>> rng.random() == again.random()
    True
"""

from __future__ import annotations

import hashlib
import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything able to produce a uniform float in ``[0, 1)``."""

    def random(self) -> float: ...


class AmbientRandomSource:
    """Delegates to the module-level generator of :mod:`random`."""

    def random(self) -> float:
        return random.random()

    def __repr__(self) -> str:
        return "AmbientRandomSource()"


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def seeded_source(seed: str) -> random.Random:
    """Return a generator whose sequence depends only on ``seed``.

    Args:
        seed: Arbitrary seed string

    Returns:
        A ``random.Random`` instance seeded from SHA-256(seed)

    Raises:
        ValueError: If seed is empty
    """
    if not seed:
        raise ValueError("seed must be a non-empty string")
    return random.Random(_seed_to_int(seed))


def source_for(seed: str | None) -> RandomSource:
    """Pick the seeded generator when a seed is configured, else the ambient one."""

    if seed is None:
        return AmbientRandomSource()
    return seeded_source(seed)

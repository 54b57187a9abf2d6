"""Deterministic per-seed colors.

A seed string (usually a hostname or nickname) picks a hue; saturation
and lightness come from a base color, so every participant color shares
the base color's weight. The same (base, seed) pair gives the same color
in every process and on every platform:

- the seed is hashed with BLAKE2b (8 byte digest), never `hash()`, which
  is randomized per process
- the digest seeds a fresh `random.Random` (Mersenne Twister), whose
  output for an integer seed is fixed across platforms and versions
"""

import hashlib
import logging
import random

from chatroster.models.color import Color, Okhsl

from .operations import from_hsl, to_hsl

logger = logging.getLogger(__name__)


def seed_hash(seed: str) -> int:
    """64-bit unsigned hash of the UTF-8 bytes of `seed`."""
    digest = hashlib.blake2b(seed.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")


def seeded_hue(seed: str) -> float:
    """Hue in degrees, uniform over [0, 360), drawn from `seed`.

    `uniform(0, 360)` never returns 360 itself; hue 360 would equal hue 0.
    """
    rng = random.Random(seed_hash(seed))
    return rng.uniform(0.0, 360.0)


def randomize_color(base: Color, seed: str) -> Color:
    """Replace the hue of `base` with one derived from `seed`.

    Example:
        >>> a = randomize_color(base, "irc.example.org")
        >>> a == randomize_color(base, "irc.example.org")
        True
    """
    hsl = to_hsl(base)
    hue = seeded_hue(seed)
    logger.debug(f"Seed {seed!r} -> hue {hue:.3f}")

    return from_hsl(Okhsl(hue=hue, saturation=hsl.saturation, lightness=hsl.lightness))

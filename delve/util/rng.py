"""Named random streams derived from one master seed.

Dungeon generation draws every decision from a single stream, but benchmarks
and future generators want streams of their own. Each stream is keyed by a
dotted domain name ("worldgen.dungeon", "bench.dungeon") and seeded from
crc32("<master seed>:<domain>"), so drawing from one domain never shifts
another.

Usage:
    from delve.util import rng
    rng.init(config.RANDOM_SEED)

    dungeon_rng = rng.get("worldgen.dungeon")
    corner_x = dungeon_rng.randrange(0, 40)

A stream handed out by get() stays valid across rng.reset(): it looks its
generator up again on every draw.
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from delve.types import RandomSeed


class RNGStream:
    """Handle on one domain's generator inside an RNGProvider.

    Only the draws the generators make are forwarded: integer ranges and
    single coin bits.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _current(self) -> Random:
        return self._provider._get_raw(self._domain)

    def randint(self, a: int, b: int) -> int:
        return self._current().randint(a, b)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        return self._current().randrange(start, stop, step)

    def getrandbits(self, k: int) -> int:
        return self._current().getrandbits(k)

    def __repr__(self) -> str:
        return f"RNGStream({self._domain!r})"


# Anything the generators accept as a random source.
RNG: TypeAlias = Random | RNGStream


def derive(master_seed: RandomSeed, domain: str) -> Random:
    """Standalone generator for `domain` under `master_seed`.

    Yields the same sequence as the provider's stream for that domain. A None
    seed gives an entropy-seeded generator.
    """
    if master_seed is None:
        return Random()
    # hash() is salted per process; crc32 is stable
    return Random(zlib.crc32(f"{master_seed}:{domain}".encode()))


class RNGProvider:
    """Owns the per-domain generators for one master seed."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._generators: dict[str, Random] = {}
        self._handles: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """The stream for `domain`; repeated calls return the same handle."""
        handle = self._handles.get(domain)
        if handle is None:
            handle = self._handles[domain] = RNGStream(self, domain)
        return handle

    def _get_raw(self, domain: str) -> Random:
        generator = self._generators.get(domain)
        if generator is None:
            generator = self._generators[domain] = derive(self._master_seed, domain)
        return generator

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reseed every domain; handles already given out follow along."""
        self._master_seed = master_seed
        self._generators.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Seed the global provider, reseeding it in place if it already exists."""
    global _provider
    if _provider is None:
        _provider = RNGProvider(master_seed)
    else:
        _provider.reset(master_seed)


def get(domain: str) -> RNGStream:
    """Stream for `domain` from the global provider.

    Without a prior init() the provider is created unseeded, so output is not
    reproducible.
    """
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)

"""Deterministic random number generation with isolated streams.

Every layout build owns an ``RNGProvider``. The provider hands out one
independent random stream per domain, each derived from the build's master
seed. This ensures that:

1. A build is fully deterministic from the same master seed
2. Changes to one domain's random consumption don't cascade to others
3. Two builds never share a stream, so concurrent builds cannot interleave
   draws

There is deliberately no module-level provider: callers create a provider per
build and pass the stream they need down as an explicit argument.

Usage:
    provider = RNGProvider(master_seed=12345)
    stream = provider.get("map.bsp")
    root = build_tree(space, 64, 64, stream)

Domain naming convention (hierarchical):
    - "map.bsp"
    - "map.bsp.merge"
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from delve.types import RandomSeed


def derive_seed(master_seed: RandomSeed, domain: str) -> int | None:
    """Derive a stable per-domain seed from a master seed.

    Returns None when the master seed is None so the stream falls back to
    system entropy.
    """
    if master_seed is None:
        return None
    # Use crc32 instead of hash() - hash() is randomized per Python session via
    # PYTHONHASHSEED, which would break cross-session determinism
    return zlib.crc32(f"{master_seed}:{domain}".encode())


class RNGStream:
    """Proxy for the Random instance of one domain.

    Callers may cache the proxy. Every call is forwarded to the provider's
    Random for the domain, which is created on first use.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        """Get the current underlying RNG."""
        return self._provider._get_raw(self._domain)

    # -------------------------------------------------------------------------
    # Random method proxies
    # -------------------------------------------------------------------------

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()

    def uniform(self, a: float, b: float) -> float:
        """Return random float N such that a <= N <= b."""
        return self._rng().uniform(a, b)


# Type alias for functions that accept either Random or RNGStream.
# Use this in type hints: `def foo(rng: RNG) -> int:`
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Provides isolated RNG streams for the domains of one build.

    Each domain gets its own Random instance derived deterministically
    from the master seed. Domains are identified by string names.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        """Get an RNG stream for the named domain.

        Args:
            domain: Hierarchical name like "map.bsp"

        Returns:
            A cached RNGStream proxy for the domain
        """
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        """Get the raw Random instance for a domain (internal use)."""
        if domain not in self._streams:
            # derive_seed() returns None for an unseeded provider, and
            # Random(None) seeds from system entropy.
            self._streams[domain] = Random(derive_seed(self._master_seed, domain))
        return self._streams[domain]

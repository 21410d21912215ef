"""Lattice paths through a square grid."""

from __future__ import annotations

from math import comb


def binomial(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r) for 0 <= r <= n."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("binomial coefficient needs 0 <= r <= n")
    return comb(n, r)


def lattice_paths(k: int) -> int:
    """Return the number of right/down routes through a ``k`` by ``k`` grid."""
    if k < 0:
        raise ValueError("grid size must not be negative")
    return binomial(2 * k, k)
"""Pythagorean triplets with a given perimeter."""

from __future__ import annotations

from collections.abc import Iterator


def pythagorean_triplets(total: int = 1000) -> Iterator[tuple[int, int, int]]:
    """Yield every ``(a, b, c)`` with a < b, a + b + c == total and a² + b² == c²."""
    for a in range(1, total // 3 + 1):
        for b in range(a + 1, total // 2 + 1):
            c = total - a - b
            if a * a + b * b == c * c:
                yield a, b, c


def special_triplet_product(total: int = 1000) -> int:
    """Return a·b·c for the first Pythagorean triplet whose sum is ``total``."""
    for a, b, c in pythagorean_triplets(total):
        return a * b * c
    raise ValueError(f"no Pythagorean triplet sums to {total}")
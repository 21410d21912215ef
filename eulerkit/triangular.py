"""Triangle numbers with many divisors."""

from __future__ import annotations

from itertools import count
from math import isqrt


def divisor_count(n: int) -> int:
    """Return how many positive divisors ``n`` has; 0 for ``n`` below 1."""
    if n < 1:
        return 0
    root = isqrt(n)
    total = sum(2 for i in range(1, root + 1) if n % i == 0)
    if root * root == n:
        total -= 1
    return total


def first_triangle_with_divisors(k: int) -> int:
    """Return the first triangle number with at least ``k`` divisors.

    The n-th triangle number is n(n+1)/2. Its two factors n and n+1 (one of them
    halved) are coprime, so its divisor count is the product of theirs.
    """
    for n in count(1):
        if n % 2 == 0:
            a, b = n // 2, n + 1
        else:
            a, b = n, (n + 1) // 2
        if divisor_count(a) * divisor_count(b) >= k:
            return n * (n + 1) // 2
    raise AssertionError("unreachable")
"""Collatz chain lengths."""

from __future__ import annotations

_lengths: dict[int, int] = {1: 1}


def _next_term(n: int) -> int:
    return n // 2 if n % 2 == 0 else 3 * n + 1


def _check_start(n: int) -> None:
    if n < 1:
        raise ValueError("a Collatz chain must start at a positive integer")


def collatz_length(n: int) -> int:
    """Return the number of terms in the Collatz chain from ``n`` down to 1.

    Lengths already seen are remembered between calls.
    """
    _check_start(n)
    path = []
    current = n
    while current not in _lengths:
        path.append(current)
        current = _next_term(current)
    length = _lengths[current]
    for value in reversed(path):
        length += 1
        _lengths[value] = length
    return _lengths[n]


def collatz_length_brute(n: int) -> int:
    """Return the Collatz chain length of ``n`` by walking the chain every time."""
    _check_start(n)
    steps = 0
    while n > 1:
        n = _next_term(n)
        steps += 1
    return steps + 1


def longest_collatz_start(limit: int = 1_000_000) -> tuple[int, int]:
    """Return ``(start, length)`` of the longest chain starting in 1..limit.

    Ties keep the smallest start; an empty range gives ``(0, 0)``.
    """
    best_start, best_length = 0, 0
    for start in range(1, limit + 1):
        length = collatz_length(start)
        if length > best_length:
            best_start, best_length = start, length
    return best_start, best_length
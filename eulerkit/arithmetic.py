"""Closed-form and running-sum arithmetic puzzles."""

from __future__ import annotations


def sum_of_multiples(limit: int) -> int:
    """Return the sum of all natural numbers below ``limit`` divisible by 3 or 5."""
    return sum(i for i in range(1, limit) if i % 3 == 0 or i % 5 == 0)


def even_fibonacci_sum(limit: int) -> int:
    """Return the sum of the even Fibonacci terms (1, 2, 3, 5, ...) not exceeding ``limit``."""
    total = 0
    a, b = 1, 2
    while b <= limit:
        if b % 2 == 0:
            total += b
        a, b = b, a + b
    return total


def sum_square_difference(n: int) -> int:
    """Return the square of the sum of 1..n minus the sum of the squares of 1..n."""
    sum_of_n = n * (n + 1) // 2
    sum_of_squares = n * (n + 1) * (2 * n + 1) // 6
    return sum_of_n * sum_of_n - sum_of_squares
"""Palindromic products of three-digit numbers."""

from __future__ import annotations

_LOW = 100
_HIGH = 999


def is_palindrome(x: int) -> bool:
    """Return True when the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def largest_palindrome_product() -> int:
    """Return the largest palindrome that is a product of two 3-digit numbers."""
    return max(
        (
            i * j
            for i in range(_LOW, _HIGH + 1)
            for j in range(_LOW, _HIGH + 1)
            if is_palindrome(i * j)
        ),
        default=0,
    )


def largest_palindrome_product_early_stop() -> int:
    """Same result as :func:`largest_palindrome_product`, scanning downward and
    leaving the inner loop once it finds a new best."""
    best = 0
    for i in range(_HIGH, _LOW - 1, -1):
        for j in range(_HIGH, _LOW - 1, -1):
            product = i * j
            if is_palindrome(product) and product > best:
                best = product
                break
    return best
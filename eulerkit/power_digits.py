"""Decimal digits of powers of two."""

from __future__ import annotations


def power_of_two_digits(power: int) -> str:
    """Return the decimal digits of 2 raised to ``power``."""
    if power < 0:
        raise ValueError("power must not be negative")
    return str(1 << power)


def digit_sum_of_power(power: int) -> int:
    """Return the sum of the decimal digits of 2 raised to ``power``."""
    return sum(int(digit) for digit in power_of_two_digits(power))
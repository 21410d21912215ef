"""Prime testing, factorisation and prime-based puzzles."""

from __future__ import annotations

from itertools import compress, count
from math import isqrt


def is_prime(n: int) -> bool:
    """Return True when ``n`` is prime, by trial division."""
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def prime_factors(n: int) -> list[int]:
    """Return the distinct prime factors of ``n`` in ascending order."""
    if n < 0:
        raise ValueError("n must not be negative")
    factors: list[int] = []
    if n < 2:
        return factors
    if n % 2 == 0:
        factors.append(2)
        while n % 2 == 0:
            n //= 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
        i += 2
    if n > 1:
        factors.append(n)
    return factors


def largest_prime_factor(n: int) -> int:
    """Return the largest prime factor of ``n``; ``n`` must be at least 2."""
    factors = prime_factors(n)
    if not factors:
        raise ValueError("n has no prime factors")
    return factors[-1]


def smallest_multiple(n: int) -> int:
    """Return the smallest positive number evenly divisible by every integer in 1..n."""
    result = 1
    for p in range(2, n + 1):
        if is_prime(p):
            power = p
            while power * p <= n:
                power *= p
            result *= power
    return result


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    found = 0
    for candidate in count(2):
        if is_prime(candidate):
            found += 1
            if found == n:
                return candidate
    raise AssertionError("unreachable")


def sum_of_primes_below(limit: int = 2_000_000) -> int:
    """Return the sum of all primes strictly below ``limit``."""
    if limit < 3:
        return 0
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for p in range(2, isqrt(limit - 1) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return sum(compress(range(limit), sieve))
from math import prod

import pytest

from eulerkit.primes import (
    is_prime,
    largest_prime_factor,
    nth_prime,
    prime_factors,
    smallest_multiple,
    sum_of_primes_below,
)


@pytest.mark.parametrize("n", [-7, -1, 0, 1])
def test_is_prime_rejects_below_two(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", range(2, 300))
def test_is_prime_agrees_with_factorisation(n):
    assert is_prime(n) == (prime_factors(n) == [n])


@pytest.mark.parametrize("n", range(2, 400))
def test_prime_factors_are_prime_divisors_that_cover_n(n):
    factors = prime_factors(n)
    assert factors == sorted(set(factors))
    assert all(is_prime(p) and n % p == 0 for p in factors)
    remaining = n
    for p in factors:
        while remaining % p == 0:
            remaining //= p
    assert remaining == 1


def test_prime_factors_of_source_number_multiply_back():
    factors = prime_factors(600851475143)
    assert prod(factors) == 600851475143


def test_prime_factors_rejects_negative():
    with pytest.raises(ValueError):
        prime_factors(-10)


def test_largest_prime_factor_examples():
    assert largest_prime_factor(13195) == 29
    assert largest_prime_factor(600851475143) == 6857


@pytest.mark.parametrize("n", [0, 1])
def test_largest_prime_factor_without_factors_raises(n):
    with pytest.raises(ValueError):
        largest_prime_factor(n)


def test_largest_prime_factor_of_prime_is_itself():
    assert largest_prime_factor(nth_prime(25)) == nth_prime(25)


def test_smallest_multiple_worked_example():
    assert smallest_multiple(10) == 2520


def test_smallest_multiple_up_to_twenty():
    assert smallest_multiple(20) == 232792560


@pytest.mark.parametrize("n", range(1, 25))
def test_smallest_multiple_divisible_by_all_and_chains(n):
    value = smallest_multiple(n)
    assert all(value % k == 0 for k in range(1, n + 1))
    assert smallest_multiple(n + 1) % value == 0


@pytest.mark.parametrize("n", range(2, 25))
def test_smallest_multiple_is_minimal(n):
    value = smallest_multiple(n)
    factors = prime_factors(value)
    assert len(factors) >= 1
    for p in factors:
        assert value % p == 0
        smaller = value // p
        assert not all(smaller % k == 0 for k in range(1, n + 1))


def test_nth_prime_first_is_two():
    assert nth_prime(1) == 2


@pytest.mark.parametrize("k", range(1, 60))
def test_nth_prime_counts_primes(k):
    p = nth_prime(k)
    assert is_prime(p)
    assert sum(1 for i in range(p + 1) if is_prime(i)) == k


def test_nth_prime_rejects_non_positive():
    with pytest.raises(ValueError):
        nth_prime(0)


@pytest.mark.parametrize("limit", [-3, 0, 1, 2])
def test_sum_of_primes_below_small_limits(limit):
    assert sum_of_primes_below(limit) == 0


@pytest.mark.parametrize("limit", range(3, 200, 7))
def test_sum_of_primes_below_matches_primality(limit):
    assert sum_of_primes_below(limit) == sum(i for i in range(limit) if is_prime(i))


def test_sum_of_primes_below_excludes_limit():
    p = nth_prime(30)
    assert sum_of_primes_below(p + 1) - sum_of_primes_below(p) == p
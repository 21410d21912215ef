import pytest

from eulerkit.arithmetic import (
    even_fibonacci_sum,
    sum_of_multiples,
    sum_square_difference,
)


def test_sum_of_multiples_worked_example():
    assert sum_of_multiples(10) == 23


@pytest.mark.parametrize("limit", [-5, 0, 1, 2, 3])
def test_sum_of_multiples_nothing_below_three(limit):
    assert sum_of_multiples(limit) == 0


@pytest.mark.parametrize("n", range(1, 60))
def test_sum_of_multiples_step_adds_only_multiples(n):
    step = sum_of_multiples(n + 1) - sum_of_multiples(n)
    assert step == (n if n % 3 == 0 or n % 5 == 0 else 0)


def test_even_fibonacci_sum_small_limits():
    assert even_fibonacci_sum(1) == 0
    assert even_fibonacci_sum(2) == 2
    assert even_fibonacci_sum(8) == 10


def test_even_fibonacci_sum_is_even_and_monotone():
    values = [even_fibonacci_sum(limit) for limit in range(1, 500)]
    assert all(v % 2 == 0 for v in values)
    assert values == sorted(values)


def test_sum_square_difference_worked_example():
    assert sum_square_difference(10) == 2640


def test_sum_square_difference_single_term_is_zero():
    assert sum_square_difference(1) == 0


def test_sum_square_difference_strictly_increasing():
    values = [sum_square_difference(n) for n in range(1, 40)]
    assert all(a < b for a, b in zip(values, values[1:]))
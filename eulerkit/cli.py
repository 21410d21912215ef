"""Command line front end for the puzzle solvers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from eulerkit.arithmetic import even_fibonacci_sum, sum_of_multiples, sum_square_difference
from eulerkit.collatz import longest_collatz_start
from eulerkit.grid import largest_grid_product
from eulerkit.lattice import lattice_paths
from eulerkit.palindromes import largest_palindrome_product
from eulerkit.power_digits import digit_sum_of_power, power_of_two_digits
from eulerkit.primes import (
    largest_prime_factor,
    nth_prime,
    prime_factors,
    smallest_multiple,
    sum_of_primes_below,
)
from eulerkit.pythagorean import pythagorean_triplets, special_triplet_product
from eulerkit.series import largest_series_product
from eulerkit.triangular import first_triangle_with_divisors

Handler = Callable[[argparse.Namespace], Iterable[str]]


def _multiples(args: argparse.Namespace) -> Iterable[str]:
    yield str(sum_of_multiples(args.limit))


def _fibonacci(args: argparse.Namespace) -> Iterable[str]:
    yield f"ans = {even_fibonacci_sum(args.limit)}"


def _prime_factor(args: argparse.Namespace) -> Iterable[str]:
    answer = largest_prime_factor(args.n)
    yield ", ".join(str(p) for p in prime_factors(args.n))
    yield f"ans = {answer}"


def _palindrome(args: argparse.Namespace) -> Iterable[str]:
    yield (
        "Largest palindrome made from the product of two 3-digit numbers: "
        f"{largest_palindrome_product()}"
    )


def _smallest_multiple(args: argparse.Namespace) -> Iterable[str]:
    yield f"smallest positive number: {smallest_multiple(args.n)}"


def _square_difference(args: argparse.Namespace) -> Iterable[str]:
    n = args.n
    sum_of_n = n * (n + 1) // 2
    yield f"sum of the n natural number = {sum_of_n}"
    yield f"square of the sum of the n natural number = {sum_of_n * sum_of_n}"
    yield f"sum of the square of the n natural number = {n * (n + 1) * (2 * n + 1) // 6}"
    yield (
        "difference between the sum of the squares of the first n natural numbers "
        f"and the square of the sum = {sum_square_difference(n)}"
    )


def _nth_prime(args: argparse.Namespace) -> Iterable[str]:
    yield str(nth_prime(args.n))


def _series(args: argparse.Namespace) -> Iterable[str]:
    yield f"max product of window size {args.k} is {largest_series_product(args.k)}"


def _triplet(args: argparse.Namespace) -> Iterable[str]:
    product = special_triplet_product(args.total)
    for a, b, c in pythagorean_triplets(args.total):
        yield f"triplet: {{({a}), ({b}), ({c})}}"
    yield f"Product: a*b*c = {product}"


def _prime_sum(args: argparse.Namespace) -> Iterable[str]:
    yield f"sum of the primes below {args.limit}: {sum_of_primes_below(args.limit)}"


def _grid(args: argparse.Namespace) -> Iterable[str]:
    yield f"max product = {largest_grid_product(args.k)}"


def _triangle(args: argparse.Namespace) -> Iterable[str]:
    yield f"ans = {first_triangle_with_divisors(args.k)}"


def _collatz(args: argparse.Namespace) -> Iterable[str]:
    start, length = longest_collatz_start(args.limit)
    yield f"best start = {start}"
    yield f"max chain length = {length}"


def _lattice(args: argparse.Namespace) -> Iterable[str]:
    yield f"Number of lattice paths in a {args.k} x {args.k} grid is: {lattice_paths(args.k)}"


def _power_digits(args: argparse.Namespace) -> Iterable[str]:
    digits = power_of_two_digits(args.power)
    yield f"sum of digit: {digit_sum_of_power(args.power)}"
    yield f"power: {digits}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eulerkit", description="Solve number puzzles.")
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str, handler: Handler, *arguments: tuple[str, dict]) -> None:
        sub = commands.add_parser(name, help=help_text)
        for arg_name, options in arguments:
            sub.add_argument(arg_name, type=int, **options)
        sub.set_defaults(handler=handler)

    add("multiples", "sum of multiples of 3 or 5 below LIMIT", _multiples, ("limit", {}))
    add("even-fibonacci", "sum of even Fibonacci terms up to LIMIT", _fibonacci, ("limit", {}))
    add(
        "largest-prime-factor",
        "largest prime factor of N",
        _prime_factor,
        ("n", {"nargs": "?", "default": 600851475143}),
    )
    add("palindrome", "largest palindrome product of 3-digit numbers", _palindrome)
    add("smallest-multiple", "smallest number divisible by 1..N", _smallest_multiple, ("n", {}))
    add("square-difference", "square of sum minus sum of squares", _square_difference, ("n", {}))
    add("nth-prime", "the N-th prime", _nth_prime, ("n", {}))
    add("series", "largest product of K adjacent digits", _series, ("k", {}))
    add(
        "triplet",
        "Pythagorean triplet with the given sum",
        _triplet,
        ("total", {"nargs": "?", "default": 1000}),
    )
    add(
        "prime-sum",
        "sum of the primes below LIMIT",
        _prime_sum,
        ("limit", {"nargs": "?", "default": 2_000_000}),
    )
    add("grid", "largest product of K adjacent grid numbers", _grid, ("k", {}))
    add("triangle", "first triangle number with at least K divisors", _triangle, ("k", {}))
    add(
        "collatz",
        "longest Collatz chain starting at or below LIMIT",
        _collatz,
        ("limit", {"nargs": "?", "default": 1_000_000}),
    )
    add("lattice", "lattice paths through a K by K grid", _lattice, ("k", {}))
    add("power-digits", "digits of 2 to the POWER", _power_digits, ("power", {}))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one puzzle solver chosen on the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        lines = list(args.handler(args))
    except ValueError as exc:
        print(f"eulerkit: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
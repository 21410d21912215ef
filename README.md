# eulerkit

A small pure-Python toolkit of number-theory routines for classic puzzle
problems: multiples of 3 or 5, even Fibonacci sums, prime factors, palindromic
products, digit series, grid products, triangle numbers, Collatz chains,
lattice paths, powers of two and Pythagorean triplets. It has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from eulerkit.arithmetic import sum_of_multiples, even_fibonacci_sum, sum_square_difference
from eulerkit.primes import largest_prime_factor, smallest_multiple, nth_prime, sum_of_primes_below
from eulerkit.triangular import first_triangle_with_divisors
from eulerkit.lattice import lattice_paths
from eulerkit.power_digits import digit_sum_of_power

sum_of_multiples(10)              # 23
largest_prime_factor(13195)       # 29
smallest_multiple(10)             # 2520
nth_prime(6)                      # 13
sum_of_primes_below(10)           # 17
sum_square_difference(10)         # 2640
first_triangle_with_divisors(5)   # 28
lattice_paths(2)                  # 6
digit_sum_of_power(15)            # 26
```

### Modules

- `eulerkit.arithmetic`: `sum_of_multiples(limit)` (numbers below `limit`
  divisible by 3 or 5), `even_fibonacci_sum(limit)` (even terms of 1, 2, 3,
  5, ... not exceeding `limit`), `sum_square_difference(n)`.
- `eulerkit.primes`: `is_prime(n)` by trial division, `prime_factors(n)`
  (distinct factors, ascending), `largest_prime_factor(n)`,
  `smallest_multiple(n)` (smallest number divisible by every integer in
  1..n), `nth_prime(n)` (2 is the first), and `sum_of_primes_below(limit)`
  using a sieve, with a default limit of 2,000,000.
- `eulerkit.palindromes`: `is_palindrome(x)`, and
  `largest_palindrome_product()` / `largest_palindrome_product_early_stop()`,
  two searches for the largest palindrome that is a product of two 3-digit
  numbers.
- `eulerkit.series`: `largest_series_product(k, digits)`, the greatest product
  of `k` adjacent digits; `digits` defaults to the built-in 1000-digit number
  `THOUSAND_DIGIT_NUMBER`.
- `eulerkit.grid`: `largest_grid_product(k, grid)`, the greatest product of
  `k` adjacent numbers along a row, column or either diagonal; `grid` defaults
  to the built-in 20 by 20 `GRID`. It returns 0 when no line of length `k`
  fits.
- `eulerkit.triangular`: `divisor_count(n)` and
  `first_triangle_with_divisors(k)`.
- `eulerkit.collatz`: `collatz_length(n)` (remembers lengths between calls),
  `collatz_length_brute(n)`, and `longest_collatz_start(limit)` returning
  `(start, length)` for starts in 1..limit (default 1,000,000; ties keep the
  smallest start).
- `eulerkit.lattice`: `binomial(n, r)` and `lattice_paths(k)`, the number of
  right/down routes through a `k` by `k` grid.
- `eulerkit.power_digits`: `power_of_two_digits(power)` (the decimal digits of
  2**power as a string) and `digit_sum_of_power(power)`.
- `eulerkit.pythagorean`: `pythagorean_triplets(total)` yields every
  `(a, b, c)` with `a < b`, `a + b + c == total` and `a² + b² == c²`;
  `special_triplet_product(total)` returns `a*b*c` for the first one (default
  total 1000).

Invalid arguments (negative sizes, window sizes larger than the input, and so
on) raise `ValueError`.

## Command line

Installing the package provides the `eulerkit` command, with one subcommand per
problem:

```
eulerkit --help
eulerkit multiples 1000
eulerkit lattice 20
```

| Subcommand | Argument | Prints |
|---|---|---|
| `multiples` | `LIMIT` | sum of multiples of 3 or 5 below LIMIT |
| `even-fibonacci` | `LIMIT` | sum of even Fibonacci terms up to LIMIT |
| `largest-prime-factor` | `[N]` (default 600851475143) | the distinct prime factors and the largest |
| `palindrome` | none | largest palindrome product of two 3-digit numbers |
| `smallest-multiple` | `N` | smallest number divisible by 1..N |
| `square-difference` | `N` | the sums involved and their difference |
| `nth-prime` | `N` | the N-th prime |
| `series` | `K` | largest product of K adjacent digits of the built-in number |
| `triplet` | `[TOTAL]` (default 1000) | each triplet with that sum and the product |
| `prime-sum` | `[LIMIT]` (default 2000000) | sum of the primes below LIMIT |
| `grid` | `K` | largest product of K adjacent numbers in the built-in grid |
| `triangle` | `K` | first triangle number with at least K divisors |
| `collatz` | `[LIMIT]` (default 1000000) | best start and its chain length |
| `lattice` | `K` | lattice paths through a K by K grid |
| `power-digits` | `POWER` | digit sum and digits of 2**POWER |

When a solver rejects its argument, the command prints the reason to standard
error and exits with status 1.

## Limits

The command-line `series` and `grid` subcommands always work on the built-in
digit string and grid; to use other data, call `largest_series_product` or
`largest_grid_product` from Python.
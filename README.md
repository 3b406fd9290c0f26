# algokit

A collection of classic algorithms with plain Python interfaces: number
theory, primes, searching and sorting, backtracking puzzles, text patterns and
a fixed-capacity queue. It depends on nothing outside the standard library.

## Installation

```
pip install .
```

## Modules

### `algokit.arithmetic`

- `gcd(a, b)`: greatest common divisor by Euclid's algorithm.
- `extended_euclid(a, b)`: returns `(d, x, y)` with `a*x + b*y == d == gcd(a, b)`.
- `power(a, b)`, `fast_power(a, b)`, `fast_power_iterative(a, b)`: `a**b` by
  repeated multiplication, recursive squaring and iterative binary
  exponentiation. A negative exponent raises `ValueError`.
- `factorial(n)`.
- `binomial(n, r)`, `binomial_recursive(n, k)`, `binomial_dp(n, k)`: the
  binomial coefficient from factorials, from Pascal's recurrence, and by
  building Pascal's triangle. Arguments outside `0 <= k <= n` raise `ValueError`.
- `to_digits(n)`: decimal digits of a non-negative number, least significant first.
- `multiply_digits(digits, factor)`: multiplies such a digit list by a
  non-negative factor and returns a new digit list.
- `is_leap_year(year)`: the Gregorian rule.

### `algokit.modular`

- `mod_pow(a, p, m)`: `a**p mod m`.
- `mod_inverse(a, p)`: inverse by the extended Euclidean algorithm; raises
  `ValueError` when `a` and `p` are not coprime.
- `mod_inverse_fermat(a, p)`: inverse modulo a prime by Fermat's little theorem.
- `crt(moduli, remainders)`: smallest non-negative solution of a system of
  congruences with pairwise coprime moduli.

### `algokit.primes`

- `is_prime(n)`: trial division.
- `sieve(n)`: list of booleans whose index `i` tells whether `i` is prime.
- `primes_up_to(n)`: the primes not greater than `n`.
- `factorize(n)`: prime factors with multiplicity, ascending.
- `min_prime_table(limit)` and `factorize_fast(n, min_prime)`: a table of
  smallest prime divisors, and factorisation by looking up that table.
- `distinct_prime_factors(n)` and `totient(n)` (Euler's totient; 0 and 1 give 1).
- `segmented_sieve(low, high)`: the primes in the closed range `[low, high]`.

### `algokit.sorting`

- `binary_search(items, target)`: index in an ascending sequence, or `None`.
- `contains(items, target)`: membership test by recursive halving.
- `merge(left, right)` and `merge_sort(items)`: both return new lists.
- `lexicographic_sort(lines)`: the lines in lexicographic order.

### `algokit.circular_queue`

`CircularQueue(capacity=5)` is a ring buffer with `enqueue(value)`,
`dequeue()`, `len()`, a `capacity` property and `slots()`, which returns the
raw buffer (vacated slots read 0). A full queue raises `QueueOverflow`, an
empty one `QueueUnderflow`.

### `algokit.knapsack`

`fractional_knapsack(capacity, items)` greedily takes `Item(size, value)`
objects in order of value per unit of size, splitting the last one, and
returns the total value.

### `algokit.patterns`

- `square_pattern(n)`: a `(2n-1)`-square of numbers whose rings count down
  from `n` at the border to 1 at the centre, as a list of rows.
- `swastik(size)`: the figure drawn with `*` on spaces, as a list of strings.

### `algokit.backtracking`

- `solve_n_queens(n)`: yields each solution as a tuple giving the queen's
  column in each row; `count_n_queens(n)` counts them.
- `solve_sudoku(grid)`: returns a solved copy of a 9x9 grid where 0 marks an
  empty cell; a malformed or unsolvable grid raises `ValueError`.
- `format_grid(grid)`: renders a grid with gaps between the 3x3 boxes.
- `hanoi_moves(disks, source="YELLOW", destination="GREEN", spare="RED")`:
  yields `(disk, from_peg, to_peg)` moves.

### `algokit.strings`

- `is_palindrome(word)`: case-sensitive.
- `keypad_codes(digits)`: every letter sequence the digits spell, using the
  `KEYPAD` mapping (`"0"` is a space, `"1"` is `abc`, ... `"9"` is `yz`); any
  other character raises `ValueError`.
- `replace_pi(text)`: replaces each `3.14` with `pi`.

## Examples

```python
from algokit.arithmetic import extended_euclid, binomial_dp
from algokit.modular import crt
from algokit.primes import factorize, totient
from algokit.backtracking import count_n_queens, hanoi_moves

extended_euclid(16, 10)        # (gcd, x, y) with 16*x + 10*y == gcd
binomial_dp(6, 4)              # 15
crt([3, 5, 7], [2, 3, 2])      # 23
factorize(360)                 # [2, 2, 2, 3, 3, 5]
totient(36)                    # 12
count_n_queens(8)              # 92
len(list(hanoi_moves(3)))      # 7
```

## What it does not do

This is a library only. It has no command-line programs and reads nothing
from standard input; its functions return values instead of printing them,
so formatting output (beyond `format_grid`) is left to the caller.

## Running the tests

```
pip install ".[test]"
pytest
```
"""Classic algorithms: number theory, primes, sorting, backtracking, patterns and a circular queue."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "backtracking",
    "circular_queue",
    "knapsack",
    "modular",
    "patterns",
    "primes",
    "sorting",
    "strings",
]
"""Recursion and dynamic programming exercises."""

from __future__ import annotations

from typing import Iterator, Sequence


def _check_items(weights: Sequence[int], prices: Sequence[int], capacity: int) -> None:
    if len(weights) != len(prices):
        raise ValueError("weights and prices must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack(weights: Sequence[int], prices: Sequence[int], capacity: int) -> int:
    """Best total price of items within capacity, by plain recursion."""
    _check_items(weights, prices, capacity)

    def best(n: int, w: int) -> int:
        if n == 0 or w == 0:
            return 0
        include = 0
        if weights[n - 1] <= w:
            include = prices[n - 1] + best(n - 1, w - weights[n - 1])
        return max(include, best(n - 1, w))

    return best(len(weights), capacity)


def knapsack_dp(weights: Sequence[int], prices: Sequence[int], capacity: int) -> int:
    """Best total price of items within capacity, by a bottom-up table."""
    _check_items(weights, prices, capacity)
    row = [0] * (capacity + 1)
    for weight, price in zip(weights, prices):
        previous = row
        row = [
            max(previous[w], price + previous[w - weight] if weight <= w else 0)
            if w > 0
            else 0
            for w in range(capacity + 1)
        ]
    return row[capacity]


def wines_rec(prices: Sequence[int]) -> int:
    """Most money from selling wines from either end, the year-th sale paying price * year."""
    memo: dict[tuple[int, int], int] = {}

    def best(left: int, right: int, year: int) -> int:
        if left > right:
            return 0
        key = (left, right)
        if key not in memo:
            memo[key] = max(
                prices[left] * year + best(left + 1, right, year + 1),
                prices[right] * year + best(left, right - 1, year + 1),
            )
        return memo[key]

    return best(0, len(prices) - 1, 1)


def wines_iter(prices: Sequence[int]) -> int:
    """The same answer as wines_rec, filled in bottom-up."""
    n = len(prices)
    if n == 0:
        return 0
    dp = [[0] * (n + 1) for _ in range(n + 1)]
    for i in reversed(range(n)):
        dp[i][i] = n * prices[i]
        for j in range(i + 1, n):
            year = n - (j - i)
            dp[i][j] = max(
                prices[i] * year + dp[i + 1][j],
                prices[j] * year + dp[i][j - 1],
            )
    return dp[0][n - 1]


def factorial(n: int) -> int:
    """n! computed recursively."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def _subsets(text: str) -> Iterator[str]:
    if not text:
        yield ""
        return
    first, rest = text[0], text[1:]
    for tail in _subsets(rest):
        yield first + tail
    yield from _subsets(rest)


def subsets(text: str) -> list[str]:
    """Every subsequence of text, each letter included before it is left out."""
    return list(_subsets(text))
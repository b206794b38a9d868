"""Dynamic-programming counting and optimisation routines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate
import math

MOD = 1_000_000_007


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``, modulo 1e9+7."""
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in coins if coin <= amount) % MOD
    return ways[target]


def count_candy_distributions(limits: Iterable[int], total: int) -> int:
    """Count ways to hand out exactly ``total`` candies where child i gets at most limits[i]."""
    if total < 0:
        raise ValueError("total must not be negative")
    ways = [1] + [0] * total
    for limit in limits:
        if limit < 0:
            raise ValueError("limits must not be negative")
        prefix = list(accumulate(ways, initial=0))
        ways = [
            (prefix[k + 1] - prefix[max(0, k - limit)]) % MOD for k in range(total + 1)
        ]
    return ways[total]


def knapsack_min_weight(
    weights: Sequence[int], values: Sequence[int], profit: int
) -> int | None:
    """Smallest total weight of a subset whose values add up to exactly ``profit``.

    Returns ``None`` when no subset reaches that value.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if profit < 0:
        return None
    best: list[float] = [0] + [math.inf] * profit
    for weight, value in zip(weights, values):
        if value < 0:
            raise ValueError("values must not be negative")
        for reached in range(profit, value - 1, -1):
            candidate = best[reached - value] + weight
            if candidate < best[reached]:
                best[reached] = candidate
    result = best[profit]
    return None if result == math.inf else int(result)


def _suffix_table(a: str, b: str) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in reversed(range(len(a))):
        row, below = table[i], table[i + 1]
        for j in reversed(range(len(b))):
            take = below[j + 1] + 1 if a[i] == b[j] else 0
            row[j] = max(take, below[j], row[j + 1])
    return table


def lcs_length(a: str, b: str) -> int:
    """Length of the longest common subsequence of two strings."""
    return _suffix_table(a, b)[0][0]


def longest_common_subsequence(a: str, b: str) -> str:
    """One longest common subsequence, preferring to skip characters of ``a`` on ties."""
    table = _suffix_table(a, b)
    chosen: list[str] = []
    i = j = 0
    while i < len(a) and j < len(b):
        skip_a = table[i + 1][j]
        skip_b = table[i][j + 1]
        take = table[i + 1][j + 1] + 1 if a[i] == b[j] else 0
        best = max(take, skip_a, skip_b)
        if best == skip_a:
            i += 1
        elif best == skip_b:
            j += 1
        else:
            chosen.append(a[i])
            i += 1
            j += 1
    return "".join(chosen)


def count_digit_sum(digits: int, target: int) -> int:
    """Count strings of ``digits`` decimal digits whose digit sum equals ``target``."""
    if digits < 0:
        raise ValueError("digits must not be negative")
    counts: Counter[int] = Counter({0: 1})
    for _ in range(digits):
        following: Counter[int] = Counter()
        for total, count in counts.items():
            for digit in range(10):
                following[total + digit] += count
        counts = following
    return counts[target]


def numbers_up_to(limit: int | str) -> Iterator[str]:
    """Yield every zero-padded number from 0 up to ``limit``, in ascending order.

    Each result has as many digits as ``limit`` is written with.
    """
    text = str(limit)
    if text and not (text.isascii() and text.isdigit()):
        raise ValueError(f"not a decimal number: {text!r}")
    return _padded_range(text)


def _padded_range(text: str) -> Iterator[str]:
    if not text:
        yield ""
        return
    width = len(text)
    for number in range(int(text) + 1):
        yield str(number).zfill(width)
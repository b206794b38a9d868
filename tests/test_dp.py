import math
from itertools import permutations

import pytest

from contestkit.dp import (
    MOD,
    coin_combinations,
    count_candy_distributions,
    count_digit_sum,
    knapsack_min_weight,
    lcs_length,
    longest_common_subsequence,
    numbers_up_to,
)


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


def test_coin_combinations_follows_recurrence():
    for target in range(2, 25):
        assert coin_combinations([1, 2], target) == (
            coin_combinations([1, 2], target - 1) + coin_combinations([1, 2], target - 2)
        )


@pytest.mark.parametrize("coin", [1, 3, 4])
@pytest.mark.parametrize("target", range(0, 13))
def test_single_coin(coin, target):
    assert coin_combinations([coin], target) == int(target % coin == 0)


def test_coin_order_does_not_matter():
    results = {coin_combinations(list(p), 9) for p in permutations([2, 3, 5])}
    assert len(results) == 1


def test_coin_combinations_negative_target():
    assert coin_combinations([1, 2], -3) == 0


def test_coin_combinations_rejects_zero_coin():
    with pytest.raises(ValueError):
        coin_combinations([0, 1], 4)


def test_candy_sample():
    assert count_candy_distributions([1, 2, 3], 4) == 5


def test_candy_unbounded_matches_stars_and_bars():
    children, total = 20, 2000
    expected = math.comb(total + children - 1, children - 1) % MOD
    assert count_candy_distributions([total] * children, total) == expected


@pytest.mark.parametrize("total", range(0, 6))
def test_candy_single_child(total):
    assert count_candy_distributions([3], total) == int(total <= 3)


def test_candy_permutation_invariant():
    results = {count_candy_distributions(list(p), 7) for p in permutations([1, 4, 2, 5])}
    assert len(results) == 1


def test_candy_negative_total():
    with pytest.raises(ValueError):
        count_candy_distributions([1, 2], -1)


def test_knapsack_example():
    assert knapsack_min_weight([3, 4, 5], [30, 50, 60], 90) == 8


def test_knapsack_unreachable():
    assert knapsack_min_weight([3, 4], [10, 20], 15) is None


def test_knapsack_single_item_bound():
    weights, values = [7, 2, 9], [5, 5, 5]
    assert knapsack_min_weight(weights, values, 5) == min(weights)


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack_min_weight([1, 2], [1], 1)


@pytest.mark.parametrize(
    "a,b",
    [("axyb", "abyxb"), ("abcde", "ace"), ("banana", "atana"), ("", "abc"), ("xyz", "xyz")],
)
def test_lcs_recovery_is_common_and_maximal(a, b):
    found = longest_common_subsequence(a, b)
    assert len(found) == lcs_length(a, b)
    assert _is_subsequence(found, a)
    assert _is_subsequence(found, b)


def test_lcs_identical_strings():
    assert lcs_length("contest", "contest") == len("contest")
    assert longest_common_subsequence("contest", "contest") == "contest"


def test_lcs_symmetric_length():
    assert lcs_length("abcbdab", "bdcaba") == lcs_length("bdcaba", "abcbdab")


@pytest.mark.parametrize("digits", [1, 2, 3, 4])
def test_digit_sum_counts_cover_all_strings(digits):
    total = sum(count_digit_sum(digits, t) for t in range(9 * digits + 1))
    assert total == 10**digits


@pytest.mark.parametrize("target", range(0, 28))
def test_digit_sum_symmetry(target):
    assert count_digit_sum(3, target) == count_digit_sum(3, 27 - target)


def test_digit_sum_out_of_range():
    assert count_digit_sum(2, 19) == 0
    assert count_digit_sum(18, -1) == 0


def test_numbers_up_to_listing():
    result = list(numbers_up_to("25"))
    assert len(result) == 26
    assert result[0] == "00"
    assert result[-1] == "25"
    assert result == sorted(result)
    assert all(len(item) == 2 for item in result)
    assert len(set(result)) == len(result)


def test_numbers_up_to_accepts_int():
    assert list(numbers_up_to(3)) == ["0", "1", "2", "3"]


def test_numbers_up_to_rejects_non_digits():
    with pytest.raises(ValueError):
        numbers_up_to("1a")
# contestkit

A small library of algorithms and data structures that come up in
programming contests, written in plain Python with no dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

All positions are zero-based and every range includes both ends.

## Contents

### `contestkit.dp`: dynamic programming

- `coin_combinations(coins, target)`: the number of ordered sequences of
  coins that sum to `target`, modulo 10^9 + 7. Coins must be positive; a
  negative target gives 0.
- `count_candy_distributions(limits, total)`: the number of ways to hand out
  exactly `total` candies when child *i* gets at most `limits[i]`, modulo
  10^9 + 7.
- `knapsack_min_weight(weights, values, profit)`: the least total weight of
  a subset whose values add up to exactly `profit`, or `None` when no subset
  does.
- `lcs_length(a, b)`: the length of a longest common subsequence of two
  strings.
- `longest_common_subsequence(a, b)`: one longest common subsequence; on
  ties it prefers skipping a character of `a`.
- `count_digit_sum(digits, target)`: how many strings of `digits` decimal
  digits have a digit sum of `target`.
- `numbers_up_to(limit)`: yields every number from 0 up to `limit` (an int
  or a decimal string), zero-padded to the width of `limit`, in ascending
  order. A string that is not all decimal digits raises `ValueError`.
- `MOD`: the modulus 10^9 + 7 used above.

### `contestkit.dsu`: disjoint sets

- `RollbackDSU(n)`: union by rank without path compression. `find(a)`,
  `union(a, b)` and `components()` work as usual; `persist()` records a
  checkpoint and `rollback()` undoes every union made since the latest one
  (raising `IndexError` when there is none).
- `ValueMap(values)`: an array whose distinct values are tracked through
  the index of their first occurrence. `replace(x, y)` renames `x` to `y`
  by rewriting the element at that index, and does nothing when `x` is not
  tracked. `find(index)` gives an index's root (every index is its own
  root). It supports `in` for tracked values, indexing and `len()`.

### `contestkit.mathematics`

- `power_mod(base, exponent, modulus)`: binary exponentiation.
- `geometric_series_mod(ratio, terms, modulus)`: the sum
  1 + r + r^2 + ... + r^(terms-1), modulo `modulus`.

### Range queries

- `contestkit.sqrt_decomposition.SqrtRangeMin(values)`: `query(left, right)`
  for the range minimum and `update(index, value)` for point updates.
  Positions out of range raise `IndexError`.
- `contestkit.merge_sort_tree.MergeSortTree(values)`: each node holds the
  sorted values of its range. `query(left, right, low=None, high=None)` adds
  up, over the nodes that exactly cover the range, how many distinct values
  within `[low, high]` each node holds; `None` leaves a bound open. Because
  the counts are summed per node, a value present in two covering nodes is
  counted twice.
- `contestkit.point_query`: `RangeAddTree`, `RangeMaxTree` and
  `RangeAssignTree` take `update(left, right, value)` to add, raise to at
  least, or assign a value over a range, and `query(index)` to read one
  position. Every position starts at 0.
- `contestkit.lazy`: lazy-propagation trees with `update(left, right, value)`
  and `query(left, right)`:
  - `AddMinTree`: add to a range, query the minimum.
  - `OrAndTree`: OR into a range, query the bitwise AND.
  - `MultiplySumTree`: multiply a range, query the sum, modulo 10^9 + 7;
    `set(index, value)` assigns a single position.
- `contestkit.search_tree`:
  - `SegmentTree(size, combine, identity)`: point `update(index, value)` and
    range `query(left, right)` under any associative `combine`.
  - `max_tree(values)` and `sum_tree(values)`: build a max or sum tree over
    `values`, with one spare slot at the end.
  - `first_at_least(tree, length, k)`: the lowest index below `length` whose
    prefix aggregate reaches `k`, or `None`.
  - `first_at_least_from(tree, length, k, start)`: the same, for aggregates
    taken from `start`.
  - `kth_one(tree, length, k)`: the index of the `k`-th one, counting from
    0, in a 0/1 sum tree, or `None`.
  - `toggle(tree, index)`: flip a 0/1 value.

The trees raise `ValueError` for a size below 1 and `IndexError` for
positions outside it.

## Example

```python
from contestkit.dp import coin_combinations, lcs_length
from contestkit.lazy import AddMinTree
from contestkit.search_tree import kth_one, sum_tree

print(coin_combinations([2, 3, 5], 9))   # 8
print(lcs_length("axyb", "abyxb"))       # 3

tree = AddMinTree(5)
tree.update(0, 2, 3)
print(tree.query(0, 4))                  # 0

bits = [1, 0, 1, 1, 0]
ones = sum_tree(bits)
print(kth_one(ones, len(bits), 1))       # 2
```

## What it does not do

This is a library only. It installs no commands and reads no problem input;
parsing input and printing answers is left to the calling code.
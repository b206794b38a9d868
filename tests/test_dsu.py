import pytest

from contestkit.dsu import RollbackDSU, ValueMap


def _roots(dsu, n):
    return [dsu.find(i) for i in range(n)]


@pytest.fixture
def value_map():
    return ValueMap([5, 3, 5, 7])


def test_union_reduces_components():
    dsu = RollbackDSU(5)
    assert dsu.components() == 5
    dsu.union(0, 1)
    assert dsu.components() == 4
    assert dsu.find(0) == dsu.find(1)


def test_union_within_same_set_keeps_count():
    dsu = RollbackDSU(4)
    dsu.union(0, 1)
    dsu.union(1, 0)
    assert dsu.components() == 3


def test_rollback_restores_state():
    dsu = RollbackDSU(6)
    dsu.union(0, 1)
    before = dsu.components()
    roots_before = _roots(dsu, 6)
    dsu.persist()
    dsu.union(2, 3)
    dsu.union(3, 1)
    assert dsu.find(2) == dsu.find(0)
    dsu.rollback()
    assert dsu.components() == before
    assert _roots(dsu, 6) == roots_before


def test_nested_checkpoints():
    dsu = RollbackDSU(5)
    dsu.persist()
    dsu.union(0, 1)
    dsu.persist()
    dsu.union(2, 3)
    dsu.rollback()
    assert dsu.components() == 4
    assert dsu.find(0) == dsu.find(1)
    dsu.rollback()
    assert dsu.components() == 5
    assert set(_roots(dsu, 5)) == set(range(5))


def test_rollback_without_checkpoint():
    dsu = RollbackDSU(3)
    dsu.union(0, 1)
    with pytest.raises(IndexError):
        dsu.rollback()
    assert dsu.components() == 2


def test_value_map_indices_are_own_roots(value_map):
    assert _roots(value_map, len(value_map)) == list(range(len(value_map)))


@pytest.mark.parametrize(
    "old, new, expected",
    [
        (5, 9, {0: 9, 2: 5}),
        (3, 7, {1: 7, 3: 7}),
    ],
)
def test_value_map_replace(value_map, old, new, expected):
    value_map.replace(old, new)
    assert old not in value_map
    assert new in value_map
    assert {index: value_map[index] for index in expected} == expected


def test_value_map_unknown_value_is_ignored():
    vm = ValueMap([1, 2])
    vm.replace(4, 8)
    assert [vm[i] for i in range(len(vm))] == [1, 2]
    assert 8 not in vm
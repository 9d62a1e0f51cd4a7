import itertools
import operator
import random

import pytest

import utils
from heaps import (choose_child, sift_down, floyd_sift_down, make_heap,
                   is_heap, CountingComparator, TrackedSequence)


def random_heap(n, rng, distinct=False):
    if distinct:
        items = rng.sample(range(10 * n + 10), n)
    else:
        items = [rng.randint(0, 3 * n) for _ in range(n)]
    make_heap(items, operator.lt)
    return items


def test_choose_child_without_right_child():
    comp = CountingComparator()
    region = TrackedSequence([5, 9])
    assert choose_child(region, 1, 1, comp) == (1, False)
    assert comp.count == 0
    assert region.reads == 0


def test_choose_child_compares_once():
    comp = CountingComparator()
    assert choose_child([0, 1, 2], 1, 2, comp) == (2, True)
    assert choose_child([0, 3, 2], 1, 2, comp) == (1, False)
    assert comp.count == 2


def test_choose_child_tie_keeps_left():
    comp = CountingComparator()
    assert choose_child([0, 4, 4], 1, 2, comp) == (1, False)
    assert comp.count == 1


def test_choose_child_assume_both_skips_bound():
    comp = CountingComparator()
    assert choose_child([0, 1, 2], 1, 0, comp, assume_both_children=True) == (2, True)
    assert comp.count == 1


def test_choose_child_with_offset():
    assert choose_child([100, 0, 1, 2], 1, 2, operator.lt, first=1) == (2, True)


def test_scenario_already_ordered():
    comp = CountingComparator()
    region = TrackedSequence([3, 1, 2])
    sift_down(region, comp, 3, 0)
    assert region == [3, 1, 2]
    assert region.writes == 0
    assert comp.count == 2


def test_scenario_one_move():
    comp = CountingComparator()
    region = TrackedSequence([1, 3, 2])
    sift_down(region, comp, 3, 0)
    assert region == [3, 1, 2]
    # one child move plus the write-back of the held value
    assert region.writes == 2
    assert comp.count == 2


def test_scenario_single_child():
    comp = CountingComparator()
    region = TrackedSequence([5, 9])
    sift_down(region, comp, 2, 0)
    assert region == [9, 5]
    assert comp.count == 1


@pytest.mark.parametrize("items", [[], [7], [7, 1, 2]])
@pytest.mark.parametrize("length", [0, 1])
def test_boundary_lengths(items, length):
    comp = CountingComparator()
    region = TrackedSequence(items)
    sift_down(region, comp, length, 0)
    assert region == items
    assert comp.count == 0
    assert region.reads == 0
    assert region.writes == 0


def test_sift_down_deep_path():
    region = [0, 9, 8, 7, 6, 5, 4]
    sift_down(region, operator.lt, 7, 0)
    assert region == [9, 7, 8, 0, 6, 5, 4]
    assert is_heap(region, operator.lt)


def test_sift_down_inner_start():
    region = [9, 1, 8, 7, 6, 5, 4]
    sift_down(region, operator.lt, 7, 1)
    assert region == [9, 7, 8, 1, 6, 5, 4]


def test_sift_down_with_offset():
    region = [-1, -1, 1, 3, 2, -1]
    sift_down(region, operator.lt, 3, 0, first=2)
    assert region == [-1, -1, 3, 1, 2, -1]


def test_sift_down_min_order():
    region = [9, 1, 2]
    sift_down(region, operator.gt, 3, 0)
    assert region == [1, 9, 2]


def test_sift_down_bounds():
    rng = random.Random(0)
    for n in list(range(2, 40)) + [127, 128, 1000]:
        for _ in range(10):
            items = random_heap(n, rng)
            items[0] = rng.randint(0, 3 * n)
            comp = CountingComparator()
            region = TrackedSequence(items)
            sift_down(region, comp, n, 0)
            assert comp.count <= utils.max_sift_comparisons(n)
            assert region.writes <= utils.max_sift_moves(n) + 1
            assert utils.heap_violations(region.items, operator.lt) == []
            assert utils.is_permutation(region.items, items)


def test_sift_down_idempotent():
    rng = random.Random(1)
    for n in range(2, 60):
        items = random_heap(n, rng, distinct=True)
        items[0] = rng.randint(0, 10 * n)
        while items[0] in items[1:]:
            items[0] = rng.randint(0, 10 * n)
        sift_down(items, operator.lt, n, 0)
        comp = CountingComparator()
        region = TrackedSequence(items)
        sift_down(region, comp, n, 0)
        assert region.writes == 0
        assert comp.count <= 2
        assert region == items


def test_sift_down_assume_both_children():
    rng = random.Random(2)
    for n in range(3, 40, 2):
        items = random_heap(n, rng)
        items[0] = rng.randint(0, 3 * n)
        expected = list(items)
        sift_down(expected, operator.lt, n, 0)
        sift_down(items, operator.lt, n, 0, assume_both_children=True)
        assert items == expected


def test_sift_down_exhaustive_small():
    for n in range(2, 8):
        for perm in itertools.permutations(range(n)):
            items = list(perm)
            # subtrees below the root must be heaps
            for start in range((n - 2) // 2, 0, -1):
                sift_down(items, operator.lt, n, start)
            region = list(items)
            sift_down(region, operator.lt, n, 0)
            assert utils.heap_violations(region, operator.lt) == []
            assert sorted(region) == list(range(n))


def test_sift_down_leaf_start_asserts():
    with pytest.raises(AssertionError):
        sift_down([3, 1, 2], operator.lt, 3, 1)


def test_sift_down_comparator_error_keeps_elements():
    calls = [0]

    def failing(a, b):
        calls[0] += 1
        if calls[0] == 4:
            raise RuntimeError("comparator failed")
        return a < b

    region = [0, 9, 8, 7, 6, 5, 4]
    with pytest.raises(RuntimeError):
        sift_down(region, failing, 7, 0)
    assert sorted(region) == [0, 4, 5, 6, 7, 8, 9]


def test_floyd_sift_down_sinks_to_leaf():
    comp = CountingComparator()
    region = [9, 7, 8, 1, 2, 3, 4]
    hole, child = floyd_sift_down(region, comp, 6)
    assert (hole, child) == (6, 7)
    assert region[:3] == [8, 7, 4]
    assert comp.count == 2


def test_floyd_sift_down_stops_above_single_child():
    region = [9, 7, 5, 1]
    hole, child = floyd_sift_down(region, operator.lt, 3)
    # the hole at 1 keeps the last element as its only child
    assert (hole, child) == (1, 2)
    assert region[0] == 7


def test_floyd_sift_down_one_comparison_per_level():
    rng = random.Random(3)
    for n in range(2, 70):
        items = random_heap(n, rng)
        comp = CountingComparator()
        hole, child = floyd_sift_down(items, comp, n - 1)
        assert child == hole + 1
        assert 2 * hole + 1 >= n - 1
        assert comp.count == utils.floor_log2(hole + 1)


def test_floyd_sift_down_never_reads_past_length():
    for n in range(2, 8):
        for perm in itertools.permutations(range(n)):
            items = list(perm)
            make_heap(items, operator.lt)
            # exactly-sized list: any read past n - 1 raises IndexError
            hole, child = floyd_sift_down(items, operator.lt, n - 1)
            assert 0 <= hole < n


def test_floyd_sift_down_needs_positive_length():
    with pytest.raises(AssertionError):
        floyd_sift_down([1], operator.lt, 0)

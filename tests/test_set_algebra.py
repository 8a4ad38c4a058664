"""Tests for union, intersection and difference of bags."""
from collections import Counter

import pytest

from linked_bag import LinkedBag
from resizeable_array_bag import ResizeableArrayBag

SAMPLE_PAIRS = [
    (["a", "b", "c"], ["b", "b", "d", "e"]),
    ([2, 2, 2, 1, 3, 4, 5, 6, 7], [6, 6, 2, 2, 8, 4, 11, 22, 33, 9]),
    ([], ["x", "x"]),
    (["x", "x"], []),
    ([1, 1, 1], [1, 1, 1]),
    ([1, 2, 3], [4, 5, 6]),
]


def _values(first, second):
    return set(first) | set(second) | {"never-present"}


@pytest.mark.parametrize("first, second", SAMPLE_PAIRS)
def test_union_count_law(make_bag, first, second) -> None:
    bag_a, bag_b = make_bag(first), make_bag(second)
    result = bag_a.union(bag_b)
    for value in _values(first, second):
        assert result.frequency_of(value) == bag_a.frequency_of(value) + bag_b.frequency_of(value)


@pytest.mark.parametrize("first, second", SAMPLE_PAIRS)
def test_intersection_count_law(make_bag, first, second) -> None:
    bag_a, bag_b = make_bag(first), make_bag(second)
    result = bag_a.intersection(bag_b)
    for value in _values(first, second):
        assert result.frequency_of(value) == min(bag_a.frequency_of(value), bag_b.frequency_of(value))


@pytest.mark.parametrize("first, second", SAMPLE_PAIRS)
def test_difference_count_law(make_bag, first, second) -> None:
    bag_a, bag_b = make_bag(first), make_bag(second)
    result = bag_a.difference(bag_b)
    for value in _values(first, second):
        assert result.frequency_of(value) == max(0, bag_a.frequency_of(value) - bag_b.frequency_of(value))


@pytest.mark.parametrize("operation", ["union", "intersection", "difference"])
@pytest.mark.parametrize("first, second", SAMPLE_PAIRS)
def test_operations_do_not_mutate_inputs(make_bag, operation, first, second) -> None:
    bag_a, bag_b = make_bag(first), make_bag(second)
    before_a, before_b = Counter(bag_a.to_list()), Counter(bag_b.to_list())

    result = getattr(bag_a, operation)(bag_b)

    assert Counter(bag_a.to_list()) == before_a
    assert Counter(bag_b.to_list()) == before_b
    assert result is not bag_a and result is not bag_b


@pytest.mark.parametrize("operation", ["union", "intersection", "difference"])
def test_result_is_independent(make_bag, bag_class, operation) -> None:
    bag_a, bag_b = make_bag([1, 2]), make_bag([2, 3])
    result = getattr(bag_a, operation)(bag_b)
    assert type(result) is bag_class

    result.clear()
    result.add(99)
    assert not bag_a.contains(99)
    assert not bag_b.contains(99)


def test_letters_scenario(make_bag) -> None:
    bag_a = make_bag(["a", "b", "c"])
    bag_b = make_bag(["b", "b", "d", "e"])

    union = bag_a.union(bag_b)
    assert union.size() == 7
    assert union.frequency_of("b") == 3

    intersection = bag_a.intersection(bag_b)
    assert intersection.to_list() == ["b"]

    assert Counter(bag_a.difference(bag_b).to_list()) == Counter(["a", "c"])
    assert Counter(bag_b.difference(bag_a).to_list()) == Counter(["b", "d", "e"])


def test_numbers_scenario(make_bag) -> None:
    bag_a = make_bag([2, 2, 2, 1, 3, 4, 5, 6, 7])
    bag_b = make_bag([6, 6, 2, 2, 8, 4, 11, 22, 33, 9])
    assert bag_a.size() == 9
    assert bag_b.size() == 10

    intersection = bag_a.intersection(bag_b)
    assert intersection.size() == 4
    assert intersection.frequency_of(2) == 2
    assert intersection.frequency_of(6) == 1
    assert intersection.frequency_of(4) == 1

    difference = bag_a.difference(bag_b)
    assert difference.size() == 5
    assert Counter(difference.to_list()) == Counter([2, 1, 3, 5, 7])


@pytest.mark.parametrize(
    "first_class, second_class",
    [(LinkedBag, ResizeableArrayBag), (ResizeableArrayBag, LinkedBag)],
)
def test_mixed_implementations(first_class, second_class) -> None:
    bag_a = first_class(entries=["a", "b", "c"])
    bag_b = second_class(entries=["b", "b", "d", "e"])

    union = bag_a.union(bag_b)
    assert isinstance(union, first_class)
    assert union.size() == 7
    assert bag_a.intersection(bag_b).to_list() == ["b"]
    assert bag_b.difference(bag_a).size() == 3

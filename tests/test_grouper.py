from collections import Counter
from typing import Optional

import pytest

from keygroup import ContainerFactoryError
from keygroup import InvalidArgumentError
from keygroup import KeyBasedGrouper
from keygroup import KeyGroupException
from keygroup import UnsupportedContainerError
from tests.utils import flatten


def letter_count(word: Optional[str]) -> int:
    return -1 if word is None else len(word)


@pytest.fixture()
def grouper():
    return KeyBasedGrouper(letter_count, set)


def test_grouper_groups_words_by_letter_count(grouper, fruit):
    groups = grouper.group(fruit)

    assert len(groups) == 4
    assert {"Pear", "Lime"} in groups
    assert {"Apple", "Grape"} in groups
    assert {"Orange", "Banana"} in groups
    assert {None} in groups
    assert set() not in groups


def test_grouper_rejects_missing_key_generator():
    with pytest.raises(InvalidArgumentError):
        KeyBasedGrouper(None, set)


def test_grouper_rejects_missing_container_factory():
    with pytest.raises(InvalidArgumentError):
        KeyBasedGrouper(letter_count, None)


@pytest.mark.parametrize(
    "key_generator, container_factory",
    [
        ("length", set),
        (letter_count, "set"),
        (letter_count, set()),
    ],
)
def test_grouper_rejects_strategies_that_are_not_callable(
    key_generator, container_factory
):
    with pytest.raises(InvalidArgumentError):
        KeyBasedGrouper(key_generator, container_factory)


def test_invalid_arguments_are_value_errors():
    with pytest.raises(ValueError):
        KeyBasedGrouper(None, None)
    assert issubclass(InvalidArgumentError, KeyGroupException)


def test_grouper_rejects_missing_elements(grouper):
    with pytest.raises(InvalidArgumentError):
        grouper.group(None)


def test_grouper_returns_no_groups_for_empty_input(grouper):
    assert grouper.group([]) == []
    assert grouper.group(iter(())) == []


def test_grouper_puts_elements_with_a_shared_key_into_one_group():
    words = ["Pear", "Lime", "Kiwi", "Plum"]
    groups = KeyBasedGrouper(letter_count, list).group(words)
    assert groups == [words]


@pytest.mark.parametrize(
    "elements",
    [
        ["a", "bb", "cc", "ddd", "e", "ffff", "gg"],
        ["x"] * 5,
        [None, "", None, " ", "  "],
        list("the quick brown fox jumps over the lazy dog"),
    ],
)
def test_grouper_partitions_every_element_exactly_once(elements):
    groups = KeyBasedGrouper(letter_count, list).group(elements)

    assert Counter(flatten(groups)) == Counter(elements)
    assert all(groups)
    assert len(groups) == len({letter_count(element) for element in elements})


@pytest.mark.parametrize(
    "elements",
    [
        ["a", "bb", "cc", "ddd", "e", "ffff", "gg"],
        [None, "", None, " ", "  "],
    ],
)
def test_grouper_keeps_equal_keys_together_and_unequal_keys_apart(elements):
    groups = KeyBasedGrouper(letter_count, list).group(elements)

    for group in groups:
        assert len({letter_count(element) for element in group}) == 1
    keys = [letter_count(group[0]) for group in groups]
    assert len(keys) == len(set(keys))


def test_grouper_delegates_duplicate_handling_to_the_container():
    words = ["Pear", "Pear", "Lime"]
    assert KeyBasedGrouper(letter_count, set).group(words) == [{"Pear", "Lime"}]
    assert KeyBasedGrouper(letter_count, list).group(words) == [words]


def test_grouper_preserves_insertion_order_within_list_groups():
    words = ["Orange", "Pear", "Banana", "Lime", "Cherry"]
    groups = KeyBasedGrouper(letter_count, list).group(words)
    assert groups == [["Orange", "Banana", "Cherry"], ["Pear", "Lime"]]


def test_grouper_does_not_mutate_its_input(grouper, fruit):
    words = sorted(word for word in fruit if word)
    original = list(words)
    grouper.group(words)
    assert words == original


def test_grouper_returns_fresh_groups_on_every_call(grouper, fruit):
    first = grouper.group(fruit)
    second = grouper.group(fruit)

    assert first == second
    for group in first:
        group.clear()
    assert all(second)


def test_container_factory_is_called_once_per_distinct_key():
    calls = []

    def factory():
        calls.append(None)
        return []

    KeyBasedGrouper(letter_count, factory).group(["a", "b", "cc", "d", "eee"])
    assert len(calls) == 3


def test_grouper_rejects_shared_containers():
    shared: list = []
    grouper = KeyBasedGrouper(letter_count, lambda: shared)
    with pytest.raises(ContainerFactoryError):
        grouper.group(["a", "bb"])


def test_grouper_rejects_non_empty_containers():
    grouper = KeyBasedGrouper(letter_count, lambda: ["stale"])
    with pytest.raises(ContainerFactoryError):
        grouper.group(["a"])


def test_grouper_rejects_containers_without_insertion():
    grouper = KeyBasedGrouper(letter_count, dict)
    with pytest.raises(UnsupportedContainerError):
        grouper.group(["a"])


def test_key_generator_failures_propagate_unmodified():
    class UnsupportedElement(Exception):
        pass

    def strict(element):
        if not isinstance(element, str):
            raise UnsupportedElement(element)
        return len(element)

    with pytest.raises(UnsupportedElement):
        KeyBasedGrouper(strict, set).group(["a", 1])


def test_container_factory_failures_propagate_unmodified():
    def broken():
        raise RuntimeError("no containers today")

    with pytest.raises(RuntimeError, match="no containers today"):
        KeyBasedGrouper(letter_count, broken).group(["a"])


def test_unhashable_keys_raise_type_error():
    with pytest.raises(TypeError):
        KeyBasedGrouper(list, set).group(["ab"])


def test_grouper_exposes_its_strategies(grouper):
    assert grouper.key_generator is letter_count
    assert grouper.container_factory is set
    with pytest.raises(AttributeError):
        grouper.key_generator = len

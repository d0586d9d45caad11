from collections import deque

import pytest

from keygroup.containers import CONTAINER_FACTORIES
from keygroup.containers import UnsupportedContainerError
from keygroup.containers import insert


def test_insert_adds_to_sets():
    container = set()
    insert(container, "Pear")
    insert(container, "Pear")
    assert container == {"Pear"}


@pytest.mark.parametrize("factory", [list, deque])
def test_insert_appends_to_sequences(factory):
    container = factory()
    insert(container, "Pear")
    insert(container, "Pear")
    assert list(container) == ["Pear", "Pear"]


@pytest.mark.parametrize("container", [{}, (), "", None])
def test_insert_rejects_containers_without_insertion(container):
    with pytest.raises(UnsupportedContainerError):
        insert(container, "Pear")


@pytest.mark.parametrize("name", sorted(CONTAINER_FACTORIES))
def test_registered_factories_create_fresh_empty_containers(name):
    factory = CONTAINER_FACTORIES[name]
    first, second = factory(), factory()
    assert len(first) == 0
    assert first is not second

"""Key based grouping of objects into caller supplied containers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Iterable, List, Optional, Protocol, Set

from keygroup import InvalidArgumentError
from keygroup._typing import G, G_co, K_co, T, T_contra
from keygroup.containers import insert

logger = logging.getLogger(__name__)


class KeyGenerator(Protocol[T_contra, K_co]):
    def __call__(self, element: T_contra) -> K_co:
        ...


class ContainerFactory(Protocol[G_co]):
    def __call__(self) -> G_co:
        ...


class Grouper(Protocol[T_contra, G_co]):
    def group(self, elements: Iterable[T_contra]) -> List[G_co]:
        ...


class KeyBasedGrouper(Generic[T, G]):
    """Groups elements whose generated keys are equal into the same container.

    Args:
        key_generator: Produces the (hashable) group key of an element. It is
            the sole authority on group membership and must handle every
            element it is given, ``None`` included if the caller expects it.
        container_factory: Produces a fresh, empty and mutable container each
            time it is called. Called once per distinct key.

    Raises:
        InvalidArgumentError: Either argument is missing or not callable.
    """

    __slots__ = ("_key_generator", "_container_factory")

    def __init__(
        self,
        key_generator: Optional[KeyGenerator[T, Any]],
        container_factory: Optional[ContainerFactory[G]],
    ) -> None:
        if key_generator is None:
            raise InvalidArgumentError("Key generator cannot be None")
        if not callable(key_generator):
            raise InvalidArgumentError("Key generator must be callable")
        if container_factory is None:
            raise InvalidArgumentError("Container factory cannot be None")
        if not callable(container_factory):
            raise InvalidArgumentError("Container factory must be callable")

        self._key_generator = key_generator
        self._container_factory = container_factory

    @property
    def key_generator(self) -> KeyGenerator[T, Any]:
        return self._key_generator

    @property
    def container_factory(self) -> ContainerFactory[G]:
        return self._container_factory

    def group(self, elements: Iterable[T]) -> List[G]:
        """Partitions elements into one container per distinct key.

        Elements are visited in iteration order and the input is not modified.
        Containers are returned in the order their keys were first seen.

        Args:
            elements: The elements to be grouped.

        Returns:
            The populated containers, none of them empty.

        Raises:
            InvalidArgumentError: ``elements`` is None.
            ContainerFactoryError: The container factory returned a non-empty
                container or one that was already in use.
        """
        if elements is None:
            raise InvalidArgumentError("Elements cannot be None")

        groups: Dict[Any, G] = {}
        issued: Set[int] = set()
        count = 0
        for element in elements:
            key = self._key_generator(element)
            if key not in groups:
                groups[key] = self._new_container(issued)
                logger.debug("new group for key %r", key)
            insert(groups[key], element)
            count += 1

        logger.debug("grouped %d element(s) into %d group(s)", count, len(groups))
        return list(groups.values())

    def _new_container(self, issued: Set[int]) -> G:
        container = self._container_factory()
        if id(container) in issued:
            raise ContainerFactoryError(
                "Container factory returned a container that is already in use"
            )
        if _has_contents(container):
            raise ContainerFactoryError(
                "Container factory returned a non-empty container"
            )
        issued.add(id(container))
        return container

    def __repr__(self):
        class_name = self.__class__.__name__
        return (
            f"<{class_name}: key_generator={self._key_generator!r}, "
            f"container_factory={self._container_factory!r}>"
        )


def _has_contents(container: Any) -> bool:
    try:
        return len(container) > 0
    except TypeError:
        # NOTE: Containers without a length cannot be checked
        return False


class ContainerFactoryError(InvalidArgumentError):
    """Container factory did not return a fresh, empty container."""

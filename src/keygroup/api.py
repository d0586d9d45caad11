from typing import Any, Callable, Hashable, Iterable, List

from keygroup import KeyGroupException
from keygroup._typing import ContainerSource, KeySource
from keygroup.containers import CONTAINER_FACTORIES
from keygroup.grouper import KeyBasedGrouper
from keygroup.keys import KEY_GENERATORS


def get_key_generator(source: KeySource) -> Callable[[Any], Hashable]:
    """Resolves a key generator from a registered name or a callable."""
    if source is None or callable(source):
        return source
    try:
        return KEY_GENERATORS[source]
    except (KeyError, TypeError):
        raise UnknownStrategyError(
            f"Unknown key generator {source!r}. "
            f"Allowed values: {{{', '.join(sorted(KEY_GENERATORS))}}}"
        ) from None


def get_container_factory(source: ContainerSource) -> Callable[[], Any]:
    """Resolves a container factory from a registered name or a callable."""
    if source is None or callable(source):
        return source
    try:
        return CONTAINER_FACTORIES[source]
    except (KeyError, TypeError):
        raise UnknownStrategyError(
            f"Unknown container {source!r}. "
            f"Allowed values: {{{', '.join(sorted(CONTAINER_FACTORIES))}}}"
        ) from None


def create_grouper(
    key: KeySource, container: ContainerSource = "set"
) -> KeyBasedGrouper:
    return KeyBasedGrouper(get_key_generator(key), get_container_factory(container))


def group(
    elements: Iterable[Any], key: KeySource, container: ContainerSource = "set"
) -> List[Any]:
    """Groups elements by key into new containers.

    Args:
        elements: The elements to be grouped.
        key: Name of a registered key generator or a key generating function.
        container: Name of a registered container factory or a function that
            creates new, empty containers.

    Returns:
        One populated container per distinct key.
    """
    return create_grouper(key, container).group(elements)


class UnknownStrategyError(KeyGroupException, LookupError):
    """Strategy name is not registered."""

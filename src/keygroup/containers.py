"""Container factories and the insertion rule shared by all groupers."""

from typing import Any, Callable, Dict

from keygroup import InvalidArgumentError

CONTAINER_FACTORIES: Dict[str, Callable[[], Any]] = {
    "set": set,
    "list": list,
}


def insert(container: Any, element: Any) -> None:
    """Inserts an element into a group container.

    Set-like containers are populated with ``add`` and sequence-like containers
    with ``append``; ordering and de-duplication are left to the container.

    Args:
        container: A mutable container created by a container factory.
        element: The element to insert.

    Raises:
        UnsupportedContainerError: The container supports neither operation.
    """
    add = getattr(container, "add", None)
    if callable(add):
        add(element)
        return

    append = getattr(container, "append", None)
    if callable(append):
        append(element)
        return

    raise UnsupportedContainerError(
        f"Container of type {type(container).__name__!r} supports neither "
        "'add' nor 'append'"
    )


class UnsupportedContainerError(InvalidArgumentError):
    """Group container cannot be populated."""

"""Partition collections into groups of caller-chosen containers."""

__version__ = "0.1.0"


class KeyGroupException(Exception):
    """Base exception for all keygroup errors."""


class InvalidArgumentError(KeyGroupException, ValueError):
    """A required argument was missing or unusable."""


from keygroup.containers import UnsupportedContainerError  # noqa: E402
from keygroup.grouper import ContainerFactoryError  # noqa: E402
from keygroup.grouper import Grouper  # noqa: E402
from keygroup.grouper import KeyBasedGrouper  # noqa: E402

__all__ = [
    "ContainerFactoryError",
    "Grouper",
    "InvalidArgumentError",
    "KeyBasedGrouper",
    "KeyGroupException",
    "UnsupportedContainerError",
    "__version__",
]

from typing import Callable, Literal, TypeVar, Union

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
K_co = TypeVar("K_co", covariant=True)
G = TypeVar("G")
G_co = TypeVar("G_co", covariant=True)

KeyName = str
ContainerName = Literal["set", "list"]
OutputFormat = Literal["table", "list", "json"]

KeySource = Union[KeyName, Callable]
ContainerSource = Union[ContainerName, Callable]

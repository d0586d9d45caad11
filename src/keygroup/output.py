import json
from typing import (
    Any,
    Callable,
    Collection,
    Hashable,
    Iterable,
    List,
    Tuple,
    get_args,
)

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from keygroup import KeyGroupException
from keygroup._typing import OutputFormat

Group = Collection[Any]
KeyedGroup = Tuple[Hashable, Group]

OUTPUT_FORMATS: Tuple[str, ...] = get_args(OutputFormat)


def print_output(
    output: OutputFormat,
    groups: Iterable[Group],
    key_generator: Callable[[Any], Hashable],
) -> None:
    if output not in OUTPUT_FORMATS:
        raise UnknownOutputError(
            f"Unknown output format {output!r}. "
            f"Allowed values: {{{', '.join(OUTPUT_FORMATS)}}}"
        )

    keyed = _label_groups(groups, key_generator)

    if output == "table":
        _print_output_table(keyed)
    elif output == "list":
        _print_output_list(keyed)
    elif output == "json":
        _print_output_json(keyed)


def _label_groups(
    groups: Iterable[Group], key_generator: Callable[[Any], Hashable]
) -> List[KeyedGroup]:
    # Groups are never empty and every member shares the same key
    keyed = [(key_generator(next(iter(group))), group) for group in groups]
    return sorted(keyed, key=lambda item: _sort_key(item[0]))


def _print_output_table(groups: List[KeyedGroup]) -> None:
    console = Console(quiet=False)

    table = Table(show_header=True, box=box.SIMPLE)
    table.add_column(f"Key ({len(groups)})")
    table.add_column("Size", justify="right")
    table.add_column("Members")

    total = 0
    for key, group in groups:
        total += len(group)
        members = ", ".join(_format(member) for member in _ordered(group))
        table.add_row(Text(_format(key)), f"{len(group)}", Text(members))
    table.add_row("Total", f"{total}", "", style="bold")
    console.print(table)


def _print_output_list(groups: List[KeyedGroup]) -> None:
    for key, group in groups:
        print(f"{_format(key)}:")
        for member in _ordered(group):
            print(f"    {_format(member)}")


def _print_output_json(groups: List[KeyedGroup]) -> None:
    data = {
        "groups": [
            {"key": key, "members": list(_ordered(group))} for key, group in groups
        ]
    }
    print(json.dumps(data, indent=4, default=str))


def _ordered(group: Group) -> Iterable[Any]:
    # Sets have no meaningful order, sequences keep their insertion order
    if isinstance(group, (set, frozenset)):
        return sorted(group, key=_sort_key)
    return group


def _sort_key(value: Any) -> Tuple[int, Any, str]:
    if value is None:
        return (0, 0, "")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (1, value, "")
    return (2, 0, str(value))


def _format(value: Any) -> str:
    return "<none>" if value is None else str(value)


class UnknownOutputError(KeyGroupException, ValueError):
    """Output format is not supported."""

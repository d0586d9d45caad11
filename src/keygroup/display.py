from typing import Iterable, Iterator, Optional, TypeVar

import tqdm
from rich.console import Console

T = TypeVar("T")

LINE_BAR_FORMAT = " {desc}: {percentage:3.0f}%|{bar:40}| {n_fmt}/{total_fmt} lines"


class Display:
    """Reports grouping progress and results on a console.

    Args:
        console: Rich console where status messages will be presented.
        disable: Disable the progress bar. By default it is shown only on an
            interactive, non-quiet console.
    """

    def __init__(self, console: Console, disable: Optional[bool] = None) -> None:
        self.console = console
        if disable is None:
            disable = console.quiet or not console.is_terminal
        self.disable = disable

    def track(self, lines: Iterable[T], description: str) -> Iterator[T]:
        """Iterates over lines while advancing a progress bar."""
        yield from tqdm.tqdm(
            lines,
            desc=description,
            bar_format=LINE_BAR_FORMAT,
            file=self.console.file,
            disable=self.disable,
            leave=False,
        )

    def summary(self, sources: int, lines: int, groups: int) -> None:
        """Prints the number of lines read and groups formed."""
        self.console.print(
            f" Grouped [bold cyan]{lines}[/] line(s) from {sources} source(s) "
            f"into [bold cyan]{groups}[/] group(s)"
        )

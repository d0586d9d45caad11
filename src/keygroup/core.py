import logging
from typing import Iterable, Iterator, List, Optional, TextIO

from rich.console import Console

from keygroup._typing import ContainerSource, KeySource, OutputFormat
from keygroup.api import create_grouper
from keygroup.display import Display
from keygroup.output import print_output

logger = logging.getLogger(__name__)


def run_group(
    sources: Iterable[TextIO],
    key: KeySource = "length",
    container: ContainerSource = "set",
    output: OutputFormat = "table",
    strip: bool = True,
    skip_blank: bool = False,
    quiet: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Groups the lines of text sources and reports the groups."""
    grouper = create_grouper(key, container)

    console = console if console else Console(stderr=True, quiet=quiet)
    display = Display(console)

    sources = tuple(sources)
    lines = list(_read_lines(sources, strip=strip, skip_blank=skip_blank))

    groups = grouper.group(display.track(lines, "Grouping"))
    display.summary(len(sources), len(lines), len(groups))
    print_output(output, groups, grouper.key_generator)


def _read_lines(
    sources: Iterable[TextIO], strip: bool = True, skip_blank: bool = False
) -> Iterator[str]:
    for source in sources:
        lines: List[str] = []
        for line in source:
            line = line.strip() if strip else line.rstrip("\r\n")
            if skip_blank and not line.strip():
                continue
            lines.append(line)
        logger.debug("read %d line(s) from %s", len(lines), _source_name(source))
        yield from lines


def _source_name(source: TextIO) -> str:
    return getattr(source, "name", repr(source))

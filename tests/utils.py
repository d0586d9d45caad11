from pathlib import Path
from typing import Any, Iterable, List

import yaml


def get_test_data_path() -> Path:
    """Returns the parent directory of testing data."""
    return Path(__file__).parent.resolve() / "data"


def make_options(key: str, *options: Any) -> str:
    """Converts a key and values into a command line options."""
    return " ".join(f"--{key} {option}" for option in options)


def make_configuration_file(path: Path, **kwargs) -> None:
    with path.open("wt") as file:
        contents = {key: value for key, value in kwargs.items() if value is not None}
        yaml.dump(contents, file)


def flatten(groups: Iterable[Iterable[Any]]) -> List[Any]:
    """Collects the members of all groups into a single list."""
    return [member for group in groups for member in group]

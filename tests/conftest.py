import pytest
from click.testing import CliRunner


@pytest.fixture()
def runner():
    return CliRunner()


@pytest.fixture(scope="session")
def fruit():
    return {"Pear", "Lime", "Apple", "Grape", "Orange", "Banana", None}

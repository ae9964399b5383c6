# File: tests/conftest.py
from pathlib import Path

import pytest

from robots_scout.logger import configure
from robots_scout.parser.rules import from_reader
from robots_scout.robots import Robots

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture(autouse=True)
def quiet_logger():
    """
    Restore default logger settings after each test: the CLI reconfigures
    handlers against CliRunner streams that are closed afterwards.
    """
    yield
    configure()


@pytest.fixture()
def testdata() -> Path:
    return TESTDATA


@pytest.fixture()
def load_robots():
    """
    Return a loader building Robots from a file under tests/testdata.
    """

    def _load(name: str) -> Robots:
        with (TESTDATA / name).open("rb") as fh:
            return from_reader(fh)

    return _load


@pytest.fixture()
def config_file(tmp_path) -> Path:
    """
    Write a small YAML config and return its path.
    """
    path = tmp_path / "config.yaml"
    path.write_text(
        "user_agent: ScoutBot/2.0\ntimeout: 2.5\nmax_bytes: 1024\n", encoding="utf-8"
    )
    return path

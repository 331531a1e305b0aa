"""
Pytest fixtures shared by the numstat tests.
"""
import io

import pytest

from src.common.logging import configure_structlog


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """
    Configure structlog before any logger is first used, so cached loggers
    filter debug events instead of printing them to stdout.
    """
    configure_structlog(verbose=False)


@pytest.fixture
def one_to_five():
    """The five ascending integers used throughout the reference results."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def feed_stdin(monkeypatch):
    """
    Replace sys.stdin with a StringIO holding the given text.
    """
    def _feed(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _feed


@pytest.fixture
def data_file(tmp_path):
    """
    Write text to a temporary file and return its path as a string.
    """
    def _write(text: str, name: str = "data.txt") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write

"""
Pytest configuration and shared fixtures for stringutils tests.
"""

import io
from dataclasses import dataclass
from typing import Union

import pytest

from stringutils import cli


@dataclass
class CliResult:
    """Captured outcome of one CLI invocation."""

    exit_code: int
    stdout: str
    stderr: str


@pytest.fixture
def run_cli(capsys, monkeypatch):
    """Fixture to run the CLI with arguments and optional stdin text."""

    def _run(*argv: str, stdin: Union[str, bytes] = "") -> CliResult:
        if isinstance(stdin, bytes):
            stream = io.TextIOWrapper(io.BytesIO(stdin), encoding="utf-8")
        else:
            stream = io.StringIO(stdin)
        monkeypatch.setattr("sys.stdin", stream)
        exit_code = cli.main(list(argv))
        captured = capsys.readouterr()
        return CliResult(exit_code, captured.out, captured.err)

    return _run


@pytest.fixture
def input_file(tmp_path):
    """Factory fixture for writing input text to a temporary file."""

    def _create(content: str, name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _create

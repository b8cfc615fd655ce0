"""Pytest configuration and fixtures."""
import json

import pytest
from click.testing import CliRunner

from ccdb.utils.logging import logger


def escape_argument(argument):
    """Reference escaper: wrap in double quotes, backslash-escape \\ and "."""
    return '"' + argument.replace("\\", "\\\\").replace('"', '\\"') + '"'


def escape_command_line(arguments):
    return " ".join(escape_argument(argument) for argument in arguments)


@pytest.fixture
def write_database(tmp_path):
    """Write a list of entries as compile_commands.json and return its path.

    Pass ``directory`` to place it somewhere other than tmp_path, or ``raw``
    to write text verbatim.
    """

    def _write(entries=None, directory=None, raw=None):
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / "compile_commands.json"
        path.write_text(raw if raw is not None else json.dumps(entries, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_entries():
    """Small but realistic database: relative, absolute, command and arguments forms."""
    return [
        {
            "directory": "/work/build",
            "file": "../src/main.c",
            "command": 'cc -c -DGREETING="\\"hello world\\"" -I../include ../src/main.c',
        },
        {
            "directory": "/work/build",
            "file": "/work/src/util.c",
            "arguments": ["cc", "-c", "-O2", "/work/src/util.c"],
        },
        {
            "directory": "/work/build/debug",
            "file": "/work/src/util.c",
            "arguments": ["cc", "-c", "-O0", "-g", "/work/src/util.c"],
        },
        {
            "directory": "/work/build",
            "file": "./../tests/./test_main.c",
            "arguments": ["cc", "-c", "../tests/test_main.c"],
        },
    ]


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()

"""Shared fixtures: running a tool's main(), feeding stdin, writing inputs."""

import io
import sys

import pytest


def exit_status(main, argv):
    """Calls a tool's main(argv) and returns the status it exited with."""
    try:
        main(argv)
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0


@pytest.fixture
def run(capsys):
    """Runs main(argv) and returns (status, stdout, stderr)."""

    def _run(main, *argv):
        status = exit_status(main, list(argv))
        out, err = capsys.readouterr()
        return status, out, err

    return _run


@pytest.fixture
def stdin(monkeypatch):
    """Replaces standard input with the given text or bytes."""

    def _feed(data):
        if isinstance(data, str):
            data = data.encode('utf-8')
        monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(data), encoding='utf-8'))

    return _feed


@pytest.fixture
def write_file(tmp_path):
    """Writes a file below tmp_path and returns its path as a string."""

    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode('utf-8')
        path.write_bytes(content)
        return str(path)

    return _write

"""
Name: inputs
Description: open named inputs, standard input included
License: perl
"""

import sys
import os
import errno
import contextlib

from textutils.errors import FileAccessError

STDIN = '-'


def open_input(filepath: str):
    """
    Opens a file for binary reading, or hands back standard input for '-'.

    The result is always usable in a 'with' block; standard input is never
    closed by it. Directories and unreadable paths raise FileAccessError.
    """
    if filepath == STDIN:
        return contextlib.nullcontext(sys.stdin.buffer)

    if os.path.isdir(filepath):
        raise FileAccessError(filepath, IsADirectoryError(errno.EISDIR, 'Is a directory', filepath))

    try:
        return open(filepath, 'rb')
    except OSError as e:
        raise FileAccessError(filepath, e) from e


def lossy(data: bytes) -> str:
    """Decodes UTF-8, replacing invalid sequences with U+FFFD."""
    return data.decode('utf-8', errors='replace')


def chomp(line):
    """Strips one trailing '\\n' or '\\r\\n' from a str or bytes line."""
    newline, carriage = ('\n', '\r') if isinstance(line, str) else (b'\n', b'\r')
    if line.endswith(newline):
        line = line[:-1]
        if line.endswith(carriage):
            line = line[:-1]
    return line


def report(program_name: str, error: Exception):
    """Writes a 'PROG: message' diagnostic to stderr."""
    print(f"{program_name}: {error}", file=sys.stderr)

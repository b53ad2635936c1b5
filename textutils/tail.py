#!/usr/bin/env python3

"""
Name: tail
Description: display the last part of a file
License: perl
"""

import sys
import io
import re
import argparse

from textutils.errors import FileAccessError
from textutils.inputs import open_input, lossy, report

PROG = 'tail'

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1

# '+0' means "from the very start", which no plain integer can express.
PLUS_ZERO = '+0'


def check_number(value_str: str):
    """
    Parses a location. '+N' counts from the start of the file; 'N' and
    '-N' count back from the end and are returned as -N. Returns PLUS_ZERO
    for '+0'.
    """
    if not re.match(r'^[+-]?\d+$', value_str):
        raise ValueError(value_str)
    number = int(value_str)
    if value_str.startswith('+'):
        return PLUS_ZERO if number == 0 else number
    return -abs(number)


def location(kind: str):
    """Builds an argparse type for -n/-c values."""
    def convert(value: str):
        try:
            return check_number(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"illegal {kind} count -- {value}")
    return convert


def get_start_index(take, total: int):
    """
    Converts a location into the 0-based index of the first line or byte
    to print, or None when nothing should be printed.
    """
    if total == 0:
        return None
    if take == PLUS_ZERO:
        return 0
    if take == 0 or take > total:
        return None
    if take > 0:
        return take - 1
    return max(total + take, 0)


def read_input(filepath: str) -> bytes:
    """Reads a whole input, standard input included."""
    with open_input(filepath) as fh:
        try:
            return fh.read()
        except OSError as e:
            raise FileAccessError(filepath, e) from e


def split_lines(data: bytes) -> list:
    """Splits on '\\n', keeping it. A last line without one still counts."""
    return io.BytesIO(data).readlines()


def print_lines(lines: list, take):
    start = get_start_index(take, len(lines))
    if start is None:
        return
    sys.stdout.write(lossy(b''.join(lines[start:])))


def print_bytes(data: bytes, take):
    start = get_start_index(take, len(data))
    if start is None:
        return
    sys.stdout.write(lossy(data[start:]))


def main(argv=None):
    """Parses arguments and prints the tail of each file."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Display the last part of a file.",
        usage="%(prog)s [-n number | -c number] [-q] file ..."
    )
    count_group = parser.add_mutually_exclusive_group()
    count_group.add_argument('-n', '--lines', type=location('line'), default=-10,
                             help='Location is NUMBER lines (default: 10).')
    count_group.add_argument('-c', '--bytes', type=location('byte'),
                             help='Location is NUMBER bytes.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress headers.')
    parser.add_argument('files', nargs='+')

    args = parser.parse_args(argv)
    rc = EX_SUCCESS
    num_files = len(args.files)

    for file_num, file_path in enumerate(args.files):
        try:
            data = read_input(file_path)
        except FileAccessError as e:
            report(PROG, e)
            rc = EX_FAILURE
            continue

        if not args.quiet and num_files > 1:
            separator = "\n" if file_num else ""
            print(f"{separator}==> {file_path} <==")

        if args.bytes is not None:
            print_bytes(data, args.bytes)
        else:
            print_lines(split_lines(data), args.lines)

    sys.exit(rc)


if __name__ == "__main__":
    main()

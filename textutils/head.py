#!/usr/bin/env python3
"""
Name: head
Description: print the first lines of a file
License: perl
"""

import sys
import argparse
import re

from textutils.errors import FileAccessError
from textutils.inputs import open_input, lossy, report

PROG = 'head'


def preprocess_argv(args_list: list) -> list:
    """
    Translates the historical '-NUMBER' syntax to the standard '-n NUMBER'.
    For example, '-20' becomes ['-n', '20'].
    """
    processed_args = []
    for arg in args_list:
        match = re.match(r'^-(\d+)$', arg)
        if match:
            processed_args.extend(['-n', match.group(1)])
        else:
            processed_args.append(arg)
    return processed_args


def positive_int(kind: str):
    """Builds an argparse type that accepts integers greater than zero."""
    def convert(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            number = 0
        if number <= 0:
            raise argparse.ArgumentTypeError(f"illegal {kind} count -- {value}")
        return number
    return convert


def show_head(stream, lines: int, num_bytes=None):
    """Prints the first LINES lines, or the first NUM_BYTES bytes."""
    if num_bytes is not None:
        sys.stdout.write(lossy(stream.read(num_bytes)))
        return

    for count, raw in enumerate(stream, 1):
        sys.stdout.write(lossy(raw))
        if count >= lines:
            break


def main(argv=None):
    """Parses arguments and prints the first N lines of files or stdin."""
    if argv is None:
        argv = sys.argv[1:]
    exit_status = 0

    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Print the first lines of a file.",
        usage="%(prog)s [-n count | -c bytes] [file ...]"
    )
    count_group = parser.add_mutually_exclusive_group()
    count_group.add_argument(
        '-n', '--lines',
        type=positive_int('line'),
        default=10,
        help='The number of lines to print (default: 10).'
    )
    count_group.add_argument(
        '-c', '--bytes',
        type=positive_int('byte'),
        help='The number of bytes to print.'
    )
    parser.add_argument(
        'files',
        nargs='*',
        default=['-'],
        help='Files to process. Reads from stdin if none are given.'
    )

    args = parser.parse_args(preprocess_argv(argv))

    is_multi_file = len(args.files) > 1
    for index, filepath in enumerate(args.files):
        if is_multi_file:
            if index:
                print()
            print(f"==> {filepath} <==")
        try:
            with open_input(filepath) as f:
                show_head(f, args.lines, args.bytes)
        except FileAccessError as e:
            report(PROG, e)
            exit_status = 1

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Name: cat
Description: concatenate and print files
License: perl
"""

import sys
import argparse

from textutils.errors import FileAccessError
from textutils.inputs import open_input, lossy, chomp, report

PROG = 'cat'


def cat_stream(stream, opts: argparse.Namespace):
    """Prints one input, applying numbering, end markers and squeezing."""
    end_char = '$' if opts.show_ends else ''
    line_number = 0
    was_empty = False

    for raw in stream:
        line = lossy(chomp(raw))
        is_empty = not line

        # Handle -s (squeeze blank lines)
        if opts.squeeze_blank and is_empty and was_empty:
            continue
        was_empty = is_empty

        if opts.number or (opts.number_nonblank and not is_empty):
            line_number += 1
            print(f"{line_number:6d}\t{line}{end_char}")
        else:
            print(f"{line}{end_char}")


def main(argv=None):
    """Parses arguments and runs the cat logic."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Concatenate and print files.",
        usage="%(prog)s [-n | -b] [-Es] [file ...]"
    )
    number_group = parser.add_mutually_exclusive_group()
    number_group.add_argument('-n', '--number', action='store_true', help='Number all output lines.')
    number_group.add_argument('-b', '--number-nonblank', action='store_true', help='Number non-empty output lines.')
    parser.add_argument('-E', '--show-ends', action='store_true', help='Display $ at end of each line.')
    parser.add_argument('-s', '--squeeze-blank', action='store_true', help='Squeeze multiple adjacent empty lines.')

    parser.add_argument('files', nargs='*', default=['-'], help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)
    exit_status = 0

    for filepath in args.files:
        try:
            with open_input(filepath) as f:
                cat_stream(f, args)
        except FileAccessError as e:
            report(PROG, e)
            exit_status = 1

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

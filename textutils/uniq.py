#!/usr/bin/env python3
"""
Name: uniq
Description: report or filter out repeated lines in a file
License: perl
"""

import sys
import argparse
import itertools

from textutils.errors import FileAccessError
from textutils.inputs import open_input, lossy, report

PROG = 'uniq'


def comparison_key(line: str) -> str:
    """Lines are compared without their trailing whitespace or newline."""
    return line.rstrip()


def uniq_lines(lines, count=False, repeated=False, unique=False):
    """
    Groups adjacent equal lines and yields the text to write for each
    group: its first line, with the group size in front when counting.
    """
    for _, group in itertools.groupby(lines, key=comparison_key):
        group_lines = list(group)
        size = len(group_lines)
        first_line = group_lines[0]

        if repeated and size == 1:
            continue
        if unique and size > 1:
            continue
        yield f"{size:4d} {first_line}" if count else first_line


def main(argv=None):
    """Parses arguments and runs the uniq logic."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Report or filter out repeated adjacent lines in a file.",
        usage="%(prog)s [-c | -d | -u] [input_file [output_file]]"
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument('-c', '--count', action='store_true', help='Precede each line with its repetition count.')
    mode_group.add_argument('-d', '--repeated', action='store_true', help='Only print duplicate lines, one for each group.')
    mode_group.add_argument('-u', '--unique', action='store_true', help='Only print lines that are not repeated.')

    parser.add_argument('input_file', nargs='?', default='-', help="Input file (default: stdin).")
    parser.add_argument('output_file', nargs='?', help="Output file (default: stdout).")

    args = parser.parse_args(argv)

    try:
        with open_input(args.input_file) as input_stream:
            lines = (lossy(raw) for raw in input_stream)
            output = uniq_lines(lines, args.count, args.repeated, args.unique)
            if args.output_file:
                with open(args.output_file, 'w') as output_stream:
                    output_stream.writelines(output)
            else:
                sys.stdout.writelines(output)
    except FileAccessError as e:
        report(PROG, e)
        sys.exit(1)
    except OSError as e:
        report(PROG, f"{e.filename}: {e.strerror}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()

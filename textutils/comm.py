#!/usr/bin/env python3
"""
Name: comm
Description: select or reject lines common to two files
License: public domain
"""

import sys
import argparse

from textutils.errors import FileAccessError
from textutils.inputs import open_input, lossy, chomp, report, STDIN

PROG = 'comm'

ONLY_FIRST, ONLY_SECOND, BOTH = 1, 2, 3


def merge_lines(lines1, lines2, insensitive=False):
    """
    Walks two sorted line sequences in step and yields (column, line)
    pairs: column 1 for lines only in the first, 2 for lines only in the
    second, 3 for lines in both.
    """
    key = str.lower if insensitive else (lambda s: s)
    it1, it2 = iter(lines1), iter(lines2)
    line1, line2 = next(it1, None), next(it2, None)

    while line1 is not None or line2 is not None:
        if line2 is None or (line1 is not None and key(line1) < key(line2)):
            yield ONLY_FIRST, line1
            line1 = next(it1, None)
        elif line1 is None or key(line2) < key(line1):
            yield ONLY_SECOND, line2
            line2 = next(it2, None)
        else:
            yield BOTH, line1
            line1, line2 = next(it1, None), next(it2, None)


def format_columns(merged, show_col, delimiter):
    """Indents each line by one delimiter per visible column to its left."""
    for column, line in merged:
        if not show_col[column]:
            continue
        indent = sum(1 for c in range(1, column) if show_col[c])
        yield delimiter * indent + line


def main(argv=None):
    """Parses arguments and runs the line comparison logic."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Select or reject lines common to two sorted files.",
        usage="%(prog)s [-123i] [-d delim] file1 file2"
    )
    parser.add_argument('-1', dest='suppress1', action='store_true', help='Suppress column 1 (lines unique to file1)')
    parser.add_argument('-2', dest='suppress2', action='store_true', help='Suppress column 2 (lines unique to file2)')
    parser.add_argument('-3', dest='suppress3', action='store_true', help='Suppress column 3 (lines common to both files)')
    parser.add_argument('-i', dest='insensitive', action='store_true', help='Case-insensitive comparison of lines')
    parser.add_argument('-d', '--output-delimiter', dest='delimiter', default='\t', help='Output delimiter (default: TAB)')
    parser.add_argument('file1', help='First file to compare, or - for stdin.')
    parser.add_argument('file2', help='Second file to compare, or - for stdin.')

    args = parser.parse_args(argv)

    # show_col[i] is True if we should print column i.
    show_col = [None, not args.suppress1, not args.suppress2, not args.suppress3]

    if args.file1 == STDIN and args.file2 == STDIN:
        report(PROG, 'Both input files cannot be STDIN ("-")')
        sys.exit(1)

    try:
        with open_input(args.file1) as f1, open_input(args.file2) as f2:
            lines1 = (lossy(chomp(raw)) for raw in f1)
            lines2 = (lossy(chomp(raw)) for raw in f2)
            merged = merge_lines(lines1, lines2, args.insensitive)
            for line in format_columns(merged, show_col, args.delimiter):
                print(line)
    except FileAccessError as e:
        report(PROG, e)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Name: wc
Description: line, word, character, and byte counter
License: perl
"""

import sys
import argparse
from typing import NamedTuple

from textutils.errors import FileAccessError
from textutils.inputs import open_input, lossy, report, STDIN

PROG = 'wc'


class FileInfo(NamedTuple):
    lines: int = 0
    words: int = 0
    bytes: int = 0
    chars: int = 0

    def __add__(self, other):
        return FileInfo(*(a + b for a, b in zip(self, other)))


def count_in_stream(stream) -> FileInfo:
    """
    Reads a binary stream and returns its counts. A last line without a
    trailing newline still counts as a line.
    """
    lines = words = num_bytes = chars = 0
    for byte_line in stream:
        line = lossy(byte_line)
        lines += 1
        words += len(line.split())
        num_bytes += len(byte_line)
        chars += len(line)
    return FileInfo(lines, words, num_bytes, chars)


def format_counts(counts: FileInfo, args, filename=STDIN) -> str:
    """Formats the selected counts into one output line."""
    output_parts = []
    if args.l: output_parts.append(f"{counts.lines:>8}")
    if args.w: output_parts.append(f"{counts.words:>8}")
    if args.c: output_parts.append(f"{counts.bytes:>8}")
    if args.m: output_parts.append(f"{counts.chars:>8}")

    if filename != STDIN:
        output_parts.append(f" {filename}")
    return "".join(output_parts)


def main(argv=None):
    """Parses arguments and orchestrates the counting process."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="A line, word, character, and byte counter.",
        usage="%(prog)s [-l] [-w] [-c | -m] [file...]"
    )
    parser.add_argument('-l', '--lines', dest='l', action='store_true', help='Count lines.')
    parser.add_argument('-w', '--words', dest='w', action='store_true', help='Count words.')
    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument('-c', '--bytes', dest='c', action='store_true', help='Count bytes.')
    size_group.add_argument('-m', '--chars', dest='m', action='store_true', help='Count characters.')

    parser.add_argument('files', nargs='*', default=[STDIN], help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    # Default is -lwc if no flags are specified.
    if not any([args.l, args.w, args.c, args.m]):
        args.l = args.w = args.c = True

    total = FileInfo()
    exit_status = 0

    for filepath in args.files:
        try:
            with open_input(filepath) as f:
                file_counts = count_in_stream(f)
        except FileAccessError as e:
            report(PROG, e)
            exit_status = 1
            continue

        print(format_counts(file_counts, args, filepath))
        total += file_counts

    if len(args.files) > 1:
        print(format_counts(total, args, "total"))

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

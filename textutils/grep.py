#!/usr/bin/env python3
"""
Name: grep
Description: search for regular expressions and print
License: perl
"""

import sys
import os
import errno
import re
import argparse
from collections import deque

from textutils.errors import FileAccessError
from textutils.inputs import open_input, lossy, report, STDIN

PROG = 'grep'

# Constants
EX_MATCHED = 0
EX_NOMATCH = 1
EX_FAILURE = 2


def compile_pattern(pattern: str, insensitive: bool):
    """Compiles the search pattern, exiting on a bad expression."""
    flags = re.IGNORECASE if insensitive else 0
    try:
        return re.compile(pattern, flags)
    except re.error:
        report(PROG, f'Invalid pattern "{pattern}"')
        sys.exit(EX_FAILURE)


def find_files(paths, recursive: bool):
    """
    Expands the command line paths into files to search. Directories are
    walked in name order when recursive, otherwise they are an error.

    Yields either a path or a FileAccessError for the caller to report.
    """
    file_queue = deque(paths)
    while file_queue:
        file_path = file_queue.popleft()

        if file_path == STDIN:
            yield file_path
        elif os.path.isdir(file_path):
            if not recursive:
                yield FileAccessError(file_path, IsADirectoryError(errno.EISDIR, 'Is a directory', file_path))
                continue
            try:
                entries = sorted(os.scandir(file_path), key=lambda e: e.name)
            except OSError as e:
                yield FileAccessError(file_path, e)
                continue
            # Links to directories are not descended into.
            children = [entry.path for entry in entries
                        if not (entry.is_symlink() and entry.is_dir())]
            # Depth first: a directory's entries go ahead of its siblings.
            file_queue.extendleft(reversed(children))
        elif os.path.exists(file_path):
            yield file_path
        else:
            yield FileAccessError(file_path, FileNotFoundError(errno.ENOENT, 'No such file or directory', file_path))


def find_lines(stream, regex, invert: bool):
    """Yields the lines of a binary stream that match (or, inverted, don't)."""
    for raw in stream:
        line = lossy(raw)
        if bool(regex.search(line)) != invert:
            yield line


def main(argv=None):
    """Parses arguments, then searches each input in turn."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Search for regular expressions and print matching lines.",
        usage="%(prog)s [-rciv] pattern [file ...]"
    )
    parser.add_argument('-r', '--recursive', action='store_true', help='recursive on directories')
    parser.add_argument('-i', '--insensitive', action='store_true', help='case insensitive')
    parser.add_argument('-c', '--count', action='store_true', help='give count of lines matching')
    parser.add_argument('-v', '--invert-match', action='store_true', help="invert search sense (lines that DON'T match)")
    parser.add_argument('pattern', help='pattern')
    parser.add_argument('files', nargs='*', default=[STDIN])

    args = parser.parse_args(argv)
    regex = compile_pattern(args.pattern, args.insensitive)

    errors = 0
    grand_total = 0
    entries = list(find_files(args.files, args.recursive))
    show_names = len(entries) > 1

    for entry in entries:
        if isinstance(entry, FileAccessError):
            report(PROG, entry)
            errors += 1
            continue

        prefix = f"{entry}:" if show_names else ''
        try:
            with open_input(entry) as f:
                matches = find_lines(f, regex, args.invert_match)
                if args.count:
                    found = sum(1 for _ in matches)
                    print(f"{prefix}{found}")
                else:
                    found = 0
                    for line in matches:
                        found += 1
                        sys.stdout.write(f"{prefix}{line}")
                        if not line.endswith('\n'):
                            sys.stdout.write('\n')
        except FileAccessError as e:
            report(PROG, e)
            errors += 1
            continue
        grand_total += found

    if errors:
        sys.exit(EX_FAILURE)
    elif grand_total > 0:
        sys.exit(EX_MATCHED)
    else:
        sys.exit(EX_NOMATCH)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Name: find
Description: walk a file hierarchy and print matching entries
License: perl
"""

import sys
import os
import re
import argparse
from collections import deque

from textutils.inputs import report

PROG = 'find'

# Accepted spellings for each entry type.
ENTRY_TYPES = {
    'f': 'file', 'file': 'file',
    'd': 'dir', 'dir': 'dir',
    'l': 'link', 'link': 'link',
}


def name_regex(name: str):
    """argparse type for --name: a regular expression matched against file names."""
    try:
        return re.compile(name)
    except re.error:
        raise argparse.ArgumentTypeError(f'invalid --name "{name}"')


def entry_type(value: str) -> str:
    """argparse type for --type."""
    try:
        return ENTRY_TYPES[value]
    except KeyError:
        raise argparse.ArgumentTypeError(f"invalid --type \"{value}\" (choose from 'f', 'd', 'l')")


def type_of(path: str) -> str:
    """Classifies a path without following symbolic links."""
    if os.path.islink(path):
        return 'link'
    if os.path.isdir(path):
        return 'dir'
    return 'file'


def walk(path: str, errors: list):
    """
    Yields PATH and everything below it, depth first, entries of each
    directory in name order. Symbolic links to directories are listed but
    not descended into. Unreadable directories are appended to ERRORS.
    """
    pending = deque([path])
    while pending:
        current = pending.popleft()
        yield current
        if os.path.islink(current) or not os.path.isdir(current):
            continue
        try:
            names = sorted(os.listdir(current))
        except OSError as e:
            errors.append(f"{current}: {e.strerror}")
            continue
        # Depth first: a directory's entries go ahead of its siblings.
        pending.extendleft(reversed([os.path.join(current, name) for name in names]))


def matches(path: str, names, types) -> bool:
    """True if PATH passes both the --name and --type filters."""
    if types and type_of(path) not in types:
        return False
    if names:
        basename = os.path.basename(os.path.normpath(path))
        return any(regex.search(basename) for regex in names)
    return True


def main(argv=None):
    """Parses arguments and prints every matching entry under each path."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Walk a file hierarchy and print matching entries.",
        usage="%(prog)s [path ...] [-n name ...] [-t type ...]"
    )
    parser.add_argument('paths', nargs='*', default=['.'], help='Search paths (default: .)')
    parser.add_argument('-n', '--name', dest='names', type=name_regex, nargs='+', action='extend',
                        default=[], help='Regular expression matched against entry names.')
    parser.add_argument('-t', '--type', dest='types', type=entry_type, nargs='+', action='extend',
                        default=[], help='Entry type: f (file), d (dir) or l (link).')

    args = parser.parse_args(argv)
    exit_status = 0

    for path in args.paths:
        if not os.path.lexists(path):
            report(PROG, f"{path}: No such file or directory")
            exit_status = 1
            continue

        errors = []
        for entry in walk(path, errors):
            if matches(entry, args.names, args.types):
                print(entry)
        for error in errors:
            report(PROG, error)
            exit_status = 1

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

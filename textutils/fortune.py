#!/usr/bin/env python3

"""
Name: fortune
Description: print a random, hopefully interesting, adage
License: gpl
"""

import sys
import os
import errno
import re
import random
import argparse
from pathlib import Path
from typing import NamedTuple

from textutils.inputs import lossy, report

PROG = 'fortune'

# Line that separates one fortune from the next.
DELIM = '%'


class Fortune(NamedTuple):
    source: str
    text: str


def find_files(paths) -> list:
    """
    Expands files and directories into a sorted, duplicate-free list of
    fortune files. Directories are searched recursively; strfile '.dat'
    indices are skipped. A path that does not exist raises FileNotFoundError.
    """
    files = set()
    for path in paths:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        if p.is_dir():
            for dirpath, _, filenames in os.walk(p):
                for name in filenames:
                    if not name.endswith('.dat'):
                        files.add(Path(dirpath, name))
        else:
            files.add(p)
    return sorted(files)


def read_fortunes(paths) -> list:
    """Reads every fortune from the given files, in file order."""
    fortunes = []
    for path in paths:
        source = os.path.basename(path)
        text = lossy(Path(path).read_bytes())
        # Fortunes are separated by lines containing only DELIM, CRLF included.
        for chunk in re.split(rf'^{re.escape(DELIM)}[ \t\r]*$', text, flags=re.MULTILINE):
            chunk = chunk.strip()
            if chunk:
                fortunes.append(Fortune(source, chunk))
    return fortunes


def pick_fortune(fortunes, seed=None):
    """Picks one fortune's text at random; a seed makes the choice repeatable."""
    if not fortunes:
        return None
    return random.Random(seed).choice(fortunes).text


def print_matching_fortunes(fortunes, regex):
    """
    Prints every fortune whose text or source file name matches. Each run of
    fortunes from one source is announced on stderr. Returns the number printed.
    """
    found = 0
    previous_source = None
    for fortune in fortunes:
        if not (regex.search(fortune.source) or regex.search(fortune.text)):
            continue
        if fortune.source != previous_source:
            sys.stderr.write(f"({fortune.source})\n{DELIM}\n")
            previous_source = fortune.source
        print(f"{fortune.text}\n{DELIM}")
        found += 1
    return found


def seed_value(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' not a valid integer")


def main(argv=None):
    """Main function to parse arguments and run the fortune program."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Print a random, hopefully interesting, adage.",
        usage="%(prog)s [-i] [-m pattern] [-s seed] file/dir ..."
    )
    parser.add_argument('-m', '--pattern', help='Print out all fortunes which match the pattern.')
    parser.add_argument('-i', '--insensitive', action='store_true', help='Ignore case for -m patterns.')
    parser.add_argument('-s', '--seed', type=seed_value, help='Random seed.')
    parser.add_argument('sources', nargs='+', help='Fortune files or directories.')

    args = parser.parse_args(argv)

    try:
        fortunes = read_fortunes(find_files(args.sources))
    except OSError as e:
        report(PROG, f"{e.filename}: {e.strerror}")
        sys.exit(1)

    if args.pattern is not None:
        flags = re.IGNORECASE if args.insensitive else 0
        try:
            regex = re.compile(args.pattern, flags)
        except re.error:
            report(PROG, f"invalid pattern: {args.pattern}")
            sys.exit(1)
        if not print_matching_fortunes(fortunes, regex):
            print("No fortunes found")
    else:
        fortune = pick_fortune(fortunes, args.seed)
        print(fortune if fortune is not None else "No fortunes found")

    sys.exit(0)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Name: cut
Description: select portions of each line of a file
License: perl
"""

import sys
import argparse
from typing import NamedTuple

from textutils.errors import ConfigError, FileAccessError
from textutils.inputs import open_input, lossy, chomp, report
from textutils.ranges import (
    PositionList,
    parse_positions,
    extract_bytes,
    extract_chars,
    extract_fields,
)

PROG = 'cut'


class Config(NamedTuple):
    """Options for one run, fixed once the command line is parsed."""
    files: tuple
    delimiter: str
    mode: str  # 'bytes', 'chars' or 'fields'
    positions: PositionList


def parse_delimiter(delim: str) -> str:
    """The field delimiter must encode to exactly one byte."""
    if len(delim.encode('utf-8')) != 1:
        raise ConfigError(f'--delim "{delim}" must be a single byte')
    return delim


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Select portions of each line of a file.",
        usage="%(prog)s [-d delim] (-b list | -c list | -f list) [file ...]"
    )
    # The selectors are mutually exclusive and one of them is required.
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument('-b', '--bytes', dest='byte_list', metavar='LIST',
                            help='The list specifies byte positions.')
    mode_group.add_argument('-c', '--chars', dest='char_list', metavar='LIST',
                            help='The list specifies character positions.')
    mode_group.add_argument('-f', '--fields', dest='field_list', metavar='LIST',
                            help='The list specifies fields.')

    parser.add_argument('-d', '--delim', dest='delimiter', default='\t',
                        help="Use DELIM instead of TAB for field delimiter.")
    parser.add_argument('files', nargs='*', default=['-'],
                        help='Files to process. Reads from stdin if none are given.')
    return parser


def get_config(argv=None) -> Config:
    """
    Parses the command line into a Config. Argument syntax errors exit
    through argparse; bad lists and delimiters raise ConfigError.
    """
    args = build_parser().parse_args(argv)

    delimiter = parse_delimiter(args.delimiter)
    if args.byte_list is not None:
        mode, list_str = 'bytes', args.byte_list
    elif args.char_list is not None:
        mode, list_str = 'chars', args.char_list
    else:
        mode, list_str = 'fields', args.field_list

    return Config(
        files=tuple(args.files),
        delimiter=delimiter,
        mode=mode,
        positions=parse_positions(list_str),
    )


def cut_line(raw: bytes, config: Config) -> str:
    """Applies the configured selection to one line, without its newline."""
    if config.mode == 'bytes':
        return extract_bytes(raw, config.positions)

    line = lossy(raw)
    if config.mode == 'chars':
        return extract_chars(line, config.positions)

    fields = line.split(config.delimiter)
    return config.delimiter.join(extract_fields(fields, config.positions))


def run(config: Config) -> int:
    """Processes every input in order. Returns the exit status."""
    exit_status = 0
    for filepath in config.files:
        try:
            with open_input(filepath) as f:
                for raw in f:
                    print(cut_line(chomp(raw), config))
        except FileAccessError as e:
            report(PROG, e)
            exit_status = 1
        except OSError as e:
            report(PROG, f"{filepath}: {e.strerror or e}")
            exit_status = 1
    return exit_status


def main(argv=None):
    """Parses arguments and dispatches to the extraction loop."""
    try:
        config = get_config(argv)
    except ConfigError as e:
        report(PROG, e)
        sys.exit(1)

    sys.exit(run(config))


if __name__ == "__main__":
    main()

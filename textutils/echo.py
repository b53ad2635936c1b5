#!/usr/bin/env python3
"""
Name: echo
Description: echo arguments
License: perl

Prints the command line arguments separated by spaces. A newline is
printed at the end unless the '-n' option is given.
"""

import sys
import argparse


def main(argv=None):
    """Parses arguments and prints them."""
    parser = argparse.ArgumentParser(
        prog='echo',
        description="Print the arguments separated by spaces.",
        usage="%(prog)s [-n] text ..."
    )
    parser.add_argument('-n', '--omit-newline', action='store_true', help='Do not print the trailing newline.')
    parser.add_argument('text', nargs='+', help='Text to print.')

    args = parser.parse_args(argv)

    print(" ".join(args.text), end='' if args.omit_newline else '\n')
    sys.exit(0)


if __name__ == "__main__":
    main()

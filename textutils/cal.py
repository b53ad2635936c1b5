#!/usr/bin/env python3
"""
Name: cal
Description: displays a calendar
License: gpl
"""

import sys
import argparse
from datetime import date, timedelta

MONTH_NAMES = ['January', 'February', 'March', 'April', 'May', 'June',
               'July', 'August', 'September', 'October', 'November', 'December']

# Reverse video, used to mark today.
HIGHLIGHT_ON = '\x1b[7m'
HIGHLIGHT_OFF = '\x1b[0m'

# --- Argument converters ---

def parse_month(value: str) -> int:
    """Accepts 1-12 or a case-insensitive prefix of a month name."""
    if value.isdigit() and 1 <= int(value) <= 12:
        return int(value)
    lower = value.lower()
    if lower:
        for number, name in enumerate(MONTH_NAMES, 1):
            if name.lower().startswith(lower):
                return number
    raise argparse.ArgumentTypeError(f"month '{value}' not in the range 1 through 12")


def parse_year(value: str) -> int:
    """Accepts 1-9999."""
    try:
        year = int(value)
    except ValueError:
        year = 0
    if not 1 <= year <= 9999:
        raise argparse.ArgumentTypeError(f"year '{value}' not in the range 1 through 9999")
    return year

# --- Date helpers ---

def last_day_in_month(year: int, month: int) -> date:
    """The last date of the given month."""
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)

# --- Formatting and Display Functions ---

def format_month_header(year: int, month: int, print_year: bool) -> str:
    title = MONTH_NAMES[month - 1]
    if print_year:
        title += f" {year}"
    return f"{title:^20}  "


def format_days(year: int, month: int, today: date) -> list:
    """Six week rows of day numbers, Sunday first, each 22 columns wide."""
    first = date(year, month, 1)
    last = last_day_in_month(year, month)
    # date.weekday() counts from Monday; the grid starts on Sunday.
    padding = (first.weekday() + 1) % 7

    cells = ['  '] * 42
    for day in range(1, last.day + 1):
        cell = f"{day:>2}"
        if first <= today <= last and day == today.day:
            cell = f"{HIGHLIGHT_ON}{cell}{HIGHLIGHT_OFF}"
        cells[padding + day - 1] = cell

    return [" ".join(cells[i:i + 7]) + "  " for i in range(0, 42, 7)]


def format_month(year: int, month: int, print_year: bool, today: date) -> list:
    """Generates a list of strings representing a single formatted month."""
    lines = [format_month_header(year, month, print_year), "Su Mo Tu We Th Fr Sa  "]
    lines.extend(format_days(year, month, today))
    return lines


def format_year(year: int, today: date) -> list:
    """A whole year, three months side by side."""
    lines = [f"{year:>32}"]
    months = [format_month(year, m, False, today) for m in range(1, 13)]

    for row in range(0, 12, 3):
        for parts in zip(*months[row:row + 3]):
            lines.append("".join(parts))
        if row < 9:
            lines.append("")
    return lines


def main(argv=None):
    """Parses arguments and displays the appropriate calendar."""
    parser = argparse.ArgumentParser(
        prog='cal',
        description="Displays a calendar.",
        usage="%(prog)s [-m month] [-y] [year]"
    )
    parser.add_argument('-m', dest='month', type=parse_month, help='Month name or number (1-12).')
    parser.add_argument('-y', '--year', dest='show_current_year', action='store_true',
                        help='Show the whole current year.')
    parser.add_argument('year', nargs='?', type=parse_year, help='Year (1-9999).')

    args = parser.parse_args(argv)
    today = date.today()

    if args.show_current_year:
        if args.month is not None or args.year is not None:
            parser.error("-y cannot be used with a month or a year")
        year, month = today.year, None
    elif args.month is None and args.year is None:
        year, month = today.year, today.month
    else:
        year, month = args.year or today.year, args.month

    if month:
        lines = format_month(year, month, True, today)
    else:
        lines = format_year(year, today)
    print("\n".join(lines))
    sys.exit(0)


if __name__ == "__main__":
    main()

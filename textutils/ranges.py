"""
Name: ranges
Description: parse cut-style position lists and apply them to lines
License: perl

A position list is a comma-separated string such as "1,3-5,7-". Each token
becomes a half-open, 0-based slice:

    N     ->  slice(N-1, N)
    -N    ->  slice(0, N)
    N-    ->  slice(N-1, None)    (to the end of the line)
    M-N   ->  slice(M-1, N)

Slices are kept in the order given; overlapping ranges are not merged, so
they repeat output.
"""

import re
from typing import Sequence, Tuple

from textutils.errors import InvalidListValue, InvalidRangeOrder

# A run of digits, optionally with '_' separators after the first digit.
DECIMAL = r'[0-9][0-9_]*'

# Alternatives are tried in order, longest shape first.
TOKEN = re.compile(
    rf'(?P<start>{DECIMAL})-(?P<end>{DECIMAL})'
    rf'|(?P<from>{DECIMAL})-'
    rf'|-(?P<upto>{DECIMAL})'
    rf'|(?P<single>{DECIMAL})'
)

PositionList = Tuple[slice, ...]


def parse_number(text: str) -> int:
    """Converts a decimal token to a 1-based position; zero is rejected."""
    value = int(text.replace('_', ''))
    if value == 0:
        raise InvalidListValue(text)
    return value


def tokenize(list_str: str) -> list:
    """
    Splits a position list on ',' and checks every piece against the
    grammar. Returns the regex matches, one per piece.
    """
    if not list_str:
        return []

    matches = []
    for part in list_str.split(','):
        match = TOKEN.match(part)
        if not match:
            raise InvalidListValue(part)
        if match.end() != len(part):
            # Cite only what the grammar could not consume, e.g. 'a' in '1-a'.
            raise InvalidListValue(part[match.end():])
        matches.append(match)
    return matches


def normalize(match) -> slice:
    """Turns one token match into a 0-based half-open slice."""
    if match.group('start') is not None:
        start = parse_number(match.group('start'))
        end = parse_number(match.group('end'))
        if start > end:
            raise InvalidRangeOrder(start, end)
        return slice(start - 1, end)

    if match.group('from') is not None:
        return slice(parse_number(match.group('from')) - 1, None)

    if match.group('upto') is not None:
        return slice(0, parse_number(match.group('upto')))

    position = parse_number(match.group('single'))
    return slice(position - 1, position)


def parse_positions(list_str: str) -> PositionList:
    """
    Parses a cut-style list string (e.g., "1,5-7,10-") into a tuple of
    slices. An empty string gives an empty tuple.

    Raises InvalidListValue for malformed tokens or zero positions, and
    InvalidRangeOrder for decreasing ranges.
    """
    return tuple(normalize(match) for match in tokenize(list_str))


def format_positions(positions: PositionList) -> str:
    """Writes a position list back out in 1-based form."""
    parts = []
    for r in positions:
        if r.stop is None:
            parts.append(f"{r.start + 1}-")
        elif r.stop - r.start == 1:
            parts.append(str(r.stop))
        else:
            parts.append(f"{r.start + 1}-{r.stop}")
    return ",".join(parts)


def extract_bytes(line, positions: PositionList) -> str:
    """
    Selects bytes of a line. Splitting a multi-byte character leaves a
    replacement character in the result rather than raising.
    """
    raw = line.encode('utf-8') if isinstance(line, str) else line
    selected = b''.join(raw[r] for r in positions)
    return selected.decode('utf-8', errors='replace')


def extract_chars(line: str, positions: PositionList) -> str:
    """Selects characters (code points, not bytes) of a line."""
    return ''.join(line[r] for r in positions)


def extract_fields(record: Sequence[str], positions: PositionList) -> list:
    """Selects fields of an already split record, in range order."""
    return [field for r in positions for field in record[r]]

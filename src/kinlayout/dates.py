"""Birth/death date parsing and the ordering used for siblings."""

from datetime import date
import re

# "25.03.1991" is the canonical form; ISO "1991-03-25" is accepted as well.
_DATE_PATTERNS = [
    (re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$"), ("day", "month", "year")),
    (re.compile(r"^(\d{4})-(\d{2})-(\d{2})$"), ("year", "month", "day")),
]


def parse_date(date_str: str | None) -> date | None:
    """
    Parse a person date string into a date.
    Returns None if the string is empty, malformed or not a calendar date.

    Handles formats like:
    - "25.03.1991"
    - "1991-03-25"
    """
    if not date_str:
        return None

    s = date_str.strip()
    for pattern, order in _DATE_PATTERNS:
        match = pattern.match(s)
        if not match:
            continue
        parts = dict(zip(order, (int(g) for g in match.groups())))
        try:
            return date(parts["year"], parts["month"], parts["day"])
        except ValueError:
            return None

    return None


def date_ordinal(date_str: str | None) -> int | None:
    """Comparable numeric timestamp for a date string (proleptic ordinal)."""
    parsed = parse_date(date_str)
    return parsed.toordinal() if parsed else None


def birth_order_key(earliest: int | None, smallest_id: int, tiebreak: str) -> tuple:
    """
    Sort key giving a total order: dated entries first (older first),
    then undated entries; ties broken by smallest id, then by `tiebreak`.
    """
    if earliest is None:
        return (1, 0, smallest_id, tiebreak)
    return (0, earliest, smallest_id, tiebreak)

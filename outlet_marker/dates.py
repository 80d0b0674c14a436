import datetime
import re

from dateutil import parser as date_parser

day_first_regex: re.Pattern = re.compile(
    r"^(?P<day>\d{1,2})[./-](?P<month>\d{1,2})[./-](?P<year>\d{4})$"
)
year_first_regex: re.Pattern = re.compile(
    r"^(?P<year>\d{4})[./-](?P<month>\d{1,2})[./-](?P<day>\d{1,2})$"
)
FALLBACK_DEFAULTS = (datetime.datetime(2000, 1, 1), datetime.datetime(2001, 2, 2))


def _from_match(match: re.Match) -> datetime.date | None:
    try:
        return datetime.date(
            int(match.group("year")), int(match.group("month")), int(match.group("day"))
        )
    except ValueError:
        return None


def parse_date(text) -> datetime.date | None:
    """
    Parse "25.12.2024", "25/12/2024", "2024-12-25" and friends.
    Anything else goes through dateutil; returns None when nothing fits.
    """
    if not text:
        return None
    trimmed = str(text).strip()
    if not trimmed:
        return None

    for regex in (day_first_regex, year_first_regex):
        if match := regex.match(trimmed):
            return _from_match(match)

    # parse against two different defaults: any field taken from a default
    # (e.g. the year of "12 Dec") makes the results differ
    try:
        first = date_parser.parse(trimmed, dayfirst=True, default=FALLBACK_DEFAULTS[0])
        second = date_parser.parse(trimmed, dayfirst=True, default=FALLBACK_DEFAULTS[1])
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first.date()


def format_date(date: datetime.date) -> str:
    return f"{date.day:02d}.{date.month:02d}.{date.year}"


def format_date_text(text: str) -> str:
    """Reformat as DD.MM.YYYY, or give the text back untouched."""
    date = parse_date(text)
    if date is None:
        return text
    return format_date(date)


def is_date_in_range(
    check_date: datetime.date,
    start_date: datetime.date | None,
    end_date: datetime.date | None,
) -> bool:
    if start_date and end_date:
        return start_date <= check_date <= end_date
    if start_date:
        return check_date >= start_date
    if end_date:
        return check_date <= end_date
    return True

"""
Duration queries over the video sheet.

Column layout of a data row (row 1 is the header):

    A campaign name | B TK type | C duration, seconds | F start date |
    G end date | H paid flag

A record matches when every filter given in the QueryFilter matches:
- date: the date lies between the record's start and end dates (an open
  bound is fine, but a record with neither date never matches);
- tk_type: either string contains the other, ignoring case;
- tk_number: the record's row has a non-empty, non-"0" value in that TK's
  column.
"""

import datetime
import re

from .dates import format_date_text, is_date_in_range, parse_date
from .exceptions import InvalidQueryError
from .models import QueryFilter, QueryResult, VideoRecord

CAMPAIGN_COL = 0
TYPE_COL = 1
DURATION_COL = 2
START_DATE_COL = 5
END_DATE_COL = 6
PAID_COL = 7

duration_regex: re.Pattern = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def _cell(row: list, index: int) -> str:
    if len(row) <= index or row[index] is None:
        return ""
    return str(row[index]).strip()


def parse_duration(text: str) -> float:
    """Accepts "12,5" or "12.5"; a leading number is enough, e.g. "30 сек"."""
    match = duration_regex.match(text.strip().replace(",", ".", 1))
    if match is None:
        return 0.0
    return float(match.group(0))


def extract_records(rows: list[list]) -> list[tuple[VideoRecord, str, str]]:
    """
    Records for every data row, paired with their raw start/end date text
    (the record itself holds the display form).
    """
    extracted = []
    for i, row in enumerate(rows[1:], start=1):
        if not row or len(row) < 3:
            continue
        campaign_name = _cell(row, CAMPAIGN_COL)
        duration = parse_duration(_cell(row, DURATION_COL) or "0")
        if not campaign_name and not duration:
            continue
        start_date_str = _cell(row, START_DATE_COL)
        end_date_str = _cell(row, END_DATE_COL)
        record = VideoRecord(
            campaign_name=campaign_name,
            tk_type=_cell(row, TYPE_COL),
            duration=duration,
            start_date=format_date_text(start_date_str),
            end_date=format_date_text(end_date_str),
            is_paid=_cell(row, PAID_COL),
            row_number=i + 1,
        )
        extracted.append((record, start_date_str, end_date_str))
    return extracted


def present_rows(column_values: list[list], first_row: int = 2) -> set[int]:
    """Row numbers whose TK cell is filled with something other than "0"."""
    rows = set()
    for offset, cell in enumerate(column_values):
        value = _cell(cell, 0) if isinstance(cell, list) else str(cell or "").strip()
        if value and value != "0":
            rows.add(first_row + offset)
    return rows


def type_matches(query: str, tk_type: str) -> bool:
    normalized_query = query.strip().casefold()
    normalized_type = tk_type.casefold()
    return normalized_query in normalized_type or normalized_type in normalized_query


def parse_query_date(query_filter: QueryFilter) -> datetime.date | None:
    if not query_filter.date:
        return None
    query_date = parse_date(query_filter.date)
    if query_date is None:
        raise InvalidQueryError(
            f"Unparseable query date: {query_filter.date!r}",
            context={"date": query_filter.date},
        )
    return query_date


def run_query(
    rows: list[list],
    query_filter: QueryFilter,
    tk_column_values: list | None = None,
    tk_resolved: bool = True,
) -> QueryResult:
    """
    Filter and sum the sheet rows.

    `tk_column_values` are the cells of the TK column from row 2 down; they
    are only read when `query_filter.tk_number` is set. `tk_resolved=False`
    means the TK header was not found, so nothing can match.
    """
    query_date = parse_query_date(query_filter)

    highlighted_rows = set()
    if query_filter.tk_number and tk_resolved:
        highlighted_rows = present_rows(tk_column_values or [])

    records = []
    for record, start_date_str, end_date_str in extract_records(rows):
        if query_date is not None:
            record_start = parse_date(start_date_str)
            record_end = parse_date(end_date_str)
            if not (record_start or record_end):
                continue
            if not is_date_in_range(query_date, record_start, record_end):
                continue

        if query_filter.tk_type and not type_matches(
            query_filter.tk_type, record.tk_type
        ):
            continue

        if query_filter.tk_number:
            if not tk_resolved or record.row_number not in highlighted_rows:
                continue

        records.append(record)

    return QueryResult(
        records=records, total_duration=sum(record.duration for record in records)
    )

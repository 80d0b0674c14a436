"""
Read the campaign name and TK numbers from an uploaded two-column table.

Column A holds the campaign (RK) name, usually repeated on every line, and
column B one TK number per line. TK numbers stay text so "007" keeps its
zeros. Decoding the uploaded file into rows is up to the caller.
"""

from collections import Counter

from .exceptions import (
    EmptyInputError,
    MissingCampaignColumnError,
    MissingOutletColumnError,
)
from .models import IngestResult

CAMPAIGN_HEADER_KEYWORDS = ("рк", "кампани", "campaign")
OUTLET_HEADER_KEYWORDS = ("тк", "точ", "outlet")


def _text(row: list, index: int) -> str:
    if len(row) <= index or row[index] is None:
        return ""
    return str(row[index]).strip()


def has_header_row(first_row: list) -> bool:
    first_a = _text(first_row, 0).casefold()
    first_b = _text(first_row, 1).casefold()
    if first_a and (
        first_a == "a" or any(word in first_a for word in CAMPAIGN_HEADER_KEYWORDS)
    ):
        return True
    if first_b and (
        first_b == "b" or any(word in first_b for word in OUTLET_HEADER_KEYWORDS)
    ):
        return True
    return False


def parse_table(table: list[list]) -> IngestResult:
    if not table:
        raise EmptyInputError()

    start_row = 1 if has_header_row(table[0]) else 0

    campaign_names = []
    tk_numbers = []
    for row in table[start_row:]:
        if campaign := _text(row, 0):
            campaign_names.append(campaign)
        if tk := _text(row, 1):
            tk_numbers.append(tk)

    if not campaign_names:
        raise MissingCampaignColumnError()
    if not tk_numbers:
        raise MissingOutletColumnError()

    # Counter keeps insertion order, so ties go to the first name seen
    campaign_name = Counter(campaign_names).most_common(1)[0][0]

    return IngestResult(
        campaign_name=campaign_name, tk_numbers=list(dict.fromkeys(tk_numbers))
    )

from .columns import in_tk_range
from .models import HighlightOutcome

GREEN = {"red": 0.0, "green": 1.0, "blue": 0.0}


def highlight_request(sheet_id: int, row_number: int, column_index: int) -> dict:
    """repeatCell request painting one cell green, leaving other formatting alone."""
    return {
        "repeatCell": {
            "range": {
                "sheetId": sheet_id,
                "startRowIndex": row_number - 1,
                "endRowIndex": row_number,
                "startColumnIndex": column_index,
                "endColumnIndex": column_index + 1,
            },
            "cell": {"userEnteredFormat": {"backgroundColor": dict(GREEN)}},
            "fields": "userEnteredFormat.backgroundColor",
        }
    }


def build_highlight_requests(
    sheet_id: int, tk_headers: dict[str, int], row_number: int, tk_numbers: list
) -> tuple[list[dict], HighlightOutcome]:
    requests = []
    outcome = HighlightOutcome()
    processed_tks = set()

    for tk in tk_numbers:
        tk_trimmed = str(tk).strip()
        if not tk_trimmed or tk_trimmed in processed_tks:
            continue
        processed_tks.add(tk_trimmed)

        column_index = tk_headers.get(tk_trimmed)
        if column_index is not None and in_tk_range(column_index):
            requests.append(highlight_request(sheet_id, row_number, column_index))
            outcome.highlighted += 1
        else:
            outcome.not_found.append(tk_trimmed)

    return requests, outcome

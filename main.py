import argparse
import csv
import json
import logging
import sys

from outlet_marker.commands import (
    format_highlight_result,
    format_ingest_result,
    format_query_result,
    parse_query_args,
)
from outlet_marker.exceptions import InvalidInputError
from outlet_marker.ingest import parse_table
from outlet_marker.sheets import (
    find_campaign_row,
    highlight_cells,
    open_session,
    query_video_duration,
)
from outlet_marker.status import get_status
from outlet_marker.utils import env

LOG_LEVEL = env.str("LOG_LEVEL", default="INFO")


def read_table(path: str) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8-sig") as f:
        return [row for row in csv.reader(f)]


def run_highlight(session, ingest_result) -> int:
    print(format_ingest_result(ingest_result))
    row = find_campaign_row(session, ingest_result.campaign_name)
    if row is None:
        print(
            f'❌ РК "{ingest_result.campaign_name}" не найдена в Google Таблице.\n\n'
            "Проверьте правильность написания названия кампании."
        )
        return 1
    print(f"✅ РК найдена в строке {row.row_number}")
    outcome = highlight_cells(session, row.row_number, ingest_result.tk_numbers)
    print(format_highlight_result(outcome))
    return 0


def run_query(session, query_filter) -> int:
    result = query_video_duration(session, query_filter)
    print(format_query_result(query_filter, result))
    return 0


def run_status(session) -> int:
    state = get_status(session)
    print(json.dumps(state.to_dict(), ensure_ascii=False, indent=2))
    return 0 if state.sheets_connected else 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Highlight outlet (TK) cells for a campaign and query video durations."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    highlight_parser = subparsers.add_parser(
        "highlight", help="column A: campaign name, column B: TK numbers (CSV)"
    )
    highlight_parser.add_argument("table")
    query_parser = subparsers.add_parser("query", help="e.g. тип ГМ дата 01.01.2025")
    query_parser.add_argument("filters", nargs="+")
    subparsers.add_parser("status")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # validate the input before touching the spreadsheet
    try:
        if args.command == "highlight":
            ingest_result = parse_table(read_table(args.table))
        elif args.command == "query":
            query_filter = parse_query_args(" ".join(args.filters))
    except InvalidInputError as e:
        print(f"❌ {e.message}")
        return 2

    session = open_session()
    if args.command == "highlight":
        return run_highlight(session, ingest_result)
    if args.command == "query":
        return run_query(session, query_filter)
    return run_status(session)


if __name__ == "__main__":
    sys.exit(main())

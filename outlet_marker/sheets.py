import datetime
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

from googleapiclient.discovery import build
from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials

from .columns import (
    TK_END_COLUMN,
    TK_END_INDEX,
    TK_START_COLUMN,
    TK_START_INDEX,
    index_to_letter,
)
from .headers import build_header_map
from .highlight import build_highlight_requests
from .models import (
    CampaignRow,
    HighlightOutcome,
    QueryFilter,
    QueryResult,
    SheetInfo,
    SpreadsheetInfo,
    ValueRange,
)
from .query import parse_query_date, run_query
from .rows import find_row
from .utils import env, retry_with_backoff

# If modifying these scopes, delete the file token.json.
SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

TOKEN_PATH = env.str("TOKEN_PATH", default="token.json")
CREDENTIALS_PATH = env.str("CREDENTIALS_PATH", default="credentials.json")
STRICT_HEADERS = env.bool("STRICT_HEADERS", default=False)

logger = logging.getLogger(__name__)


@dataclass
class SheetSession:
    """
    Credentials plus the Sheets service built from them.

    Pass one session into every operation and call `ensure_fresh` before
    using it; nothing is remembered between sessions.
    """

    spreadsheet_id: str
    credentials: Credentials
    service: object = None
    write_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        if self.service is None:
            self.service = build_service(self.credentials)

    @property
    def expiry(self) -> datetime.datetime | None:
        return self.credentials.expiry

    def ensure_fresh(self) -> "SheetSession":
        if self.credentials.valid:
            return self
        if not self.credentials.refresh_token:
            raise RefreshError("Google Sheets credentials expired and cannot be refreshed")
        logger.info("refreshing Google credentials (expired at %s)", self.expiry)
        self.credentials.refresh(Request())
        self.service = build_service(self.credentials)
        return self


def build_service(credentials: Credentials):
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


def load_credentials(token_path: str = TOKEN_PATH) -> Credentials:
    creds = None
    # The file token.json stores the user's access and refresh tokens, and is
    # created automatically when the authorization flow completes for the first
    # time.
    if Path(token_path).exists():
        creds = Credentials.from_authorized_user_file(token_path, SCOPES)
    # If there are no (valid) credentials available, let the user log in.
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            flow = InstalledAppFlow.from_client_secrets_file(CREDENTIALS_PATH, SCOPES)
            creds = flow.run_local_server(port=0)
        # Save the credentials for the next run
        with open(token_path, "w") as token:
            token.write(creds.to_json())
    return creds


def open_session(spreadsheet_id: str | None = None) -> SheetSession:
    spreadsheet_id = spreadsheet_id or env.str("SPREADSHEET_ID")
    return SheetSession(spreadsheet_id=spreadsheet_id, credentials=load_credentials())


def get_first_sheet_info(session: SheetSession) -> SheetInfo:
    payload = retry_with_backoff(
        lambda: (
            session.service.spreadsheets()
            .get(
                spreadsheetId=session.spreadsheet_id,
                fields="sheets(properties(title,sheetId))",
            )
            .execute()
        ),
        backoff_in_seconds=10,
    )
    return SheetInfo.from_response(payload, session.spreadsheet_id)


def get_values(session: SheetSession, range_: str) -> ValueRange:
    payload = retry_with_backoff(
        lambda: (
            session.service.spreadsheets()
            .values()
            .get(
                spreadsheetId=session.spreadsheet_id,
                range=range_,
                valueRenderOption="FORMATTED_VALUE",
            )
            .execute()
        ),
        backoff_in_seconds=10,
    )
    return ValueRange.from_response(payload)


def batch_update(session: SheetSession, requests: list[dict]):
    # a single attempt: the batch applies entirely or not at all
    return (
        session.service.spreadsheets()
        .batchUpdate(spreadsheetId=session.spreadsheet_id, body={"requests": requests})
        .execute()
    )


def get_spreadsheet_info(session: SheetSession) -> SpreadsheetInfo:
    session.ensure_fresh()
    payload = retry_with_backoff(
        lambda: (
            session.service.spreadsheets()
            .get(spreadsheetId=session.spreadsheet_id, fields="properties(title)")
            .execute()
        ),
        backoff_in_seconds=10,
    )
    return SpreadsheetInfo(
        title=payload.get("properties", {}).get("title") or "Unknown",
        url=f"https://docs.google.com/spreadsheets/d/{session.spreadsheet_id}",
    )


def find_campaign_row(session: SheetSession, campaign_name: str) -> CampaignRow | None:
    session.ensure_fresh()
    sheet_info = get_first_sheet_info(session)
    column_a = get_values(session, f"'{sheet_info.title}'!A:A").column(0)
    row = find_row(column_a, campaign_name)
    if row is None:
        logger.info("campaign %r not found in %r", campaign_name, sheet_info.title)
    return row


def get_tk_column_headers(
    session: SheetSession, sheet_info: SheetInfo | None = None
) -> dict[str, int]:
    sheet_info = sheet_info or get_first_sheet_info(session)
    result = get_values(
        session, f"'{sheet_info.title}'!{TK_START_COLUMN}1:{TK_END_COLUMN}1"
    )
    headers = result.values[0] if result.values else []
    return build_header_map(headers, TK_START_INDEX, TK_END_INDEX, strict=STRICT_HEADERS)


def highlight_cells(
    session: SheetSession, row_number: int, tk_numbers: list[str]
) -> HighlightOutcome:
    session.ensure_fresh()
    sheet_info = get_first_sheet_info(session)
    tk_headers = get_tk_column_headers(session, sheet_info)
    requests, outcome = build_highlight_requests(
        sheet_info.sheet_id, tk_headers, row_number, tk_numbers
    )
    if requests:
        with session.write_lock:
            batch_update(session, requests)
    logger.info(
        "row %d: highlighted %d cells, %d TK not found",
        row_number,
        outcome.highlighted,
        len(outcome.not_found),
    )
    return outcome


def query_video_duration(session: SheetSession, query_filter: QueryFilter) -> QueryResult:
    # reject a bad date before any remote read
    parse_query_date(query_filter)
    session.ensure_fresh()
    sheet_info = get_first_sheet_info(session)
    rows = get_values(session, f"'{sheet_info.title}'!A:H").values

    tk_column_values = None
    tk_resolved = True
    if query_filter.tk_number:
        tk_headers = get_tk_column_headers(session, sheet_info)
        column_index = tk_headers.get(query_filter.tk_number.strip())
        if column_index is None:
            tk_resolved = False
        else:
            col_letter = index_to_letter(column_index)
            tk_column_values = get_values(
                session, f"'{sheet_info.title}'!{col_letter}2:{col_letter}"
            ).values

    result = run_query(rows, query_filter, tk_column_values, tk_resolved)
    logger.info(
        "query %s matched %d records, %s s", query_filter, result.count, result.total_duration
    )
    return result

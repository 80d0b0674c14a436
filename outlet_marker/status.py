import logging
from dataclasses import dataclass

from googleapiclient.errors import HttpError
from google.auth.exceptions import GoogleAuthError

from .exceptions import SheetsResponseError
from .models import SpreadsheetInfo
from .sheets import SheetSession, get_spreadsheet_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HealthState:
    sheets_connected: bool
    spreadsheet: SpreadsheetInfo | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        state = {"googleSheetsConnected": self.sheets_connected}
        if self.spreadsheet is not None:
            state["spreadsheet"] = {
                "title": self.spreadsheet.title,
                "url": self.spreadsheet.url,
            }
        if self.error is not None:
            state["error"] = self.error
        return state


def get_status(session: SheetSession) -> HealthState:
    """Check the spreadsheet is reachable; failures become part of the state."""
    try:
        spreadsheet = get_spreadsheet_info(session)
    except (HttpError, GoogleAuthError, SheetsResponseError, OSError) as e:
        logger.error("Google Sheets unreachable: %s", e)
        return HealthState(sheets_connected=False, error=str(e))
    return HealthState(sheets_connected=True, spreadsheet=spreadsheet)

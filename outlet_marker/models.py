from dataclasses import dataclass, field

from .exceptions import SheetsResponseError


@dataclass
class SheetInfo:
    spreadsheet_id: str
    title: str
    sheet_id: int

    @classmethod
    def from_response(cls, payload: dict, spreadsheet_id: str) -> "SheetInfo":
        """Build from a spreadsheets.get payload, using the first sheet."""
        sheets = payload.get("sheets") if isinstance(payload, dict) else None
        if (
            not sheets
            or not isinstance(sheets[0], dict)
            or not isinstance(sheets[0].get("properties"), dict)
        ):
            raise SheetsResponseError(
                "No sheets found in spreadsheet",
                context={"spreadsheet_id": spreadsheet_id},
            )
        properties = sheets[0]["properties"]
        return cls(
            spreadsheet_id=spreadsheet_id,
            title=properties.get("title") or "Sheet1",
            sheet_id=properties.get("sheetId") or 0,
        )


@dataclass
class ValueRange:
    values: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_response(cls, payload: dict) -> "ValueRange":
        """Validate a values.get payload; a missing "values" key means empty."""
        values = payload.get("values", []) if isinstance(payload, dict) else None
        if not isinstance(values, list) or not all(
            isinstance(row, list) for row in values
        ):
            raise SheetsResponseError(
                "Unexpected values payload", context={"payload": repr(payload)[:200]}
            )
        return cls(values=[[str(cell) for cell in row] for row in values])

    def column(self, index: int = 0) -> list[str]:
        return [row[index] if len(row) > index else "" for row in self.values]


@dataclass
class SpreadsheetInfo:
    title: str
    url: str


@dataclass
class CampaignRow:
    row_number: int
    value: str


@dataclass(frozen=True)
class VideoRecord:
    campaign_name: str
    tk_type: str
    duration: float
    start_date: str
    end_date: str
    is_paid: str
    row_number: int


@dataclass
class QueryFilter:
    date: str | None = None
    tk_type: str | None = None
    tk_number: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.date or self.tk_type or self.tk_number)


@dataclass
class QueryResult:
    records: list[VideoRecord] = field(default_factory=list)
    total_duration: float = 0

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass
class HighlightOutcome:
    highlighted: int = 0
    not_found: list[str] = field(default_factory=list)


@dataclass
class IngestResult:
    campaign_name: str
    tk_numbers: list[str]

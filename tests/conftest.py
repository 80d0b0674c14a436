from unittest.mock import MagicMock

import pytest

from outlet_marker.sheets import SheetSession

SHEET_TITLE = "Лист1"
SHEET_ID = 42

VIDEO_ROWS = [
    ["РК", "Тип ТК", "Длительность", "", "", "Начало", "Конец", "Платный"],
    ["Summer Sale", "ГМ", "15", "", "", "20.12.2024", "31.12.2024", "да"],
    ["Winter", "Частично ГМ", "30,5", "", "", "01.01.2025", "15.01.2025", "нет"],
    ["Spring", "СМ", "10", "", "", "2024-12-01"],
    ["", "", "", "", "", "", "", ""],
    ["Short", "ГМ"],
]


def make_service(ranges: dict) -> MagicMock:
    """Sheets service whose values().get() answers from `ranges`."""
    service = MagicMock()
    spreadsheets = service.spreadsheets.return_value
    spreadsheets.get.return_value.execute.return_value = {
        "properties": {"title": "Медиаплан"},
        "sheets": [{"properties": {"title": SHEET_TITLE, "sheetId": SHEET_ID}}],
    }

    def values_get(**kwargs):
        request = MagicMock()
        request.execute.return_value = {"values": ranges.get(kwargs["range"], [])}
        return request

    spreadsheets.values.return_value.get.side_effect = values_get
    return service


@pytest.fixture
def sheet_ranges():
    return {
        f"'{SHEET_TITLE}'!A:A": [["РК"], ["x"], ["Summer Sale"]],
        f"'{SHEET_TITLE}'!R1:GN1": [["1001", "", "1003"]],
        f"'{SHEET_TITLE}'!A:H": VIDEO_ROWS,
        f"'{SHEET_TITLE}'!T2:T": [["1"], ["0"], ["x"]],
    }


@pytest.fixture
def service(sheet_ranges):
    return make_service(sheet_ranges)


@pytest.fixture
def session(service):
    return SheetSession(
        spreadsheet_id="sheet-id",
        credentials=MagicMock(valid=True),
        service=service,
    )


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr("outlet_marker.utils.time.sleep", lambda seconds: None)

"""
Exceptions raised by the outlet marker.

Lookups that simply find nothing (unknown campaign, unknown TK) are not
errors: they come back as None or in a not-found list. Everything here
aborts the operation before anything is written to the spreadsheet.
"""

from typing import Any


class OutletMarkerError(Exception):
    """Base exception for outlet marker operations."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidInputError(OutletMarkerError):
    """Input rejected before any remote call is made."""


class EmptyInputError(InvalidInputError):
    def __init__(self):
        super().__init__("Файл пустой или не содержит данных")


class MissingCampaignColumnError(InvalidInputError):
    def __init__(self):
        super().__init__("Не найдено название РК в столбце A")


class MissingOutletColumnError(InvalidInputError):
    def __init__(self):
        super().__init__("Не найдены номера ТК в столбце B")


class InvalidQueryError(InvalidInputError):
    """Query command text that can't be turned into a filter."""


class HeaderCollisionError(OutletMarkerError):
    def __init__(self, token: str, first_index: int, second_index: int):
        super().__init__(
            f"TK header {token!r} maps to two columns",
            context={
                "token": token,
                "first_index": first_index,
                "second_index": second_index,
            },
        )


class SheetsResponseError(OutletMarkerError):
    """The Sheets API answered with a payload we don't understand."""

import pytest

from outlet_marker.exceptions import (
    EmptyInputError,
    InvalidInputError,
    MissingCampaignColumnError,
    MissingOutletColumnError,
)
from outlet_marker.ingest import has_header_row, parse_table


def test_majority_campaign_name():
    result = parse_table(
        [
            ["Summer Sale", "1001"],
            ["Summer Sale", "1003"],
            ["Summer Sale Typo", "9999"],
        ]
    )
    assert result.campaign_name == "Summer Sale"
    assert result.tk_numbers == ["1001", "1003", "9999"]


def test_tie_goes_to_first_seen():
    result = parse_table([["B", "1"], ["A", "2"], ["A", "3"], ["B", "4"]])
    assert result.campaign_name == "B"


def test_tokens_deduplicated_in_order():
    result = parse_table([["X", "3"], ["X", "1"], ["X", "3"], ["X", "2"]])
    assert result.tk_numbers == ["3", "1", "2"]


def test_leading_zeros_survive():
    assert parse_table([["X", "007"]]).tk_numbers == ["007"]


def test_header_row_skipped():
    result = parse_table([["Название РК", "Номер ТК"], ["Акция", "12"]])
    assert result.campaign_name == "Акция"
    assert result.tk_numbers == ["12"]


@pytest.mark.parametrize(
    "first_row,expected",
    [
        (["Кампания", ""], True),
        (["", "Торговая точка"], True),
        (["A", "B"], True),
        (["Campaign", "Outlet"], True),
        (["Акция", "12"], False),
    ],
)
def test_has_header_row(first_row, expected):
    assert has_header_row(first_row) is expected


def test_blank_cells_and_short_rows():
    result = parse_table([["X", None], [None, " 5 "], [" X "], ["", ""]])
    assert result.campaign_name == "X"
    assert result.tk_numbers == ["5"]


def test_empty_table():
    with pytest.raises(EmptyInputError):
        parse_table([])


def test_missing_campaign_column():
    with pytest.raises(MissingCampaignColumnError):
        parse_table([["", "1"], ["", "2"]])


def test_missing_outlet_column():
    with pytest.raises(MissingOutletColumnError):
        parse_table([["X", ""]])


def test_errors_are_invalid_input():
    with pytest.raises(InvalidInputError) as exc_info:
        parse_table([])
    assert exc_info.value.message == "Файл пустой или не содержит данных"

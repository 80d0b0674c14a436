"""
Spreadsheet column letters <-> zero-based indexes.

Letters are a bijective base-26 numeral: A=1 ... Z=26, AA=27, so "A" is
index 0 and "AA" is index 26.
"""

TK_START_COLUMN = "R"
TK_END_COLUMN = "GN"


def letter_to_index(letters: str) -> int:
    index = 0
    for char in letters:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1


def index_to_letter(index: int) -> str:
    letters = ""
    temp = index
    while temp >= 0:
        letters = chr(temp % 26 + ord("A")) + letters
        temp = temp // 26 - 1
    return letters


TK_START_INDEX = letter_to_index(TK_START_COLUMN)
TK_END_INDEX = letter_to_index(TK_END_COLUMN)


def in_tk_range(index: int) -> bool:
    return TK_START_INDEX <= index <= TK_END_INDEX

import logging

from .exceptions import HeaderCollisionError

logger = logging.getLogger(__name__)


def strip_leading_zeros(token: str) -> str:
    return token.lstrip("0") or "0"


def build_header_map(
    header_row: list, start_index: int, end_index: int, strict: bool = False
) -> dict[str, int]:
    """
    Map every TK header in `header_row` to its absolute column index.

    `header_row[0]` sits in column `start_index`. Each header is stored as
    written and, when different, with its leading zeros stripped, so both
    "007" and "7" find the column. When two columns claim the same key the
    later one wins, unless `strict` is set.
    """
    tk_map: dict[str, int] = {}

    def store(key: str, index: int):
        previous = tk_map.get(key)
        if previous is not None and previous != index:
            if strict:
                raise HeaderCollisionError(key, previous, index)
            logger.warning(
                "TK header %r found in columns %d and %d, keeping %d",
                key,
                previous,
                index,
                index,
            )
        tk_map[key] = index

    for offset, cell in enumerate(header_row[: end_index - start_index + 1]):
        header = str(cell).strip() if cell is not None else ""
        if not header:
            continue
        index = start_index + offset
        store(header, index)
        normalized = strip_leading_zeros(header)
        if normalized != header:
            store(normalized, index)

    return tk_map

"""Checks that a map grid is well formed and closed by walls."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

VALID_CHARS = frozenset("01NESW ")
PLAYER_CHARS = frozenset("NESW")


def is_valid_char(c: str) -> bool:
    """Return True for characters allowed inside the map grid."""
    return len(c) == 1 and c in VALID_CHARS


def _cell(row: str, col: int) -> str:
    """Character at ``col`` of ``row``, or '' past its end."""
    return row[col] if 0 <= col < len(row) else ""


def count_cols(rows: Sequence[str]) -> int:
    """Return the length of the longest row."""
    return max((len(row) for row in rows), default=0)


def count_rows_col(rows: Sequence[str], col: int) -> int:
    """Count rows from the top that have a valid character at ``col``."""
    count = 0
    for row in rows:
        if col < 0 or col >= len(row) or not is_valid_char(row[col]):
            break
        count += 1
    return count


def open_horizontal(rows: Sequence[str]) -> bool:
    """Return True if some row does not begin and end with a wall."""
    for row in rows:
        stripped = row.lstrip(" ")
        if not stripped or stripped[0] != "1" or row[-1] != "1":
            return True
    return False


def open_vertical(rows: Sequence[str]) -> bool:
    """Return True if some column is not closed by walls at top and bottom."""
    for col in range(count_cols(rows)):
        top = next((_cell(row, col) for row in rows if _cell(row, col) != " "), "")
        if top != "1":
            return True
        column = "".join(_cell(row, col) for row in rows[: count_rows_col(rows, col)])
        column = column.rstrip(" ")
        if not column or column[-1] != "1":
            return True
    return False


def has_correct_symbols(rows: Iterable[str]) -> bool:
    """Return True if every row has content and only valid characters."""
    for row in rows:
        if not row.strip(" "):
            return False
        if not all(is_valid_char(c) for c in row):
            return False
    return True


def has_one_player(rows: Iterable[str]) -> bool:
    """Return True if exactly one player start is on the map."""
    starts = sum(1 for row in rows for c in row if c in PLAYER_CHARS)
    return starts == 1


def has_valid_textures(paths: Iterable[str | None]) -> bool:
    """Return True if every texture path can be opened for reading."""
    for path in paths:
        if path is None:
            return False
        try:
            with open(path, "rb"):
                pass
        except OSError:
            return False
    return True


def is_valid(rows: Sequence[str], paths: Iterable[str | None]) -> bool:
    """Run every map and texture check."""
    return (
        has_correct_symbols(rows)
        and has_one_player(rows)
        and not open_horizontal(rows)
        and not open_vertical(rows)
        and has_valid_textures(paths)
    )


def fill_1s(rows: Iterable[str]) -> list[str]:
    """Turn interior spaces of each row into walls.

    Spaces before the first and after the last non-space character are kept.
    """
    filled = []
    for row in rows:
        left = len(row) - len(row.lstrip(" "))
        right = len(row.rstrip(" "))
        if right <= left:
            filled.append(row)
        else:
            filled.append(row[:left] + row[left:right].replace(" ", "1") + row[right:])
    return filled
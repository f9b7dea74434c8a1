"""Reading and filtering of three-column integer tables.

Each non-empty line that does not start with ``#`` holds three integers
``a``, ``b`` and ``c``. They are separated by a comma or by whitespace.
Lines that cannot be read as three 32-bit integers are skipped.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FIELD_COUNT = 3
_SEPARATORS = (",", " ")
_FIELD = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


@dataclass(frozen=True)
class Row:
    """One row of a table."""

    a: int
    b: int
    c: int


class TableReadError(Exception):
    """Raised when a table cannot be read."""


def _parse_line(line: str) -> Row | None:
    values: list[int] = []
    pos = 0
    for _ in range(_FIELD_COUNT):
        if values and line.startswith(_SEPARATORS, pos):
            pos += 1
        match = _FIELD.match(line, pos)
        if match is None:
            return None
        value = int(match.group(1))
        if not _INT32_MIN <= value <= _INT32_MAX:
            return None
        values.append(value)
        pos = match.end()
    return Row(*values)


def parse_rows(lines: Iterable[str]) -> Iterator[Row]:
    """Yield the rows that can be read from ``lines``, in order."""
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line or line.startswith("#"):
            continue
        row = _parse_line(line)
        if row is not None:
            yield row


def _rewind(lines: Iterable[str]) -> None:
    seekable = getattr(lines, "seekable", None)
    if seekable is not None and seekable():
        lines.seek(0)  # type: ignore[attr-defined]


def _read_rows(lines: Iterable[str]) -> list[Row]:
    _rewind(lines)
    try:
        return list(parse_rows(lines))
    except OSError as exc:
        raise TableReadError("Error reading from table stream.") from exc


def _to_int32(value: int) -> int:
    return (value - _INT32_MIN) % 2**32 + _INT32_MIN


def filter_rows_map_based(lines: Iterable[str], condition: int) -> list[Row]:
    """Group all rows by ``a`` first, then return the group for ``condition``.

    The condition is reduced to a 32-bit signed integer before the lookup.
    """
    groups: defaultdict[int, list[Row]] = defaultdict(list)
    for row in _read_rows(lines):
        groups[row.a].append(row)
    key = _to_int32(condition)
    return [Row(key, row.b, row.c) for row in groups.get(key, [])]


def filter_rows_direct(lines: Iterable[str], condition: int) -> list[Row]:
    """Return the rows whose ``a`` equals ``condition``, in file order."""
    return [row for row in _read_rows(lines) if row.a == condition]


def _filter_pair(
    strategy: Callable[[Iterable[str], int], list[Row]],
    label: str,
    table_a: Iterable[str],
    table_b: Iterable[str],
    a_condition: int,
    b_condition: int,
) -> tuple[list[Row], list[Row]]:
    results = []
    for name, table, condition in (("A", table_a, a_condition), ("B", table_b, b_condition)):
        try:
            results.append(strategy(table, condition))
        except TableReadError as exc:
            raise TableReadError(f"Error processing table {name} ({label}).") from exc
    return results[0], results[1]


def filter_tables_map_based(
    table_a: Iterable[str],
    table_b: Iterable[str],
    a_condition: int,
    b_condition: int,
) -> tuple[list[Row], list[Row]]:
    """Filter both tables with the grouping strategy."""
    return _filter_pair(
        filter_rows_map_based, "map-based", table_a, table_b, a_condition, b_condition
    )


def filter_tables_direct(
    table_a: Iterable[str],
    table_b: Iterable[str],
    a_condition: int,
    b_condition: int,
) -> tuple[list[Row], list[Row]]:
    """Filter both tables by comparing each row with the condition."""
    return _filter_pair(
        filter_rows_direct, "direct filter", table_a, table_b, a_condition, b_condition
    )
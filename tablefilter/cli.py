"""Interactive command that filters two tables and times both strategies."""

from __future__ import annotations

import argparse
import re
import sys
import time
from contextlib import ExitStack, contextmanager
from typing import IO, Iterator, Sequence

from tablefilter.columns import TableReadError, filter_tables_direct, filter_tables_map_based

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class TableOpenError(OSError):
    """Raised when a table file cannot be opened."""


def _read_token(stdin: IO[str]) -> str:
    char = stdin.read(1)
    while char and char.isspace():
        char = stdin.read(1)
    if not char:
        raise EOFError("unexpected end of input")
    token = []
    while char and not char.isspace():
        token.append(char)
        char = stdin.read(1)
    return "".join(token)


def _read_integer(stdin: IO[str]) -> int:
    token = _read_token(stdin)
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    value = int(token)
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise ValueError(f"integer out of range: {token}")
    return value


def prompt_conditions(stdin: IO[str], stdout: IO[str]) -> tuple[int, int]:
    """Ask for the conditions on ``A.a`` and ``B.a``."""
    stdout.write("SELECT * FROM A, B\n")
    stdout.write("\tWHERE A.a=")
    stdout.flush()
    a_condition = _read_integer(stdin)
    stdout.write("\tAND B.a=")
    stdout.flush()
    b_condition = _read_integer(stdin)
    stdout.write("\tAND A.b=B.b\n")
    return a_condition, b_condition


def prompt_tables(stdin: IO[str], stdout: IO[str]) -> tuple[str, str]:
    """Ask for the paths of the two table files."""
    stdout.write("A 테이블이 저장되어 있는 파일의 경로를 입력하세요: ")
    stdout.flush()
    table_a_path = _read_token(stdin)
    stdout.write("B 테이블이 저장되어 있는 파일의 경로를 입력하세요: ")
    stdout.flush()
    table_b_path = _read_token(stdin)
    return table_a_path, table_b_path


@contextmanager
def open_tables(table_a_path: str, table_b_path: str) -> Iterator[tuple[IO[str], IO[str]]]:
    """Open both table files for reading and close them afterwards."""
    with ExitStack() as stack:
        files = []
        for path in (table_a_path, table_b_path):
            try:
                handle = open(path, encoding="utf-8", errors="replace", newline="\n")
            except OSError as exc:
                raise TableOpenError(f"{path} 파일을 열지 못했습니다.") from exc
            files.append(stack.enter_context(handle))
        yield files[0], files[1]


def _report(label: str, result, micros: int, stdout: IO[str]) -> None:
    rows_a, rows_b = result
    stdout.write(f"{label}: filtered_table_a_size: {len(rows_a)}\n")
    stdout.write(f"{label}: filtered_table_b_size: {len(rows_b)}\n")
    stdout.write(f"{label}: Time taken: {micros} microseconds\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive filter; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="tablefilter",
        description="Filter two tables by their first column and time two strategies.",
    )
    parser.parse_args(argv)
    stdin, stdout, stderr = sys.stdin, sys.stdout, sys.stderr

    a_condition, b_condition = prompt_conditions(stdin, stdout)
    table_a_path, table_b_path = prompt_tables(stdin, stdout)

    try:
        tables = open_tables(table_a_path, table_b_path)
        table_a, table_b = tables.__enter__()
    except TableOpenError as exc:
        stdout.write(f"{exc}\n")
        stderr.write("Failed to open table files.\n")
        return 1

    try:
        stdout.write("\n--- Input Conditions ---\n")
        stdout.write(f"A.a condition: {a_condition}\n")
        stdout.write(f"B.a condition: {b_condition}\n")
        stdout.write(f"Table A file: {table_a_path}\n")
        stdout.write(f"Table B file: {table_b_path}\n")
        stdout.write("------------------------\n")

        strategies = (
            ("Map-based Filtering", "Map-based", "map-based filtering", filter_tables_map_based, 35),
            ("Direct Filtering", "Direct Filter", "direct filtering", filter_tables_direct, 30),
        )
        for title, label, description, strategy, rule in strategies:
            stdout.write(f"\n--- Testing {title} ---\n")
            start = time.perf_counter_ns()
            try:
                result = strategy(table_a, table_b, a_condition, b_condition)
            except TableReadError as exc:
                stderr.write(f"{exc}\n")
                stderr.write(f"Error in {description}\n")
                return 1
            micros = (time.perf_counter_ns() - start) // 1000
            _report(label, result, micros, stdout)
            stdout.write("-" * rule + "\n")
    finally:
        tables.__exit__(None, None, None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
import io

import pytest

from tablefilter.columns import (
    Row,
    TableReadError,
    filter_rows_direct,
    filter_rows_map_based,
    filter_tables_direct,
    filter_tables_map_based,
    parse_rows,
)

TABLE = """# a,b,c
1,10,100
2,20,200
1, 11, 101

3 30 300
1 12 102
bad line
2,21,201
"""


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1,2,3", Row(1, 2, 3)),
        ("1 2 3", Row(1, 2, 3)),
        ("1, 2, 3", Row(1, 2, 3)),
        ("  4,5,6", Row(4, 5, 6)),
        ("-5,+6,7", Row(-5, 6, 7)),
        ("1,2,3xyz", Row(1, 2, 3)),
        ("7,8,9\r", Row(7, 8, 9)),
        ("2147483647,-2147483648,0", Row(2147483647, -2147483648, 0)),
    ],
)
def test_parse_valid_lines(line, expected):
    assert list(parse_rows([line + "\n"])) == [expected]


@pytest.mark.parametrize(
    "line",
    ["", "# 1,2,3", "1;2;3", "1,,2,3", "1,2", "abc", "2147483648,1,1", "1,2,-2147483649", "-,1,2"],
)
def test_parse_skips_unreadable_lines(line):
    assert list(parse_rows([line + "\n"])) == []


def test_parse_keeps_order():
    rows = list(parse_rows(io.StringIO(TABLE)))
    assert [row.a for row in rows] == [1, 2, 1, 3, 1, 2]
    assert rows[3] == Row(3, 30, 300)


def test_direct_filter():
    result = filter_rows_direct(io.StringIO(TABLE), 1)
    assert result == [Row(1, 10, 100), Row(1, 11, 101), Row(1, 12, 102)]


@pytest.mark.parametrize("condition", [0, 1, 2, 3, 4, -1])
def test_strategies_agree(condition):
    assert filter_rows_map_based(io.StringIO(TABLE), condition) == filter_rows_direct(
        io.StringIO(TABLE), condition
    )


def test_map_based_wraps_condition_to_int32():
    lines = ["5,1,2\n", "6,3,4\n"]
    assert filter_rows_map_based(lines, 2**32 + 5) == [Row(5, 1, 2)]
    assert filter_rows_direct(lines, 2**32 + 5) == []


def test_stream_is_rewound():
    stream = io.StringIO(TABLE)
    stream.read()
    first = filter_rows_direct(stream, 2)
    second = filter_rows_map_based(stream, 2)
    assert first == second == [Row(2, 20, 200), Row(2, 21, 201)]


def test_filter_tables_both_strategies():
    table_a = io.StringIO(TABLE)
    table_b = io.StringIO("3,30,1\n3,31,2\n4,40,3\n")
    map_a, map_b = filter_tables_map_based(table_a, table_b, 2, 3)
    direct_a, direct_b = filter_tables_direct(table_a, table_b, 2, 3)
    assert map_a == direct_a == [Row(2, 20, 200), Row(2, 21, 201)]
    assert map_b == direct_b == [Row(3, 30, 1), Row(3, 31, 2)]


def _failing_lines():
    yield "1,2,3\n"
    raise OSError("disk gone")


def test_read_error_is_reported():
    with pytest.raises(TableReadError, match="Error reading from table stream"):
        filter_rows_direct(_failing_lines(), 1)


def test_read_error_names_table():
    with pytest.raises(TableReadError, match=r"table B \(map-based\)"):
        filter_tables_map_based(["1,2,3\n"], _failing_lines(), 1, 1)
    with pytest.raises(TableReadError, match=r"table A \(direct filter\)"):
        filter_tables_direct(_failing_lines(), ["1,2,3\n"], 1, 1)
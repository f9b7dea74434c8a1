# tablefilter

`tablefilter` reads two small integer tables, A and B. It picks out the rows
whose first column matches a given key in each table. It times two ways of
doing that filtering:

- **map-based** (`filter_rows_map_based`): group every row by its first column,
  then look up the key. Before the lookup, the key is reduced to a 32-bit signed
  integer, with wrap-around.
- **direct** (`filter_rows_direct`): scan the rows once and keep those whose
  first column equals the key.

For any key that fits in 32 bits, both strategies return the same rows in file
order.

## Table files

Each line holds three integers `a`, `b` and `c`. They are separated by a comma
or by whitespace:

```
# a, b, c
1, 10, 100
1 20 200
2,30,300
```

The following lines are skipped:

- empty lines;
- lines that start with `#`;
- lines that do not begin with three integers;
- lines with a value outside the 32-bit signed range.

Anything after the third integer on a line is ignored.

## Command line

```
tablefilter
```

The command prompts for the query conditions:

```
SELECT * FROM A, B
	WHERE A.a=1
	AND B.a=2
	AND A.b=B.b
```

It then asks for the path of table A and the path of table B. The answers are
read as whitespace-separated tokens, so a path cannot contain spaces.

Next it prints the conditions and file names. For each strategy it then prints
how many rows were kept from each table and the time taken in microseconds.

The command exits with status 1 in these cases:

- a file cannot be opened: it prints the path and `Failed to open table files.`;
- reading a table fails.

A condition that is not an integer in the 64-bit signed range raises
`ValueError`.

## Library use

```python
from tablefilter.columns import Row, filter_rows_direct, filter_tables_map_based

with open("a.txt") as table_a, open("b.txt") as table_b:
    rows_a, rows_b = filter_tables_map_based(table_a, table_b, 1, 2)

for row in rows_a:
    print(row.a, row.b, row.c)

rows = filter_rows_direct(["1,2,3", "4 5 6"], 4)
assert rows == [Row(4, 5, 6)]
```

The module `tablefilter.columns` provides these names:

- `parse_rows(lines)` yields a frozen `Row(a, b, c)` for every line that parses.
- `filter_tables_map_based` and `filter_tables_direct` apply one strategy to
  both tables and return a pair of row lists.
- Seekable inputs, such as open files, are rewound before each read, so the same
  handles can be filtered more than once.
- A failure while reading a table raises `TableReadError`.

The module `tablefilter.cli` provides these names:

- `prompt_conditions` and `prompt_tables` ask their questions on given streams.
- `open_tables` is a context manager that opens both files. It raises
  `TableOpenError` when one cannot be opened.

## What it does not do

The prompt shows the condition `A.b=B.b`, but the package does not join the two
tables. It only filters each table by its first column and reports the row
counts. It keeps no data between runs.

## Tests

```
pip install -e .[test]
pytest
```
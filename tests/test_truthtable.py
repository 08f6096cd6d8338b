import pytest

from practicum.expression import synthesis_by_one
from practicum.truthtable import (
    TruthTable,
    find_expression,
    load_truth_table,
    parse_truth_table_text,
)

XOR_TEXT = "0 0 0\n0 1 1\n1 0 1\n1 1 0\n"


def test_parse_dimensions_and_values():
    table = parse_truth_table_text(XOR_TEXT)
    assert table.rows == len(XOR_TEXT.splitlines())
    assert table.cols == len(XOR_TEXT.splitlines()[0].split())
    assert table.values == [int(token) for token in XOR_TEXT.split()]


def test_parse_stops_at_non_integer_token():
    table = parse_truth_table_text("1 x 1\n")
    assert table.values == [1]
    assert table.cols == len(table.values)


def test_parse_counts_blank_lines_and_takes_cols_from_last():
    table = parse_truth_table_text("0 1\n\n")
    assert table.rows == 2
    assert table.cols == 0


def test_parse_empty_text():
    table = parse_truth_table_text("")
    assert table == TruthTable()
    assert table.format_rows() == []


def test_format_rows_marks_output_column():
    table = parse_truth_table_text(XOR_TEXT)
    lines = table.format_rows()
    assert len(lines) == table.rows
    assert lines[0] == "0 | 0 | Output: 0"
    for line, raw in zip(lines, XOR_TEXT.splitlines()):
        assert line.endswith(f"Output: {raw.split()[-1]}")
        assert line.count(" | ") == table.cols - 1


def test_find_expression_for_xor():
    result = find_expression(parse_truth_table_text(XOR_TEXT))
    assert result.startswith('"') and result.endswith('"')
    assert synthesis_by_one([0, 1]) in result
    assert synthesis_by_one([1, 0]) in result
    assert synthesis_by_one([0, 0]) not in result
    assert result.count(" | ") == 1


def test_find_expression_without_true_rows():
    assert find_expression(parse_truth_table_text("0 0\n1 0\n")) == '"'


def test_find_expression_term_count_matches_true_rows():
    text = "0 0 1\n0 1 1\n1 0 1\n1 1 1\n"
    result = find_expression(parse_truth_table_text(text))
    true_rows = sum(1 for line in text.splitlines() if line.split()[-1] == "1")
    assert result.count(" | ") == true_rows - 1
    assert result.count("(") == true_rows


def test_load_matches_parse(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text(XOR_TEXT)
    assert load_truth_table(path) == parse_truth_table_text(XOR_TEXT)
    assert load_truth_table(str(path)) == parse_truth_table_text(XOR_TEXT)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_truth_table(tmp_path / "missing.txt")
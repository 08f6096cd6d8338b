"""Truth tables read from text and the expression synthesised from them."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from practicum.expression import synthesis_by_one

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass
class TruthTable:
    """Table entries stored row after row; the last column is the output."""

    values: list[int] = field(default_factory=list)
    rows: int = 0
    cols: int = 0

    def _iter_rows(self) -> Iterator[list[int]]:
        for index in range(self.rows):
            yield self.values[index * self.cols:(index + 1) * self.cols]

    def format_rows(self) -> list[str]:
        """Return one line per row, cells joined by `` | `` and the output labelled."""
        lines = []
        for row in self._iter_rows():
            cells = [str(value) for value in row]
            if cells and len(cells) == self.cols:
                cells[-1] = f"Output: {cells[-1]}"
            lines.append(" | ".join(cells))
        return lines


def _leading_ints(line: str) -> list[int]:
    """Read integers from the start of a line until something else is met."""
    numbers = []
    for token in line.split():
        match = _LEADING_INT.match(token)
        if not match:
            break
        numbers.append(int(match.group()))
        if match.end() != len(token):
            break
    return numbers


def parse_truth_table_text(text: str) -> TruthTable:
    """Parse whitespace-separated integer rows.

    Every line counts as a row; the column count is taken from the last line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    table = TruthTable()
    for line in lines:
        entries = _leading_ints(line)
        table.values.extend(entries)
        table.rows += 1
        table.cols = len(entries)
    return table


def load_truth_table(path: str | Path) -> TruthTable:
    """Read a truth table from a text file."""
    return parse_truth_table_text(Path(path).read_text())


def find_expression(table: TruthTable) -> str:
    """Return the quoted disjunction of minterms of rows whose output is 1."""
    terms = []
    if table.cols >= 1:
        for row in table._iter_rows():
            if len(row) == table.cols and row[-1] == 1:
                terms.append(synthesis_by_one(row[:-1]))
    text = '"' + "".join(f"{term} | " for term in terms)
    return text[: text.rfind(")") + 1] + '"'
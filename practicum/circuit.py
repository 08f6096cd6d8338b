"""Logic circuits defined by name, arguments and a boolean expression."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from practicum.expression import evaluate_postfix, infix_to_postfix

MAX_CIRCUITS = 100
_STRUCTURAL_TOKENS = frozenset("&|!(),")
_SKIPPED_IN_EXPRESSION = frozenset(' "')
_SKIPPED_IN_ARGUMENTS = frozenset(" ,")


class InvalidCircuitError(ValueError):
    """Raised when a circuit definition cannot be accepted."""


def tokenize_expression(expression: str) -> str:
    """Return the expression's characters without spaces and double quotes."""
    return "".join(ch for ch in expression if ch not in _SKIPPED_IN_EXPRESSION)


@dataclass(frozen=True)
class Circuit:
    """A named circuit whose single-character arguments feed its expression."""

    name: str
    arguments: tuple[str, ...]
    expression: str

    @property
    def tokens(self) -> str:
        """The expression as single-character tokens."""
        return tokenize_expression(self.expression)

    def describe(self) -> str:
        """Return ``name(arg,...): expression``."""
        return f"{self.name}({','.join(self.arguments)}): {self.expression}"

    def validate(self) -> None:
        """Raise InvalidCircuitError if a token is neither an operator nor an argument."""
        for token in self.tokens:
            if token in _STRUCTURAL_TOKENS:
                continue
            if token not in self.arguments:
                raise InvalidCircuitError(f"Found NOT valid token {{{token}}}.")

    def substitute(self, values: Sequence[int]) -> str:
        """Return the tokens with each argument replaced by its digit value.

        Values are paired with arguments in order; if an argument repeats,
        the later value wins. Arguments without a value stay as they are.
        """
        mapping = {
            argument: chr(ord("0") + value)
            for argument, value in zip(self.arguments, values)
        }
        return "".join(mapping.get(token, token) for token in self.tokens)

    def run(self, values: Sequence[int]) -> int:
        """Evaluate the circuit for the given argument values."""
        return evaluate_postfix(infix_to_postfix(self.substitute(values)))

    def truth_rows(self) -> Iterator[tuple[tuple[int, ...], int]]:
        """Yield every input combination, first argument slowest, with its output."""
        for values in itertools.product((0, 1), repeat=len(self.arguments)):
            yield values, self.run(values)


class CircuitStorage:
    """Defined circuits in the order they were added, looked up by name."""

    def __init__(self, capacity: int = MAX_CIRCUITS) -> None:
        self.capacity = capacity
        self._circuits: list[Circuit] = []

    def __len__(self) -> int:
        return len(self._circuits)

    def __iter__(self) -> Iterator[Circuit]:
        return iter(self._circuits)

    def __contains__(self, name: object) -> bool:
        return self.find(name) is not None

    def add(self, circuit: Circuit) -> None:
        """Store a circuit; names must be unique and capacity is limited."""
        if circuit.name in self:
            raise ValueError(
                f"Digital Integrated Circuit '{circuit.name}' already exist. "
                "Instead, skip DEFINE command or create circuit with different name."
            )
        if len(self._circuits) >= self.capacity:
            raise OverflowError("Circuit storage capacity exceeded.")
        self._circuits.append(circuit)

    def find(self, name: object) -> Circuit | None:
        """Return the circuit with this name, or None."""
        return next((c for c in self._circuits if c.name == name), None)

    def describe(self) -> list[str]:
        """Return one numbered line per stored circuit."""
        return [f" {index}.{circuit.describe()}" for index, circuit in enumerate(self, 1)]


def _split_name(text: str) -> tuple[str, str]:
    name, _, rest = text.lstrip().partition("(")
    return name, rest


def parse_definition(text: str) -> Circuit:
    """Parse ``NAME(a, b, ...) "expression"`` into a validated circuit."""
    name, rest = _split_name(text)
    if len(name) != 1 or not name.isalnum():
        raise InvalidCircuitError(
            "Invalid circuit name. Names must be a single character."
        )
    inside, _, tail = rest.partition(")")
    arguments = tuple(ch for ch in inside if ch not in _SKIPPED_IN_ARGUMENTS)
    tail = tail.split("\n", 1)[0]
    quote = tail.find('"')
    if quote < 0:
        raise InvalidCircuitError("The expression must be given in double quotes.")
    circuit = Circuit(name, arguments, tail[quote:])
    circuit.validate()
    return circuit


def parse_run(text: str) -> tuple[str, list[int]]:
    """Parse ``NAME(1, 0, ...)`` into the circuit name and its digit values."""
    name, rest = _split_name(text)
    inside = rest.partition(")")[0]
    values = []
    for ch in inside:
        if ch in _SKIPPED_IN_ARGUMENTS:
            continue
        if not ch.isdigit() or not ch.isascii():
            raise ValueError("RUN command invalid argument.")
        values.append(int(ch))
    return name, values


def parse_file_name(text: str) -> str:
    """Return the file name written between double quotes at the start of a line."""
    line = text.lstrip().split("\n", 1)[0]
    first = line.find('"')
    last = line.rfind('"')
    start = first + 1 if first >= 0 else 0
    if last >= 1:
        return line[start:start + last - 1]
    return line[start:]
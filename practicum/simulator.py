"""Console simulator for defining, running and finding logic circuits."""

from __future__ import annotations

import argparse
import enum
import sys
from typing import TextIO

from practicum.circuit import (
    MAX_CIRCUITS,
    CircuitStorage,
    InvalidCircuitError,
    parse_definition,
    parse_file_name,
    parse_run,
)
from practicum.truthtable import find_expression, load_truth_table

PROMPT = "Enter a command: "


class Command(enum.Enum):
    """Commands understood by the simulator."""

    DEFINE = "DEFINE"
    RUN = "RUN"
    ALL = "ALL"
    FIND = "FIND"
    PRINT = "PRINT"
    EXIT = "EXIT"
    INVALID = "INVALID"


def parse_command(word: str) -> Command:
    """Map a command word to its Command; anything unknown is INVALID."""
    try:
        command = Command(word)
    except ValueError:
        return Command.INVALID
    return command


_DESCRIPTIONS = (
    ("DEFINE", "Creates a logic integrated circuit with a given name and parameters"),
    ("RUN", "Executes any of defined integrated circuits with defined input values"),
    ("ALL", "Enables execution and analysis of an integrated circuit in a table"),
    ("FIND", "Allows to find an integrated circuit by a given truth table"),
    ("PRINT", "Prints all defined integrated circuits in the storage"),
    ("EXIT", "Allows to stop the program and exit"),
)


def menu_text() -> str:
    """Return the greeting, the command list and the first prompt."""
    lines = [
        "\t\t   Digital Integrated Circuits console simulator",
        "",
        "------------------------------------- Commands ------------------------------------",
    ]
    for number, (name, description) in enumerate(_DESCRIPTIONS, 1):
        lines.append(f"{f' {number}.':<5}{name:<7}| {description}")
    lines.append(
        "-----------------------------------------------------------------------------------"
    )
    return "\n".join(lines) + "\n\n" + PROMPT


class Simulator:
    """Holds the defined circuits and executes command lines against them."""

    def __init__(self, capacity: int = MAX_CIRCUITS) -> None:
        self.storage = CircuitStorage(capacity)

    def execute(self, line: str, out: TextIO, err: TextIO) -> bool:
        """Execute one command line; return False when the simulator should stop."""
        parts = line.rstrip("\n").split(None, 1)
        word = parts[0] if parts else ""
        rest = parts[1] if len(parts) > 1 else ""
        command = parse_command(word)

        if command is Command.EXIT:
            return False
        if command is Command.DEFINE:
            if not self._define(rest, err):
                return True
        elif command is Command.RUN:
            self._run(rest, out, err)
        elif command is Command.ALL:
            self._all(rest, out, err)
        elif command is Command.FIND:
            if not self._find(rest, out, err):
                return True
        elif command is Command.PRINT:
            for entry in self.storage.describe():
                out.write(entry + "\n")
        else:
            err.write("Invalid command. Please try again.\n")
        out.write("\n" + PROMPT)
        return True

    def _define(self, rest: str, err: TextIO) -> bool:
        try:
            circuit = parse_definition(rest)
        except InvalidCircuitError as exc:
            err.write(f"{exc}\n")
            err.write("Invalid expression entered. Skip DEFINE command.\n" + PROMPT)
            return False
        try:
            self.storage.add(circuit)
        except (ValueError, OverflowError) as exc:
            err.write(f"{exc}\n")
        return True

    def _run(self, rest: str, out: TextIO, err: TextIO) -> None:
        try:
            name, values = parse_run(rest)
        except ValueError as exc:
            err.write(f"{exc}\n")
            return
        circuit = self.storage.find(name)
        if circuit is None:
            err.write(
                f"Digital Integrated Circuit '{name}' does NOT exist. "
                "Instead, skip RUN command or DEFINE the circuit.\n"
            )
            return
        try:
            result = circuit.run(values)
        except (ValueError, OverflowError) as exc:
            err.write(f"{exc}\n")
            return
        out.write(f"Result: {result}\n")

    def _all(self, rest: str, out: TextIO, err: TextIO) -> None:
        words = rest.split()
        name = words[0] if words else ""
        circuit = self.storage.find(name)
        if circuit is None:
            err.write(
                f"Digital Integrated Circuit '{name}' does NOT exist. "
                "Instead, skip ALL command or DEFINE the circuit.\n"
            )
            return
        out.write(f"Execute {circuit.name} {circuit.expression}\n")
        try:
            for values, result in circuit.truth_rows():
                cells = "".join(f"{value} | " for value in values)
                out.write(f"{cells}Output: {result}\n")
        except (ValueError, OverflowError) as exc:
            err.write(f"{exc}\n")

    def _find(self, rest: str, out: TextIO, err: TextIO) -> bool:
        file_name = parse_file_name(rest)
        try:
            table = load_truth_table(file_name)
        except OSError:
            err.write(f"Failed to parse truth table from file '{file_name}' \n")
            err.write("Check if the file name is not wrong or if the file is missing.\n")
            err.write("Skip FIND command.\n" + PROMPT)
            return False
        for row in table.format_rows():
            out.write(row + "\n")
        out.write(f"Integrated circuit: {find_expression(table)}\n")
        return True


def main(argv: list[str] | None = None) -> int:
    """Run the simulator on standard input until EXIT or end of input."""
    argparse.ArgumentParser(
        description="Digital integrated circuits console simulator."
    ).parse_args(argv)
    sys.stdout.write(menu_text())
    simulator = Simulator()
    for line in sys.stdin:
        if not simulator.execute(line, sys.stdout, sys.stderr):
            break
    return 0
"""Class attendance kept as a 64-bit mask, with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import TextIO

STUDENTS = 64

_MENU = (
    "Choose among the following options:\n"
    "1.Set attendance\n"
    "2.Clear attendance\n"
    "3.Attendance info\n"
    "4.Change attendance\n"
    "5.Exit\n"
    "Option: "
)


class Attendance:
    """Presence of students with ids 0 to 63."""

    def __init__(self, mask: int = 0) -> None:
        self.mask = mask & ((1 << STUDENTS) - 1)

    @staticmethod
    def _bit(student_id: int) -> int:
        if not 0 <= student_id < STUDENTS:
            raise ValueError(f"Invalid student id: {student_id}")
        return 1 << student_id

    def set(self, student_id: int) -> None:
        """Mark a student present."""
        self.mask |= self._bit(student_id)

    def clear(self, student_id: int) -> None:
        """Mark a student absent."""
        self.mask &= ~self._bit(student_id)

    def toggle(self, student_id: int) -> None:
        """Flip a student's presence."""
        self.mask ^= self._bit(student_id)

    def is_present(self, student_id: int) -> bool:
        """Return True when the student is present."""
        return bool(self.mask & self._bit(student_id))

    def present(self) -> list[int]:
        """Return the ids of present students in ascending order."""
        return [i for i in range(STUDENTS) if self.mask >> i & 1]

    def absent(self) -> list[int]:
        """Return the ids of absent students in ascending order."""
        return [i for i in range(STUDENTS) if not self.mask >> i & 1]


class _IntReader:
    """Reads whitespace-separated integers; a bad token discards its line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: deque[str] = deque()

    def read_int(self) -> int:
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._tokens.extend(line.split())
        token = self._tokens.popleft()
        try:
            return int(token)
        except ValueError:
            self._tokens.clear()
            raise


def _read(reader: _IntReader, err: TextIO) -> int | None:
    try:
        return reader.read_int()
    except ValueError:
        err.write("\nInvalid input. Please enter an integer.\nTry again.\n")
        return None


def _ids(ids: list[int]) -> str:
    return "".join(f"{i} " for i in ids)


def main(argv: list[str] | None = None) -> int:
    """Run the attendance menu on standard input until Exit or end of input."""
    argparse.ArgumentParser(description="Track class attendance.").parse_args(argv)
    out, err = sys.stdout, sys.stderr
    reader = _IntReader(sys.stdin)
    attendance = Attendance()
    actions = {
        1: ("Set", attendance.set),
        2: ("Clear", attendance.clear),
        4: ("Change", attendance.toggle),
    }

    out.write("[Welcome to CLASS ATTENDANCE program]\n\n")
    try:
        while True:
            out.write(_MENU)
            option = _read(reader, err)
            if option is None:
                out.write("\n")
                continue
            if option in actions:
                verb, action = actions[option]
                out.write(f"{verb} attendance for student with id [0, 63]: ")
                student_id = _read(reader, err)
                if student_id is not None:
                    try:
                        action(student_id)
                    except ValueError as exc:
                        err.write(f"\n{exc}\nValid id are between 0 and 63. Try again.\n")
                out.write("\n")
            elif option == 3:
                out.write("\nStudents attendance info: \n")
                out.write(f"Students present in class: {_ids(attendance.present())}\n")
                out.write(f"Students absent from class: {_ids(attendance.absent())}\n\n")
            elif option == 5:
                out.write("\nExit from the program requested. Have a nice day!\n")
                return 0
            else:
                err.write(f"\nReceived unsupported option: {option}\nTry again.\n")
    except EOFError:
        return 0
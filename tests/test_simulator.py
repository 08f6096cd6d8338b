import io

import pytest

from practicum.circuit import parse_definition
from practicum.simulator import PROMPT, Command, Simulator, main, menu_text, parse_command
from practicum.truthtable import find_expression, load_truth_table


def _run(sim, line):
    out, err = io.StringIO(), io.StringIO()
    keep_going = sim.execute(line, out, err)
    return keep_going, out.getvalue(), err.getvalue()


@pytest.mark.parametrize(
    "word, command",
    [
        ("DEFINE", Command.DEFINE),
        ("RUN", Command.RUN),
        ("ALL", Command.ALL),
        ("FIND", Command.FIND),
        ("PRINT", Command.PRINT),
        ("EXIT", Command.EXIT),
        ("define", Command.INVALID),
        ("", Command.INVALID),
    ],
)
def test_parse_command(word, command):
    assert parse_command(word) is command


def test_menu_text_layout():
    text = menu_text()
    assert text.startswith("\t\t   Digital Integrated Circuits console simulator")
    assert " 1.  DEFINE | Creates a logic integrated circuit" in text
    assert " 6.  EXIT   | Allows to stop the program and exit" in text
    assert text.endswith("\n\nEnter a command: ")


def test_define_and_run():
    sim = Simulator()
    keep, out, err = _run(sim, 'DEFINE F(a,b) "a&b"')
    assert keep is True
    assert err == ""
    assert out == "\n" + PROMPT
    keep, out, err = _run(sim, "RUN F(1,1)")
    assert out.startswith("Result: 1\n")
    keep, out, err = _run(sim, "RUN F(1,0)")
    assert out.startswith("Result: 0\n")


def test_define_invalid_expression():
    sim = Simulator()
    keep, out, err = _run(sim, 'DEFINE F(a) "a&q"')
    assert keep is True
    assert out == ""
    assert "Found NOT valid token {q}." in err
    assert "Invalid expression entered. Skip DEFINE command." in err
    assert len(sim.storage) == 0


def test_define_duplicate():
    sim = Simulator()
    _run(sim, 'DEFINE F(a) "a"')
    _, _, err = _run(sim, 'DEFINE F(b) "!b"')
    assert "'F' already exist" in err
    assert sim.storage.find("F") == parse_definition('F(a) "a"')


def test_run_unknown_circuit():
    _, out, err = _run(Simulator(), "RUN Z(1)")
    assert "'Z' does NOT exist" in err
    assert "Result" not in out


def test_all_lists_every_row():
    sim = Simulator()
    _run(sim, 'DEFINE G(a,b,c) "a&b|c"')
    _, out, _ = _run(sim, "ALL G")
    lines = out.splitlines()
    assert lines[0] == 'Execute G "a&b|c"'
    rows = [line for line in lines if "Output:" in line]
    assert len(rows) == 8
    assert rows[0].startswith("0 | 0 | 0 | Output:")
    circuit = sim.storage.find("G")
    for row, (_, result) in zip(rows, circuit.truth_rows()):
        assert row.endswith(f"Output: {result}")


def test_all_unknown_circuit():
    _, _, err = _run(Simulator(), "ALL Q")
    assert "skip ALL command" in err


def test_print_lists_definitions():
    sim = Simulator()
    _run(sim, 'DEFINE F(a,b) "a|b"')
    _, out, _ = _run(sim, "PRINT")
    assert out.splitlines()[0] == ' 1.F(a,b): "a|b"'


def test_find_from_file(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text("0 0 0\n0 1 1\n1 0 1\n1 1 0\n")
    _, out, err = _run(Simulator(), f'FIND "{path}"')
    assert err == ""
    table = load_truth_table(path)
    assert f"Integrated circuit: {find_expression(table)}\n" in out
    for row in table.format_rows():
        assert row in out


def test_find_missing_file(tmp_path):
    missing = tmp_path / "absent.txt"
    keep, out, err = _run(Simulator(), f'FIND "{missing}"')
    assert keep is True
    assert out == ""
    assert "Skip FIND command." in err


def test_invalid_command():
    _, out, err = _run(Simulator(), "HELLO")
    assert err == "Invalid command. Please try again.\n"
    assert out == "\n" + PROMPT


def test_exit_stops():
    keep, out, _ = _run(Simulator(), "EXIT")
    assert keep is False
    assert out == ""


def test_main_session(monkeypatch, capsys):
    script = 'DEFINE F(a) "!a"\nRUN F(0)\nEXIT\nRUN F(1)\n'
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith(menu_text())
    assert "Result: 1" in captured.out
    assert "Result: 0" not in captured.out
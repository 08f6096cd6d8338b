import io

import pytest

from practicum.attendance import Attendance, main


def test_new_attendance_everyone_absent():
    att = Attendance()
    assert att.present() == []
    assert att.absent() == list(range(64))


def test_set_and_clear():
    att = Attendance()
    att.set(5)
    att.set(63)
    assert att.is_present(5) is True
    assert att.present() == [5, 63]
    att.clear(5)
    assert att.is_present(5) is False
    assert att.present() == [63]


def test_toggle_twice_restores():
    att = Attendance()
    att.set(10)
    before = att.mask
    att.toggle(0)
    assert att.is_present(0) is True
    att.toggle(0)
    assert att.mask == before


def test_present_and_absent_partition():
    att = Attendance()
    for student in (0, 7, 31, 32, 63):
        att.set(student)
    assert sorted(att.present() + att.absent()) == list(range(64))
    assert set(att.present()).isdisjoint(att.absent())


@pytest.mark.parametrize("student_id", [-1, 64, 100])
def test_invalid_ids(student_id):
    att = Attendance()
    with pytest.raises(ValueError, match="Invalid student id"):
        att.set(student_id)
    with pytest.raises(ValueError):
        att.is_present(student_id)


def test_main_set_and_show(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n1\n2\n3\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Students present in class: 2 5 \n" in out
    assert "Have a nice day!" in out


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n9\n1\n70\n5\n"))
    assert main([]) == 0
    err = capsys.readouterr().err
    assert "Invalid input. Please enter an integer." in err
    assert "Received unsupported option: 9" in err
    assert "Invalid student id: 70" in err


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Have a nice day!" not in out
    assert out.count("Option: ") == 2
import io

import pytest

from bookport.cli import Session
from bookport.myinfo import (
    HistoryEntry,
    format_history,
    manage_command,
    myinfo_command,
    run_myinfo,
    user_history,
)
from bookport.storage import Library


def scripted(*answers):
    pending = list(answers)

    def ask(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return ask


@pytest.fixture
def library(tmp_path):
    (tmp_path / "users.txt").write_text("Alice Kim,234567891,password,B1,4\n", encoding="utf-8")
    (tmp_path / "books.txt").write_text(
        "Python Basics,Guido,B1,N\nData Tales,Ada,B2,Y\n", encoding="utf-8"
    )
    (tmp_path / "lend_return.txt").write_text(
        "234567891,B1,20240105,20240110,N\n"
        "234567891,B2,20240101,0,N\n"
        "345678912,B1,20231201,20231205,Y\n",
        encoding="utf-8",
    )
    return Library(tmp_path)


@pytest.mark.parametrize(
    "word,expected",
    [("w", "withdraw"), ("withdraw", "withdraw"), ("cha", "change"), ("m", "manage"), ("manage", "manage"), ("x", None)],
)
def test_myinfo_command(word, expected):
    assert myinfo_command(word) == expected


@pytest.mark.parametrize(
    "word,expected",
    [("l", "list"), ("list", "list"), ("rec", "record"), ("r", "record"), ("manage", None)],
)
def test_manage_command(word, expected):
    assert manage_command(word) == expected


def test_user_history_orders_and_filters(library):
    entries = user_history(library.load_records(), "234567891")
    assert [(e.date, e.kind, e.bid) for e in entries] == [
        ("20240101", "borrow", "B2"),
        ("20240105", "borrow", "B1"),
        ("20240110", "return", "B1"),
    ]


def test_user_history_unknown_user(library):
    assert user_history(library.load_records(), "999999998") == []


def test_format_history():
    entries = [HistoryEntry("20240105", "borrow", "B1"), HistoryEntry("20240110", "return", "B1")]
    assert format_history(entries) == "=> [borrow] B1 24/01/05\n[return] B1 24/01/10\n"


def test_format_history_empty():
    assert format_history([]) == ""


def test_run_myinfo_lists_held_books(library):
    session = Session(library, library.find_user("234567891"))
    out = io.StringIO()
    run_myinfo(session, scripted("zzz", "manage", "list"), out)
    text = out.getvalue()
    assert "Name: Alice Kim" in text
    assert ".!! Error: Wrong command entered" in text
    assert "Title: Python Basics" in text
    assert "Data Tales" not in text


def test_run_myinfo_prints_history(library):
    session = Session(library, library.find_user("234567891"))
    out = io.StringIO()
    run_myinfo(session, scripted("m", "rec"), out)
    expected = format_history(user_history(library.load_records(), "234567891"))
    assert out.getvalue().endswith(expected)
    assert "=> [borrow] B2" in out.getvalue()


def test_run_myinfo_stops_at_end_of_input(library):
    session = Session(library, library.find_user("234567891"))
    out = io.StringIO()
    run_myinfo(session, scripted(), out)
    assert out.getvalue().startswith("[My Information]\n")
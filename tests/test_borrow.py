import io

import pytest

from bookport.borrow import BorrowError, record_loan, run_borrow
from bookport.cli import Session
from bookport.storage import Library, LendRecord


def scripted(*answers):
    pending = list(answers)

    def ask(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return ask


@pytest.fixture
def library(tmp_path):
    (tmp_path / "users.txt").write_text(
        "Alice Kim,234567891,password,,5\nBob Lee,345678912,password,X9,4\n", encoding="utf-8"
    )
    (tmp_path / "books.txt").write_text(
        "Python Basics,Guido,B1,Y\nData Tales,Ada,B2,N\n", encoding="utf-8"
    )
    (tmp_path / "lend_return.txt").write_text("", encoding="utf-8")
    return Library(tmp_path)


def test_record_loan_updates_all_files(library):
    before = {user.student_id: user for user in library.load_users()}
    record = record_loan(library, "234567891", "B1", "20240102")

    users = {user.student_id: user for user in library.load_users()}
    assert users["234567891"].lent_bids == ["B1"]
    assert users["234567891"].lend_available == before["234567891"].lend_available - 1
    assert users["345678912"] == before["345678912"]

    books = {book.bid: book for book in library.load_books()}
    assert books["B1"].is_available is False
    assert books["B2"].is_available is False

    assert record == LendRecord("234567891", "B1", "20240102")
    assert library.load_records() == [record]
    assert library.records_path.read_text(encoding="utf-8") == "234567891,B1,20240102,0,N\n"


def test_record_loan_without_user_file(tmp_path):
    library = Library(tmp_path)
    (tmp_path / "books.txt").write_text("Python Basics,Guido,B1,Y\n", encoding="utf-8")
    with pytest.raises(BorrowError):
        record_loan(library, "234567891", "B1", "20240102")


def test_record_loan_without_book_file(tmp_path):
    library = Library(tmp_path)
    (tmp_path / "users.txt").write_text("Alice Kim,234567891,password,,5\n", encoding="utf-8")
    with pytest.raises(BorrowError):
        record_loan(library, "234567891", "B1", "20240102")


def test_run_borrow_requires_login(library):
    out = io.StringIO()
    assert run_borrow(Session(library), scripted(), out) is None
    assert "You must login first to borrow books." in out.getvalue()


def test_run_borrow_full_flow(library):
    session = Session(library, library.find_user("234567891"))
    out = io.StringIO()
    ask = scripted("Python", "bad bid!", "B9", "B2", "B1", "2024/13/01", "2024/01/02", "")
    record = run_borrow(session, ask, out)

    assert record.bid == "B1"
    assert record.borrow_date == "2024/01/02"
    assert session.user.lent_bids == ["B1"]
    text = out.getvalue()
    assert "no book" in text
    assert "already" in text
    books = {book.bid: book for book in library.load_books()}
    assert books["B1"].is_available is False
    assert library.load_records() == [record]


def test_run_borrow_cancel_leaves_files(library):
    session = Session(library, library.find_user("234567891"))
    books_before = library.books_path.read_text(encoding="utf-8")
    users_before = library.users_path.read_text(encoding="utf-8")
    out = io.StringIO()
    result = run_borrow(session, scripted("Python", "B1", "20240102", "NO"), out)

    assert result is None
    assert "Borrowing cancelled." in out.getvalue()
    assert library.books_path.read_text(encoding="utf-8") == books_before
    assert library.users_path.read_text(encoding="utf-8") == users_before
    assert library.load_records() == []
"""Borrowing a book: the prompt and the updates to the data files."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from bookport.commands import trim
from bookport.search import run_search
from bookport.storage import Library, LendRecord, format_record
from bookport.validation import is_valid_bid, is_valid_date


class BorrowError(Exception):
    """Raised when a loan cannot be written to the data files."""


def record_loan(library: Library, student_id: str, bid: str, borrow_date: str) -> LendRecord:
    """Store a loan: the user holds the book, the book is out, the loan is logged."""
    if not library.users_path.exists():
        raise BorrowError("Cannot open file_user.")
    if not library.books_path.exists():
        raise BorrowError("Cannot open file_books.")

    users = library.load_users()
    for user in users:
        if user.student_id == student_id:
            user.lent_bids.append(bid)
            user.lend_available -= 1
    library.save_users(users)

    books = library.load_books()
    for book in books:
        if book.bid == bid:
            book.is_available = False
    library.save_books(books)

    record = LendRecord(student_id, bid, borrow_date)
    with library.records_path.open("a", encoding="utf-8") as handle:
        handle.write(format_record(record) + "\n")
    return record


def _choose_book(library: Library, ask: Callable[[str], str], out: TextIO) -> str | None:
    while True:
        bid = trim(ask("Enter BID of the book to borrow > "))
        if not is_valid_bid(bid):
            continue
        if not library.books_path.exists():
            print("Cannot open file.", file=out)
            return None
        print("\n[Search Result]", file=out)
        book = next((item for item in library.load_books() if item.bid == bid), None)
        if book is None:
            print("Error: no book with that BID", file=out)
            continue
        if not book.is_available:
            print("Error: the book is already on loan", file=out)
            continue
        return bid


def run_borrow(session, ask: Callable[[str], str] = input, out: TextIO | None = None) -> LendRecord | None:
    """Search, pick a book and a loan date, confirm and store the loan."""
    out = out if out is not None else sys.stdout
    if not session.is_logged_in:
        print("You must login first to borrow books.", file=out)
        return None

    library = session.library
    run_search(library, ask, out)
    bid = _choose_book(library, ask, out)
    if bid is None:
        return None

    while True:
        borrow_date = trim(ask("Enter loan date > "))
        if is_valid_date(borrow_date):
            break

    confirm = trim(ask("Do you really want to borrow this book? (Enter to confirm / No to cancel) > "))
    if confirm.lower() == "no":
        print("Borrowing cancelled.", file=out)
        return None

    try:
        record = record_loan(library, session.user.student_id, bid, borrow_date)
    except BorrowError as error:
        print(error, file=out)
        return None

    updated = library.find_user(session.user.student_id)
    if updated is not None:
        session.log_in(updated)
    return record
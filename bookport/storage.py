"""Records of users, books and loans, and the comma-separated files that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from bookport.validation import MAX_LENT_BOOKS

USER_FILE = "users.txt"
BOOK_FILE = "books.txt"
LEND_RETURN_FILE = "lend_return.txt"

_NOT_RETURNED = "0"
_FLAG_TEXT = {True: "Y", False: "N"}


@dataclass
class User:
    """A registered library member."""

    name: str
    student_id: str
    password: str
    lent_bids: list[str] = field(default_factory=list)
    lend_available: int = MAX_LENT_BOOKS


@dataclass
class Book:
    """A book in the catalogue."""

    title: str
    author: str
    bid: str
    is_available: bool = True


@dataclass
class LendRecord:
    """One loan; ``return_date`` is empty while the book is still out."""

    student_id: str
    bid: str
    borrow_date: str
    return_date: str = ""
    is_overdue: bool = False


def _fields(line: str) -> list[str]:
    """Split a line on commas, dropping empty fields."""
    return [part for part in line.rstrip("\r\n").split(",") if part]


def parse_user(line: str) -> User:
    """Build a user from ``name,id,password,bid;bid,available``."""
    parts = _fields(line)
    if len(parts) == 4:
        name, student_id, password, available = parts
        bids = ""
    elif len(parts) == 5:
        name, student_id, password, bids, available = parts
    else:
        raise ValueError(f"malformed user line: {line!r}")
    try:
        count = int(available)
    except ValueError:
        raise ValueError(f"malformed lend count in user line: {line!r}") from None
    lent = [bid for bid in bids.split(";") if bid]
    return User(name, student_id, password, lent, count)


def format_user(user: User) -> str:
    """Write a user as one line of the user file, without the newline."""
    return ",".join(
        [user.name, user.student_id, user.password, ";".join(user.lent_bids), str(user.lend_available)]
    )


def parse_book(line: str) -> Book:
    """Build a book from ``title,author,bid,Y|N``."""
    parts = _fields(line)
    if len(parts) != 4:
        raise ValueError(f"malformed book line: {line!r}")
    title, author, bid, flag = parts
    return Book(title, author, bid, flag == "Y")


def format_book(book: Book) -> str:
    """Write a book as one line of the book file, without the newline."""
    return ",".join([book.title, book.author, book.bid, _FLAG_TEXT[bool(book.is_available)]])


def parse_record(line: str) -> LendRecord:
    """Build a loan record from ``id,bid,borrowed,returned,Y|N``."""
    parts = _fields(line)
    if len(parts) != 5:
        raise ValueError(f"malformed lend/return line: {line!r}")
    student_id, bid, borrowed, returned, overdue = parts
    return_date = "" if returned == _NOT_RETURNED else returned
    return LendRecord(student_id, bid, borrowed, return_date, overdue == "Y")


def format_record(record: LendRecord) -> str:
    """Write a loan record as one line of the lend/return file, without the newline."""
    return ",".join(
        [
            record.student_id,
            record.bid,
            record.borrow_date,
            record.return_date or _NOT_RETURNED,
            _FLAG_TEXT[bool(record.is_overdue)],
        ]
    )


class Library:
    """The three data files of one library, kept in a directory."""

    def __init__(
        self,
        directory: str | Path = ".",
        users_file: str = USER_FILE,
        books_file: str = BOOK_FILE,
        records_file: str = LEND_RETURN_FILE,
    ) -> None:
        self.directory = Path(directory)
        self.users_path = self.directory / users_file
        self.books_path = self.directory / books_file
        self.records_path = self.directory / records_file

    @staticmethod
    def _lines(path: Path, create: bool = False) -> Iterator[str]:
        if not path.exists():
            if create:
                path.touch()
            return
        with path.open(encoding="utf-8") as handle:
            for line in handle:
                if line.strip():
                    yield line

    @staticmethod
    def _write(path: Path, lines: Iterator[str]) -> None:
        with path.open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")

    def load_users(self) -> list[User]:
        """Read every user; a missing file is created empty."""
        return [parse_user(line) for line in self._lines(self.users_path, create=True)]

    def load_books(self) -> list[Book]:
        """Read every book; a missing file is created empty."""
        return [parse_book(line) for line in self._lines(self.books_path, create=True)]

    def load_records(self) -> list[LendRecord]:
        """Read every loan record; a missing file is created empty."""
        return [parse_record(line) for line in self._lines(self.records_path, create=True)]

    def save_users(self, users) -> None:
        """Replace the user file with the given users."""
        self._write(self.users_path, (format_user(user) for user in users))

    def save_books(self, books) -> None:
        """Replace the book file with the given books."""
        self._write(self.books_path, (format_book(book) for book in books))

    def save_records(self, records) -> None:
        """Replace the lend/return file with the given records."""
        self._write(self.records_path, (format_record(record) for record in records))

    def _user_rows(self) -> Iterator[list[str]]:
        for line in self._lines(self.users_path):
            yield _fields(line)

    def find_user(self, student_id: str) -> User | None:
        """Return the user with this ID, counting the books still allowed from the loans held."""
        for row in self._user_rows():
            if len(row) < 2 or row[1] != student_id:
                continue
            name = row[0]
            stored = row[2] if len(row) > 2 else ""
            bid_field = row[3] if len(row) > 3 else ""
            lent = [bid for bid in bid_field.split(";") if bid][:MAX_LENT_BOOKS]
            return User(name, student_id, stored, lent, MAX_LENT_BOOKS - len(lent))
        return None

    def is_unique_student_id(self, student_id: str) -> bool:
        """True when no user has this ID yet."""
        return all(len(row) < 2 or row[1] != student_id for row in self._user_rows())

    def is_correct_password(self, student_id: str, password: str) -> bool:
        """True when the first user with this ID has this password."""
        for row in self._user_rows():
            if len(row) >= 2 and row[1] == student_id:
                return len(row) > 2 and row[2] == password
        return False

    def is_unique_bid(self, bid: str) -> bool:
        """True when no book has this ID yet."""
        for line in self._lines(self.books_path):
            row = _fields(line)
            if len(row) >= 3 and row[2] == bid:
                return False
        return True
"""Integrity check of the three library data files."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TextIO

from bookport.commands import trim
from bookport.storage import Library
from bookport.validation import (
    is_valid_bid,
    is_valid_book_author,
    is_valid_book_title,
    is_valid_date,
    is_valid_flag,
    is_valid_lend_available,
    is_valid_overdue,
    is_valid_password,
    is_valid_student_id,
    is_valid_student_name,
)

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


@dataclass
class VerificationReport:
    """Everything found while checking the data files, in the order it was found."""

    messages: list[str] = field(default_factory=list)
    created: list[Path] = field(default_factory=list)
    error_count: int = 0

    @property
    def ok(self) -> bool:
        return self.error_count == 0

    def note(self, message: str) -> None:
        self.messages.append(message)

    def error(self, message: str) -> None:
        self.messages.append(message)
        self.error_count += 1


class IntegrityError(Exception):
    """Raised when the data files hold invalid or duplicate entries."""

    def __init__(self, report: VerificationReport) -> None:
        super().__init__(f"{report.error_count} error(s) found in the data files")
        self.report = report


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _token(tokens: list[str], index: int) -> str | None:
    return tokens[index] if index < len(tokens) else None


def _check_user(tokens: list[str], line_no: int, seen: set[str], report: VerificationReport) -> None:
    name = _token(tokens, 0)
    if name is None or not is_valid_student_name(name):
        report.error(f"Invalid name in line {line_no}")
        return
    student_id = _token(tokens, 1)
    if student_id is None or not is_valid_student_id(student_id):
        report.error(f"Invalid studentId in line {line_no}")
        return
    if student_id in seen:
        report.error(f"Duplicate studentId in line {line_no}: {student_id}")
    seen.add(student_id)
    password = _token(tokens, 2)
    if password is None or not is_valid_password(password):
        report.error(f"Invalid password in line {line_no}")
        return
    count_field = _token(tokens, 3)
    count = _atoi(count_field) if count_field is not None else -1
    if not is_valid_lend_available(count):
        report.error(f"Invalid lendAvailable in line {line_no}")


def _check_book(tokens: list[str], line_no: int, seen: set[str], report: VerificationReport) -> None:
    title = _token(tokens, 0)
    if title is None or not is_valid_book_title(title):
        report.error(f"Invalid title in line {line_no}")
        return
    author = _token(tokens, 1)
    if author is None or not is_valid_book_author(author):
        report.error(f"Invalid author in line {line_no}")
        return
    bid = _token(tokens, 2)
    if bid is None or not is_valid_bid(bid):
        report.error(f"Invalid BID in line {line_no}")
        return
    if bid in seen:
        report.error(f"Duplicate BID in line {line_no}: {bid}")
    seen.add(bid)
    flag = _token(tokens, 3)
    if flag is None or not is_valid_flag(flag):
        report.error(f"Invalid flag in line {line_no}")


def _check_record(tokens: list[str], line_no: int, _seen: set[str], report: VerificationReport) -> None:
    checks = (
        (is_valid_student_id, "studentId"),
        (is_valid_bid, "BID"),
        (is_valid_date, "borrowDate"),
        (is_valid_date, "returnDate"),
        (is_valid_overdue, "overdue flag"),
    )
    for index, (check, label) in enumerate(checks):
        value = _token(tokens, index)
        if value is None or not check(value):
            report.error(f"Invalid {label} in line {line_no}")
            return


_Checker = Callable[[list[str], int, set[str], VerificationReport], None]


def verify_files(library: Library) -> VerificationReport:
    """Check the user, book and lend/return files; missing files are created empty."""
    report = VerificationReport()
    targets: tuple[tuple[str, Path, _Checker], ...] = (
        ("User", library.users_path, _check_user),
        ("Book", library.books_path, _check_book),
        ("Lend/Return", library.records_path, _check_record),
    )
    for label, path, checker in targets:
        if not path.exists():
            path.touch()
            report.created.append(path)
            report.note(f"[INFO] Empty file created: {path.name}")
            continue
        report.note(f">>> Verifying {label} file...")
        seen: set[str] = set()
        with path.open(encoding="utf-8") as handle:
            for line_no, raw in enumerate(handle, start=1):
                tokens = [part for part in trim(raw).split(",") if part]
                checker(tokens, line_no, seen, report)
    return report


def run_verify(library: Library, out: TextIO | None = None) -> VerificationReport:
    """Print the check of the data files; raise IntegrityError when any entry is bad."""
    out = out if out is not None else sys.stdout
    report = verify_files(library)
    for message in report.messages:
        print(message, file=out)
    if report.ok:
        print(">>> All files are valid.", file=out)
        return report
    print(
        f">>> A total of {report.error_count} error(s) were found. Terminating program.",
        file=out,
    )
    raise IntegrityError(report)
"""Syntax and meaning rules for the fields stored in the library data files."""

from __future__ import annotations

import string
from collections import Counter

_C_SPACE = " \t\n\v\f\r"
_ASCII_ALNUM = string.ascii_letters + string.digits

MAX_NAME_LENGTH = 100
STUDENT_ID_LENGTH = 9
MAX_REPEATED_ID_DIGITS = 8
MIN_PASSWORD_LENGTH = 5
MAX_PASSWORD_LENGTH = 20
MAX_REPEATED_PASSWORD_CHARS = 5
MAX_LENT_BOOKS = 5
MIN_YEAR = 1900
MAX_YEAR = 2100

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_valid_student_name(name: str | None) -> bool:
    """A name is 1 to 100 English letters or plain spaces."""
    if not name or len(name) > MAX_NAME_LENGTH:
        return False
    return all(ch in string.ascii_letters or ch == " " for ch in name)


def is_valid_student_id(student_id: str | None) -> bool:
    """A student ID is nine digits, not starting with zero, no digit eight times or more."""
    if not student_id or len(student_id) != STUDENT_ID_LENGTH or student_id[0] == "0":
        return False
    if not all(ch in string.digits for ch in student_id):
        return False
    return max(Counter(student_id).values()) < MAX_REPEATED_ID_DIGITS


def is_valid_password(password: str | None) -> bool:
    """A password is 5 to 20 non-space characters with a letter and a digit.

    No single character may appear five times or more.
    """
    if not password or not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
        return False
    if any(ch in _C_SPACE for ch in password):
        return False
    if max(Counter(password).values()) >= MAX_REPEATED_PASSWORD_CHARS:
        return False
    has_alpha = any(ch in string.ascii_letters for ch in password)
    has_digit = any(ch in string.digits for ch in password)
    return has_alpha and has_digit


def is_valid_lend_available(count: int) -> bool:
    """The number of books a user may still borrow lies between 0 and 5."""
    return 0 <= count <= MAX_LENT_BOOKS


def is_valid_book_title(title: str) -> bool:
    """A title is non-empty, uses only plain spaces as blanks and is not padded."""
    if not title:
        return False
    if any(ch in _C_SPACE and ch != " " for ch in title):
        return False
    return title[0] not in _C_SPACE and title[-1] not in _C_SPACE


def is_valid_book_author(author: str) -> bool:
    """An author is non-empty and holds no whitespace at all."""
    if not author:
        return False
    return not any(ch in _C_SPACE for ch in author)


def is_valid_bid(bid: str) -> bool:
    """A book ID is letters, digits, '-', '.' and ':' only."""
    if not bid:
        return False
    return all(ch in _ASCII_ALNUM or ch in "-.:" for ch in bid)


def is_valid_flag(flag: str | None) -> bool:
    """An availability flag is 'Y' or 'N'."""
    return flag in ("Y", "N")


def is_meaningful_flag(flag: str | None) -> bool:
    """True when the flag says the book can be borrowed."""
    return flag == "Y"


def is_valid_overdue(overdue: str | None) -> bool:
    """An overdue flag is 'Y' or 'N'."""
    return overdue in ("Y", "N")


def is_meaningful_overdue(overdue: str | None) -> bool:
    """True when the flag says the loan is overdue."""
    return overdue == "Y"


def _scan_int(text: str, pos: int, width: int) -> tuple[int, int] | None:
    """Read an integer field of at most ``width`` characters, scanf style."""
    while pos < len(text) and text[pos] in _C_SPACE:
        pos += 1
    start = pos
    end = min(len(text), pos + width)
    if pos < end and text[pos] in "+-":
        pos += 1
    digits_start = pos
    while pos < end and text[pos] in string.digits:
        pos += 1
    if pos == digits_start:
        return None
    return int(text[start:pos]), pos


def _scan_date(text: str, separator: str) -> tuple[int, int, int] | None:
    values: list[int] = []
    pos = 0
    for index, width in enumerate((4, 2, 2)):
        if index and separator:
            if pos >= len(text) or text[pos] != separator:
                return None
            pos += 1
        scanned = _scan_int(text, pos, width)
        if scanned is None:
            return None
        value, pos = scanned
        values.append(value)
    year, month, day = values
    return year, month, day


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(date: str | None) -> bool:
    """A date is YYYY/MM/DD, YYYY-MM-DD or YYYYMMDD between 1900 and 2100."""
    if not date or len(date) < 8:
        return False
    for separator in ("/", "-", ""):
        parsed = _scan_date(date, separator)
        if parsed is not None:
            break
    else:
        return False
    year, month, day = parsed
    if not MIN_YEAR <= year <= MAX_YEAR or not 1 <= month <= 12:
        return False
    days = _DAYS_IN_MONTH[month - 1]
    if month == 2 and _is_leap(year):
        days = 29
    return 1 <= day <= days
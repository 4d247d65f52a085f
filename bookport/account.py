"""Prompts that create an account and log a user in."""

from __future__ import annotations

import string
import sys
from collections import Counter
from typing import Callable, TextIO

from bookport.storage import Library, User
from bookport.validation import (
    MAX_LENT_BOOKS,
    MAX_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MAX_REPEATED_ID_DIGITS,
    MAX_REPEATED_PASSWORD_CHARS,
    MIN_PASSWORD_LENGTH,
    STUDENT_ID_LENGTH,
    is_valid_password,
    is_valid_student_id,
    is_valid_student_name,
)

_C_SPACE = " \t\n\v\f\r"
_PREFIX = ".!! Error: "
_UNKNOWN = _PREFIX + "An unknown error occured."

_NAME_PROMPT = "Enter name "
_ID_PROMPT = "Enter student ID "
_PHRASE_PROMPT = "Enter password "

Ask = Callable[[str], str]


def name_error(name: str) -> str | None:
    """The message explaining why a name is rejected, or None when it is valid."""
    if not name:
        return _PREFIX + "Name cannot be an empty string."
    if len(name) > MAX_NAME_LENGTH:
        return _PREFIX + "The name must be 1 to 100 characters long."
    if any(ch in _C_SPACE and ch != " " for ch in name):
        return _PREFIX + "Name does not allow spaces except spaces through the space bar."
    if any(ch not in string.ascii_letters and ch != " " for ch in name):
        return _PREFIX + "Name cannot be entered in any language other than English."
    return None if is_valid_student_name(name) else _UNKNOWN


def student_id_error(student_id: str) -> str | None:
    """The message explaining why a student ID is rejected, or None when it is valid."""
    if not student_id:
        return _PREFIX + "Student ID cannot be an empty string."
    if any(ch in _C_SPACE for ch in student_id):
        return _PREFIX + "Student ID cannot contain spaces."
    if not all(ch in string.digits for ch in student_id):
        return _PREFIX + "Student ID can only be entered in numbers."
    if len(student_id) != STUDENT_ID_LENGTH:
        return _PREFIX + "Student ID must consist of 9 digits."
    if student_id[0] == "0":
        return _PREFIX + "The first number of student ID cannot be zero."
    if max(Counter(student_id).values()) >= MAX_REPEATED_ID_DIGITS:
        return _PREFIX + "A student ID cannot consist of more than eight identical numbers."
    return None if is_valid_student_id(student_id) else _UNKNOWN


def password_error(password: str) -> str | None:
    """The message explaining why a password is rejected, or None when it is valid."""
    if not password:
        return _PREFIX + "Password cannot be an empty string."
    if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
        return _PREFIX + "The password must be 5 to 20 characters long."
    if any(ch in _C_SPACE for ch in password):
        return _PREFIX + "Password cannot contain spaces"
    if max(Counter(password).values()) >= MAX_REPEATED_PASSWORD_CHARS:
        return (
            _PREFIX
            + "The password cannot contain 5 or more of the same letter, digit, or special character."
        )
    if not (any(ch in string.ascii_letters for ch in password) and any(ch in string.digits for ch in password)):
        return _PREFIX + "Password must be at least 1 character long and include at least 1 digit"
    return None if is_valid_password(password) else _PREFIX + "An unknown error occured"


def _read(ask: Ask, prompt: str) -> str:
    return ask(prompt).rstrip("\n")


def _prompt_valid(ask: Ask, out: TextIO, prompt: str, check: Callable[[str], str | None]) -> str:
    while True:
        answer = _read(ask, prompt)
        error = check(answer)
        if error is None:
            return answer
        print(error, file=out)


def register_user(library: Library, ask: Ask = input, out: TextIO | None = None) -> User | None:
    """Ask for a new account and store it; None when the user cancels."""
    out = out if out is not None else sys.stdout
    name = _prompt_valid(ask, out, _NAME_PROMPT, name_error)

    while True:
        student_id = _read(ask, _ID_PROMPT)
        error = student_id_error(student_id)
        if error is not None:
            print(error, file=out)
        elif not library.is_unique_student_id(student_id):
            print(
                _PREFIX + "User information with the student ID you entered already exists",
                file=out,
            )
        else:
            break

    chosen = _prompt_valid(ask, out, _PHRASE_PROMPT, password_error)

    print(f"\nStudent ID: {student_id}", file=out)
    print(f"Password: {chosen}", file=out)
    if _read(ask, "Do you really want to sign up? (.../No) ") == "No":
        print("Account creation canceled.", file=out)
        return None

    user = User(name, student_id, chosen, [], MAX_LENT_BOOKS)
    users = library.load_users()
    users.append(user)
    library.save_users(users)
    print("Account successfully created.", file=out)
    return user


def login_user(library: Library, ask: Ask = input, out: TextIO | None = None) -> User | None:
    """Ask for a student ID and password; the stored user, or None when the user cancels."""
    out = out if out is not None else sys.stdout

    while True:
        student_id = _read(ask, _ID_PROMPT)
        error = student_id_error(student_id)
        if error is not None:
            print(error, file=out)
        if not library.is_unique_student_id(student_id):
            break
        print(_PREFIX + "No user information exists for the entered student ID.", file=out)

    while True:
        entered = _read(ask, _PHRASE_PROMPT)
        error = password_error(entered)
        if error is not None:
            print(error, file=out)
        elif library.is_correct_password(student_id, entered):
            break
        else:
            print(_PREFIX + "Password does not match.", file=out)

    print(f"\nStudent ID: {student_id}", file=out)
    print(f"Password: {entered}", file=out)
    if _read(ask, "Are you sure you want to login? (.../No) ") == "No":
        print("Login canceled.", file=out)
        return None
    print("Login success.", file=out)
    return library.find_user(student_id)
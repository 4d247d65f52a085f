"""The member information prompt: loans held and loan history."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

from bookport.account import login_user
from bookport.commands import trim
from bookport.storage import LendRecord

_MYINFO_SYNONYMS = {
    "withdraw": ("withdraw", "withdra", "withdr", "withd", "with", "wit", "wi", "w"),
    "change": ("change", "chang", "chan", "cha", "ch", "c"),
    "manage": ("manage", "manag", "mana", "man", "ma", "m"),
}

_MANAGE_SYNONYMS = {
    "list": ("list", "lis", "li", "l"),
    "record": ("record", "recor", "reco", "rec", "re", "r"),
}

_PROMPT = "BookPort: My info - Enter command>"
_WRONG = ".!! Error: Wrong command entered"


def _lookup(table: dict[str, tuple[str, ...]], word: str) -> str | None:
    return next((name for name, words in table.items() if word in words), None)


def myinfo_command(word: str) -> str | None:
    """The member-info command a word stands for, or None."""
    return _lookup(_MYINFO_SYNONYMS, word)


def manage_command(word: str) -> str | None:
    """The manage sub-command a word stands for, or None."""
    return _lookup(_MANAGE_SYNONYMS, word)


@dataclass(frozen=True)
class HistoryEntry:
    """One borrow or return event of a member."""

    date: str
    kind: str
    bid: str


def user_history(records: Iterable[LendRecord], student_id: str) -> list[HistoryEntry]:
    """Every borrow and return of the member, ordered by date."""
    entries: list[HistoryEntry] = []
    for record in records:
        if record.student_id != student_id:
            continue
        entries.append(HistoryEntry(record.borrow_date, "borrow", record.bid))
        if record.return_date:
            entries.append(HistoryEntry(record.return_date, "return", record.bid))
    return sorted(entries, key=lambda entry: entry.date)


def format_history(entries: Iterable[HistoryEntry]) -> str:
    """Lines of the form ``[kind] bid YY/MM/DD``, the first preceded by ``=> ``."""
    lines = [
        f"[{entry.kind}] {entry.bid} {entry.date[2:4]}/{entry.date[4:6]}/{entry.date[6:8]}\n"
        for entry in entries
    ]
    return "=> " + "".join(lines) if lines else ""


def _read_command(ask: Callable[[str], str], out: TextIO, resolve: Callable[[str], str | None]) -> str:
    while True:
        command = resolve(trim(ask(_PROMPT)))
        if command is not None:
            return command
        print(_WRONG, file=out)


def _run_manage(session, ask: Callable[[str], str], out: TextIO) -> None:
    command = _read_command(ask, out, manage_command)
    library = session.library
    if command == "list":
        books = library.load_books()
        for lent in session.user.lent_bids:
            for book in books:
                if book.bid == lent:
                    print(f"Title: {book.title}", file=out)
                    print(f"Author: {book.author}", file=out)
                    print(f"BID: {book.bid}", file=out)
    else:
        history = user_history(library.load_records(), session.user.student_id)
        out.write(format_history(history))


def run_myinfo(session, ask: Callable[[str], str] = input, out: TextIO | None = None) -> None:
    """Show the member's details and run one member-info command; log in first if needed."""
    out = out if out is not None else sys.stdout
    if not session.is_logged_in:
        user = login_user(session.library, ask, out)
        if user is not None:
            session.log_in(user)
        return

    print("[My Information]", file=out)
    print(f"Name: {session.user.name}", file=out)
    print(f"ID: {session.user.student_id}", file=out)
    try:
        command = _read_command(ask, out, myinfo_command)
        if command == "manage":
            _run_manage(session, ask, out)
        else:
            print(f".!! Error: The {command} command is not available.", file=out)
    except EOFError:
        return
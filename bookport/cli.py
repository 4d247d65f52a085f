"""The BookPort command prompt."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from bookport.account import login_user, register_user
from bookport.borrow import run_borrow
from bookport.commands import canonical_command, help_text, usage_text
from bookport.integrity import IntegrityError, run_verify
from bookport.myinfo import run_myinfo
from bookport.search import run_search
from bookport.storage import Library, User

_SEPARATORS = re.compile(r"[ \t\n]+")


@dataclass
class Session:
    """The library in use and the member logged in, if any."""

    library: Library = field(default_factory=Library)
    user: User | None = None

    @property
    def is_logged_in(self) -> bool:
        return self.user is not None

    def log_in(self, user: User) -> None:
        self.user = user

    def log_out(self) -> None:
        self.user = None


def _run_logout(session: Session, out: TextIO) -> None:
    if not session.is_logged_in:
        print("You are not logged in.", file=out)
        return
    session.log_out()
    print("Logged out.", file=out)


def dispatch(session: Session, line: str, ask: Callable[[str], str] = input, out: TextIO | None = None) -> bool:
    """Run one command line; False when the program should stop."""
    out = out if out is not None else sys.stdout
    tokens = [token for token in _SEPARATORS.split(line) if token]
    command = canonical_command(tokens[0]) if tokens else None
    if command is None:
        out.write(usage_text())
        return True

    arguments = tokens[1:3]
    if command == "help":
        if len(arguments) > 1:
            print("Error: Too many arguments. Please enter only one command at a time.", file=out)
            out.write(usage_text())
        else:
            out.write(help_text(arguments[0] if arguments else None))
        return True

    if arguments:
        print("Error: No arguments should be provided.", file=out)
        return True

    library = session.library
    if command == "quit":
        print("Exiting program...", file=out)
        return False
    if command == "verify":
        run_verify(library, out)
    elif command == "account":
        register_user(library, ask, out)
    elif command == "login":
        user = login_user(library, ask, out)
        if user is not None:
            session.log_in(user)
    elif command == "logout":
        _run_logout(session, out)
    elif command == "search":
        run_search(library, ask, out)
    elif command == "borrow":
        run_borrow(session, ask, out)
    elif command == "return":
        print("Returning books is not available.", file=out)
    elif command == "myinfo":
        run_myinfo(session, ask, out)
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the prompt until quit or end of input."""
    parser = argparse.ArgumentParser(prog="bookport", description="Library lending prompt.")
    parser.add_argument("--data-dir", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)
    session = Session(Library(args.data_dir))
    try:
        while dispatch(session, input("BookPort >"), input, sys.stdout):
            pass
    except EOFError:
        pass
    except IntegrityError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
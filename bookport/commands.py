"""Command words of the prompt, their synonyms and the help texts."""

from __future__ import annotations

_C_SPACE = " \t\n\v\f\r"

_SYNONYMS: dict[str, tuple[str, ...]] = {
    "help": ("?", "help", "hel", "he", "h"),
    "quit": (".", "quit"),
    "verify": ("!", "verify", "verif", "ver", "v"),
    "account": ("a", "account", "accoun", "acc", "ac"),
    "login": ("in", "login", "logi", "logo", "i"),
    "logout": ("out", "logout", "logou", "ou", "o"),
    "search": ("/", "search", "searc", "se", "sea", "s"),
    "borrow": ("$", "borrow", "borro", "borr", "bor", "bo", "b"),
    "return": ("r", "return", "retur", "ret", "re"),
    "myinfo": ("info", "myinfo", "myinf", "myin", "myi", "my", "m"),
}

_COMMANDS: dict[str, str] = {}
for _canonical, _words in _SYNONYMS.items():
    for _word in _words:
        _COMMANDS.setdefault(_word, _canonical)

_DESCRIPTIONS = {
    "help": "help : Show help for all or a specific command",
    "quit": "quit : Exit the program immediately",
    "verify": "verify : Check data integrity of the 3 data files",
    "account": "account : Move to create account prompt",
    "login": "login : Move to login prompt",
    "logout": "logout : Logout current session",
    "search": "search : Search book info by keyword",
    "borrow": "borrow : Move to borrow prompt",
    "return": "return : Move to return prompt",
    "myinfo": "myinfo : Show currently logged-in user's info",
}

_RULE = "-" * 62

_USAGE_LINES = (
    _RULE,
    " Command | Arguments              | Description               ",
    _RULE,
    " ? help  | None or one command    | Show help for all or a specific command",
    " ! verify| None                   | Proceed with file integrity verification",
    " in login| None                   | Move to login prompt      ",
    " out logout| None                 | Logout                    ",
    " / search| None                   | Display books matching a keyword",
    " $ borrow| None                   | Move to borrow prompt     ",
    " a account| None                  | Move to create account prompt",
    " r return| None                   | Move to return prompt     ",
    " info myinfo| None               | Show member\u2019s information ",
    _RULE,
)

COMMANDS = tuple(_SYNONYMS)


def trim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip(_C_SPACE)


def canonical_command(word: str) -> str | None:
    """Return the command a word stands for, or None when it names none."""
    return _COMMANDS.get(word)


def usage_text() -> str:
    """The table of all commands."""
    return "\n".join(_USAGE_LINES) + "\n"


def help_text(argument: str | None) -> str:
    """Help for one command, or the full table when the argument names none."""
    command = canonical_command(argument) if argument is not None else None
    if command is None:
        return usage_text()
    return _DESCRIPTIONS[command] + "\n"
import pytest

from bookport.commands import COMMANDS, canonical_command, help_text, trim, usage_text


@pytest.mark.parametrize(
    "word, expected",
    [
        ("?", "help"),
        ("h", "help"),
        (".", "quit"),
        ("!", "verify"),
        ("a", "account"),
        ("in", "login"),
        ("logo", "login"),
        ("out", "logout"),
        ("o", "logout"),
        ("/", "search"),
        ("sea", "search"),
        ("$", "borrow"),
        ("b", "borrow"),
        ("r", "return"),
        ("re", "return"),
        ("info", "myinfo"),
        ("m", "myinfo"),
    ],
)
def test_canonical_command(word, expected):
    assert canonical_command(word) == expected


@pytest.mark.parametrize("word", ["", "x", "HELP", "quitt", "lo"])
def test_unknown_command(word):
    assert canonical_command(word) is None


def test_every_command_names_itself():
    for command in COMMANDS:
        assert canonical_command(command) == command


def test_trim():
    assert trim("  hello world \t\n") == "hello world"
    assert trim(" \t ") == ""
    assert trim("x") == "x"


def test_usage_lists_commands():
    text = usage_text()
    assert text.startswith("-" * 62)
    assert " Command | Arguments              | Description               " in text
    assert " $ borrow| None                   | Move to borrow prompt     " in text


@pytest.mark.parametrize(
    "argument, expected",
    [
        ("?", "help : Show help for all or a specific command\n"),
        ("quit", "quit : Exit the program immediately\n"),
        ("v", "verify : Check data integrity of the 3 data files\n"),
        ("b", "borrow : Move to borrow prompt\n"),
        ("info", "myinfo : Show currently logged-in user's info\n"),
    ],
)
def test_help_for_command(argument, expected):
    assert help_text(argument) == expected


def test_help_without_argument_or_unknown():
    assert help_text(None) == usage_text()
    assert help_text("nonsense") == usage_text()
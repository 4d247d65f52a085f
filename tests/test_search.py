import io

import pytest

from bookport.search import MAX_KEYWORDS, book_matches, run_search, search_books, split_keywords
from bookport.storage import Book, Library

BOOKS = [
    Book("The Great Gatsby", "Fitzgerald", "B001", True),
    Book("Great Expectations", "Dickens", "B002", False),
    Book("Hard Times", "Dickens", "B003", True),
]


@pytest.fixture
def library(tmp_path):
    lib = Library(tmp_path)
    lib.save_books(BOOKS)
    return lib


def test_split_keywords_on_spaces_and_tabs():
    assert split_keywords("  harry   potter\tbook ") == ["harry", "potter", "book"]


def test_split_keywords_limit():
    words = [f"w{i}" for i in range(15)]
    assert split_keywords(" ".join(words)) == words[:MAX_KEYWORDS]


def test_split_keywords_empty():
    assert split_keywords("   ") == []


def test_book_matches_title_author_and_exact_bid():
    book = BOOKS[0]
    assert book_matches(book, ["Great", "Fitz"])
    assert book_matches(book, ["B001"])
    assert not book_matches(book, ["B00"])
    assert not book_matches(book, ["Great", "Dickens"])


def test_search_books_requires_all_keywords():
    assert search_books(BOOKS, "Great") == BOOKS[:2]
    assert search_books(BOOKS, "Great Dickens") == [BOOKS[1]]
    assert search_books(BOOKS, "") == BOOKS


def test_run_search_prints_matches(library):
    out = io.StringIO()
    found = run_search(library, lambda prompt: "Dickens", out)
    assert found == BOOKS[1:]
    text = out.getvalue()
    assert "[Search Result]" in text
    assert "> Title: Hard Times\n   author: Dickens\n   BID: B003\n" in text


def test_run_search_retries_until_found(library):
    answers = iter(["Tolstoy", "B001"])
    out = io.StringIO()
    found = run_search(library, lambda prompt: next(answers), out)
    assert found == [BOOKS[0]]
    assert ".!!No search results." in out.getvalue()


def test_run_search_without_book_file(tmp_path):
    out = io.StringIO()
    assert run_search(Library(tmp_path), lambda prompt: "x", out) == []
    assert out.getvalue() == "Cannot open file.\n"
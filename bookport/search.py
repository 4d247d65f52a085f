"""Keyword search over the book catalogue."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, TextIO

from bookport.commands import trim
from bookport.storage import Book, Library

MAX_KEYWORDS = 10


def split_keywords(query: str) -> list[str]:
    """Split a query on spaces and tabs, keeping at most ten keywords."""
    return [word for word in re.split(r"[ \t]+", trim(query)) if word][:MAX_KEYWORDS]


def book_matches(book: Book, keywords: Iterable[str]) -> bool:
    """True when every keyword is in the title or author, or is the whole BID."""
    return all(
        keyword in book.title or keyword in book.author or keyword == book.bid
        for keyword in keywords
    )


def search_books(books: Iterable[Book], query: str) -> list[Book]:
    """The books that match every keyword of the query; an empty query matches all."""
    keywords = split_keywords(query)
    return [book for book in books if book_matches(book, keywords)]


def run_search(
    library: Library,
    ask: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> list[Book]:
    """Ask for keywords until some books match, print them and return them."""
    out = out if out is not None else sys.stdout
    while True:
        query = ask("Enter search keyword > ").rstrip("\n")
        if not library.books_path.exists():
            print("Cannot open file.", file=out)
            return []
        found = search_books(library.load_books(), query)
        print("\n[Search Result]", file=out)
        for book in found:
            print(f"> Title: {book.title}\n   author: {book.author}\n   BID: {book.bid}\n", file=out)
        if found:
            return found
        print(".!!No search results.\n", file=out)
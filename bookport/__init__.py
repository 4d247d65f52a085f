"""Command-line library lending system: accounts, book search, loans and data file checks."""

__version__ = "0.1.0"
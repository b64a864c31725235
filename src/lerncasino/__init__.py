"""LernCasino: gamified quiz and flashcard learning app."""

__version__ = "0.1.0"

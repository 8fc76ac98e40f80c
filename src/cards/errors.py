# src/cards/errors.py


class CardsError(Exception):
    """Base class for errors raised by the cards package."""
    pass


class InvalidArgument(CardsError, ValueError):
    """Raised when a caller passes malformed input (e.g. a negative hand size)."""
    pass


class DecodeError(CardsError, ValueError):
    """Raised when bytes are not a deck written by save()."""
    pass


class LoadError(CardsError):
    """Raised when load() cannot read the deck file."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(filename, reason)

    def __str__(self) -> str:
        return f"Error loading {self.filename!r}: {self.reason}"


class DeckFileNotFound(LoadError):
    def __init__(self, filename: str, reason: str = "file does not exist") -> None:
        super().__init__(filename, reason)

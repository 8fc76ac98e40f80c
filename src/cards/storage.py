# src/cards/storage.py

import os
from typing import List, Sequence, Union

from .codec import encode_deck, decode_deck
from .errors import LoadError, DeckFileNotFound
from .logging_utils import get_logger, log_file_io

_log = get_logger("cards.storage")

PathType = Union[str, "os.PathLike[str]"]


def save(deck: Sequence[str], filename: PathType) -> None:
    """
    Writes deck to filename, replacing whatever was there.
    OSError (permissions, missing directory, disk full, unusable path)
    propagates to the caller.
    Nothing locks the file: concurrent saves to one path are last-write-wins.
    """
    raw = encode_deck(deck)
    path = os.fspath(filename)
    try:
        with open(path, "wb") as f:
            f.write(raw)
    except OSError as e:
        _log.error(f"Could not save deck to {path}: {e}")
        raise
    except ValueError as e:
        # unusable path, e.g. an embedded NUL
        _log.error(f"Could not save deck to {path!r}: {e}")
        raise OSError(str(e)) from e
    log_file_io(_log, "OUT", path, raw, parsed=f"{len(deck)} cards", note="save")


def load(filename: PathType) -> List[str]:
    """
    Reads a deck written by save().

    Raises DeckFileNotFound if the file is missing, LoadError for any other
    read failure and DecodeError if the content is not a saved deck.
    """
    path = os.fspath(filename)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except FileNotFoundError as e:
        _log.info(f"No deck file at {path}")
        raise DeckFileNotFound(path) from e
    except OSError as e:
        _log.warning(f"Could not read deck file {path}: {e}")
        raise LoadError(path, e.strerror or str(e)) from e
    except ValueError as e:
        _log.warning(f"Could not read deck file {path!r}: {e}")
        raise LoadError(path, str(e)) from e

    deck = decode_deck(raw)
    log_file_io(_log, "IN", path, raw, parsed=f"{len(deck)} cards", note="load")
    return deck

# src/cards/codec.py

import struct
from typing import List, Sequence, Type

from .constants import (
    MAGIC_COOKIE, TYPE_DECK,
    HEADER_FORMAT, HEADER_LEN,
    CARD_LEN_FORMAT, CARD_LEN_SIZE,
    MAX_CARD_BYTES, MAX_DECK_SIZE,
)
from .errors import DecodeError, InvalidArgument
from .logging_utils import get_logger

_log = get_logger("cards.codec")


def _require(condition: bool, msg: str, error: Type[Exception] = DecodeError) -> None:
    if not condition:
        _log.warning(f"{error.__name__}: {msg}")
        raise error(msg)


# -------------------------
# DECK: cookie(4) type(1) count(4) then per card: length(2) utf-8(length)
# -------------------------
def encode_deck(deck: Sequence[str]) -> bytes:
    _require(len(deck) <= MAX_DECK_SIZE, f"deck too large: {len(deck)} cards", InvalidArgument)

    parts = [struct.pack(HEADER_FORMAT, MAGIC_COOKIE, TYPE_DECK, len(deck))]
    for i, card in enumerate(deck):
        _require(isinstance(card, str), f"card #{i} must be a str, got {type(card).__name__}", InvalidArgument)
        raw = card.encode("utf-8")
        _require(len(raw) <= MAX_CARD_BYTES, f"card #{i} is {len(raw)} bytes, max is {MAX_CARD_BYTES}", InvalidArgument)
        parts.append(struct.pack(CARD_LEN_FORMAT, len(raw)))
        parts.append(raw)
    return b"".join(parts)


def decode_deck(data: bytes) -> List[str]:
    _require(len(data) >= HEADER_LEN, f"Invalid deck length: expected at least {HEADER_LEN}, got {len(data)}")
    cookie, msg_type, count = struct.unpack(HEADER_FORMAT, data[:HEADER_LEN])
    _require(cookie == MAGIC_COOKIE, "Bad magic cookie")
    _require(msg_type == TYPE_DECK, f"Bad record type: expected {TYPE_DECK:#x}, got {msg_type:#x}")

    deck = []
    offset = HEADER_LEN
    for i in range(count):
        _require(offset + CARD_LEN_SIZE <= len(data), f"Truncated length of card #{i}")
        (size,) = struct.unpack(CARD_LEN_FORMAT, data[offset:offset + CARD_LEN_SIZE])
        offset += CARD_LEN_SIZE

        _require(offset + size <= len(data), f"Truncated card #{i}: need {size} bytes, have {len(data) - offset}")
        try:
            deck.append(data[offset:offset + size].decode("utf-8"))
        except UnicodeDecodeError as e:
            _log.warning(f"DecodeError: card #{i} is not valid utf-8")
            raise DecodeError(f"card #{i} is not valid utf-8") from e
        offset += size

    _require(offset == len(data), f"{len(data) - offset} trailing bytes after {count} cards")
    return deck

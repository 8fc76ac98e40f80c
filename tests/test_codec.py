import struct

import pytest

from src.cards.codec import encode_deck, decode_deck
from src.cards.constants import MAGIC_COOKIE, TYPE_DECK, HEADER_LEN
from src.cards.deck import create_deck
from src.cards.errors import DecodeError, InvalidArgument


def test_encode_header():
    b = encode_deck(["Ace of Spades"])
    cookie, msg_type, count = struct.unpack("!I B I", b[:HEADER_LEN])
    assert cookie == MAGIC_COOKIE
    assert msg_type == TYPE_DECK
    assert count == 1
    assert b[HEADER_LEN:] == b"\x00\x0dAce of Spades"


def test_encode_is_deterministic():
    assert encode_deck(create_deck()) == encode_deck(create_deck())


def test_deck_roundtrip():
    deck = create_deck()
    assert decode_deck(encode_deck(deck)) == deck


def test_empty_and_unicode_roundtrip():
    assert decode_deck(encode_deck([])) == []
    deck = ["", "Ace of ♠", "Ace of ♠"]
    assert decode_deck(encode_deck(deck)) == deck


def test_encode_rejects_non_str():
    with pytest.raises(InvalidArgument):
        encode_deck(["Ace of Spades", 7])


def test_encode_rejects_oversized_card():
    with pytest.raises(InvalidArgument):
        encode_deck(["x" * 0x10000])


@pytest.mark.parametrize("data", [
    b"",
    b"\xab\xcd",
    b"not a deck at all",
    struct.pack("!I B I", 0xdeadbeef, TYPE_DECK, 0),
    struct.pack("!I B I", MAGIC_COOKIE, 0x4, 0),
])
def test_decode_rejects_garbage(data):
    with pytest.raises(DecodeError):
        decode_deck(data)


def test_decode_rejects_truncated():
    b = encode_deck(create_deck())
    with pytest.raises(DecodeError):
        decode_deck(b[:-1])
    with pytest.raises(DecodeError):
        decode_deck(b[:HEADER_LEN + 1])


def test_decode_rejects_trailing_bytes():
    with pytest.raises(DecodeError):
        decode_deck(encode_deck(["Ace of Spades"]) + b"\x00")


def test_decode_rejects_bad_utf8():
    b = struct.pack("!I B I", MAGIC_COOKIE, TYPE_DECK, 1) + b"\x00\x02\xff\xfe"
    with pytest.raises(DecodeError):
        decode_deck(b)

# src/cards/constants.py

# Default deck: 4 suits x 5 values = 20 cards
VALUES = ["Ace", "Two", "Three", "Four", "Five"]
SUITS = ["Spades", "Clubs", "Hearts", "Diamonds"]

CARD_FORMAT = "{value} of {suit}"

# Saved deck file format
MAGIC_COOKIE = 0xabcddcba
TYPE_DECK = 0x5

# header: cookie(4) type(1) count(4) = 9 bytes
HEADER_FORMAT = "!I B I"
HEADER_LEN = 4 + 1 + 4

# each card: length(2) + utf-8 bytes
CARD_LEN_FORMAT = "!H"
CARD_LEN_SIZE = 2

MAX_CARD_BYTES = 0xFFFF
MAX_DECK_SIZE = 0xFFFFFFFF

# src/cards/deck.py

import random
from typing import List, Optional, Sequence, Tuple

from .constants import VALUES, SUITS, CARD_FORMAT
from .errors import InvalidArgument
from .logging_utils import get_logger

_log = get_logger("cards.deck")

Card = str
Deck = List[Card]


def create_deck(values: Sequence[str] = VALUES, suits: Sequence[str] = SUITS) -> Deck:
    """
    Returns the cards of a fresh deck, suit by suit:
    "Ace of Spades", "Two of Spades", ..., "Five of Diamonds".
    """
    return [CARD_FORMAT.format(value=value, suit=suit) for suit in suits for value in values]


def shuffle(deck: Sequence[Card], rng: Optional[random.Random] = None) -> Deck:
    """
    Returns a shuffled copy of deck; the input is left untouched.
    Pass a seeded random.Random for a reproducible order.
    """
    shuffled = list(deck)
    (rng or random).shuffle(shuffled)
    return shuffled


def contains(deck: Sequence[Card], card: Card) -> bool:
    return card in deck


def deal(deck: Sequence[Card], hand_size: int) -> Tuple[Deck, Deck]:
    """
    Splits deck into (hand, remainder).
    A hand_size larger than the deck gives the whole deck as the hand.
    """
    if isinstance(hand_size, bool) or not isinstance(hand_size, int):
        _log.warning(f"InvalidArgument: hand_size must be an int, got {hand_size!r}")
        raise InvalidArgument(f"hand_size must be an int, got {type(hand_size).__name__}")
    if hand_size < 0:
        _log.warning(f"InvalidArgument: negative hand_size {hand_size}")
        raise InvalidArgument(f"hand_size must be >= 0, got {hand_size}")

    cards = list(deck)
    return cards[:hand_size], cards[hand_size:]


def create_hand(hand_size: int, rng: Optional[random.Random] = None) -> Tuple[Deck, Deck]:
    hand, rest = deal(shuffle(create_deck(), rng), hand_size)
    _log.debug(f"Dealt hand of {len(hand)}: {hand} ({len(rest)} left)")
    return hand, rest

"""Reading hands, with unknown cards, from text."""

from __future__ import annotations

from collections.abc import Iterable

from pokersim.cards import Card
from pokersim.deck import Deck
from pokersim.future import FutureCards

MIN_HAND_SIZE = 5


class InputError(ValueError):
    """Raised for input text that does not describe valid hands."""


def add_card_from_string(deck: Deck, text: str) -> Card:
    """Add the card written as two letters; '?' as value adds a placeholder.

    Returns the card now held by the deck.
    """
    if len(text) != 2:
        raise InputError(f"a card takes two letters: {text!r}")
    if text[0] == "?":
        return deck.add_empty_card()
    deck.add_card(Card.from_letters(text[0], text[1]))
    return deck[-1]


def deck_from_string(text: str) -> Deck:
    """Build a deck from space separated cards, stopping at the first newline."""
    deck = Deck()
    for token in text.split("\n", 1)[0].split():
        add_card_from_string(deck, token)
    return deck


def _future_index(token: str) -> int:
    digits = token[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise InputError(f"invalid unknown card {token!r}")
    return int(digits)


def hand_from_string(text: str, future_cards: FutureCards | None) -> Deck:
    """Build a hand from a line such as 'Kh Qs ?0 ?1 ?2'.

    Unknown cards ?n become placeholders registered in future_cards. When
    future_cards is given, the hand must hold at least five cards.
    """
    deck = Deck()
    pending: list[tuple[int, Card]] = []
    for token in text.split():
        if len(token) < 2:
            raise InputError(f"a card takes at least two letters: {token!r}")
        if token[0] == "?":
            index = _future_index(token)
            pending.append((index, deck.add_empty_card()))
        else:
            add_card_from_string(deck, token)

    if future_cards is not None:
        if len(deck) < MIN_HAND_SIZE:
            raise InputError(
                f"At least five cards per hand needed. {len(deck)} cards found."
            )
        for index, placeholder in pending:
            future_cards.add_future_card(index, placeholder)
    return deck


def read_input(
    stream: Iterable[str], future_cards: FutureCards | None = None
) -> list[Deck]:
    """Read one hand per line of stream."""
    return [hand_from_string(line, future_cards) for line in stream]
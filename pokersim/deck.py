"""Decks and hands of cards."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from pokersim.cards import Card

FULL_DECK_SIZE = 52


class Deck:
    """An ordered collection of cards; also used to represent a hand."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        self.cards: list[Card] = list(cards) if cards is not None else []

    def add_card(self, card: Card) -> None:
        """Append a copy of the given card."""
        self.cards.append(Card(card.value, card.suit))

    def add_empty_card(self) -> Card:
        """Append a placeholder card and return it."""
        card = Card.empty()
        self.cards.append(card)
        return card

    def __contains__(self, card: object) -> bool:
        return any(card == own for own in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index):
        return self.cards[index]

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the cards in place."""
        (rng or random).shuffle(self.cards)

    def is_full(self) -> bool:
        """True when the deck holds exactly the 52 distinct cards."""
        return len(self.cards) == FULL_DECK_SIZE and all(
            Card.from_num(n) in self for n in range(FULL_DECK_SIZE)
        )

    def sort(self) -> None:
        """Sort in place: descending by value, then by suit."""
        sort_cards(self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Deck([{str(self)}])"


def sort_cards(cards: list[Card]) -> None:
    """Sort a list of cards in place, highest value first."""
    cards.sort(key=Card.sort_key)


def make_deck_exclude(excluded: Iterable[Card]) -> Deck:
    """Return a full deck without the given cards."""
    excluded_deck = excluded if isinstance(excluded, Deck) else Deck(excluded)
    deck = Deck()
    for num in range(FULL_DECK_SIZE):
        card = Card.from_num(num)
        if card not in excluded_deck:
            deck.add_card(card)
    return deck


def build_remaining_deck(hands: Iterable[Deck]) -> Deck:
    """Return the deck of cards that appear in none of the hands."""
    known = Deck(card for hand in hands for card in hand if not card.is_empty())
    return make_deck_exclude(known)
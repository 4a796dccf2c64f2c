"""Placeholders for cards that are not known yet (?0, ?1, ...)."""

from __future__ import annotations

from collections.abc import Sequence

from pokersim.cards import Card


class FutureCardError(LookupError):
    """Raised when the future cards cannot be filled in from a deck."""


class FutureCards:
    """For each unknown-card index, the placeholder cards it stands for.

    The same index may appear in several hands. Every placeholder registered
    under one index gets the same card when the cards are drawn.
    """

    def __init__(self) -> None:
        self.decks: list[list[Card]] = []

    def add_future_card(self, index: int, card: Card) -> None:
        """Register a placeholder card for the unknown card number index.

        Indices may arrive in any order. Indices that are skipped get an
        empty list of placeholders.
        """
        if index < 0:
            raise FutureCardError(f"invalid future card index ({index})")
        if index >= len(self.decks):
            self.decks.extend([] for _ in range(index + 1 - len(self.decks)))
        self.decks[index].append(card)

    def fill_from_deck(self, deck: Sequence[Card]) -> None:
        """Give the placeholders for index i the value and suit of deck[i]."""
        for index, placeholders in enumerate(self.decks):
            if not placeholders:
                continue
            if index >= len(deck):
                raise FutureCardError(
                    f"deck has {len(deck)} cards, too few to fill future card ?{index}"
                )
            drawn = deck[index]
            for placeholder in placeholders:
                placeholder.value = drawn.value
                placeholder.suit = drawn.suit

    def __len__(self) -> int:
        return len(self.decks)

    def __getitem__(self, index: int) -> list[Card]:
        return self.decks[index]
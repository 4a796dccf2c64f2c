"""Poker hand odds by random draws: cards, decks, hand evaluation, input parsing and simulation."""

__version__ = "0.1.0"
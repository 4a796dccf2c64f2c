"""Playing cards, suits and hand rankings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

VALUE_JACK = 11
VALUE_QUEEN = 12
VALUE_KING = 13
VALUE_ACE = 14

SUIT_LETTERS = "shdc"
VALUE_LETTERS = "234567890JQKA"

_FACE_VALUES = {
    "0": 10,
    "J": VALUE_JACK,
    "Q": VALUE_QUEEN,
    "K": VALUE_KING,
    "A": VALUE_ACE,
}
_FACE_LETTERS = {value: letter for letter, value in _FACE_VALUES.items()}


class InvalidCardError(ValueError):
    """Raised for a card value, suit or letter that does not exist."""


class Suit(IntEnum):
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


class HandRanking(IntEnum):
    """Hand categories; a lower number is a stronger hand."""

    STRAIGHT_FLUSH = 0
    FOUR_OF_A_KIND = 1
    FULL_HOUSE = 2
    FLUSH = 3
    STRAIGHT = 4
    THREE_OF_A_KIND = 5
    TWO_PAIR = 6
    PAIR = 7
    NOTHING = 8


def ranking_to_string(ranking: int) -> str:
    """Return the name of a hand ranking."""
    try:
        return HandRanking(ranking).name
    except ValueError:
        raise ValueError(f"invalid hand ranking ({ranking})") from None


def value_from_letter(letter: str) -> int:
    """Return the numeric value for a value letter such as '7', '0' or 'K'."""
    if len(letter) != 1 or letter not in VALUE_LETTERS:
        raise InvalidCardError(f"invalid card value ({letter!r})")
    if letter in _FACE_VALUES:
        return _FACE_VALUES[letter]
    return int(letter)


def suit_from_letter(letter: str) -> Suit:
    """Return the suit for one of the letters 's', 'h', 'd', 'c'."""
    if len(letter) != 1 or letter not in SUIT_LETTERS:
        raise InvalidCardError(f"invalid card suit ({letter!r})")
    return Suit(SUIT_LETTERS.index(letter))


@dataclass
class Card:
    """A card; mutable so that placeholder cards can be filled in later."""

    value: int
    suit: Suit

    @classmethod
    def from_letters(cls, value_let: str, suit_let: str) -> Card:
        card = cls(value_from_letter(value_let), suit_from_letter(suit_let))
        card._check_valid()
        return card

    @classmethod
    def from_num(cls, num: int) -> Card:
        """Build a card from its number 0..51 (suit * 13 + value - 2)."""
        if not 0 <= num < 52:
            raise InvalidCardError(f"invalid card number ({num})")
        suit, offset = divmod(num, 13)
        return cls(offset + 2, Suit(suit))

    @classmethod
    def empty(cls) -> Card:
        """Return a placeholder card with value and suit both zero."""
        return cls(0, Suit.SPADES)

    def is_empty(self) -> bool:
        return self.value == 0 and self.suit == 0

    def _check_valid(self) -> None:
        if not 2 <= self.value <= VALUE_ACE:
            raise InvalidCardError(f"invalid value ({self.value})")
        if not 0 <= int(self.suit) < len(SUIT_LETTERS):
            raise InvalidCardError(f"invalid suit ({self.suit})")

    def value_letter(self) -> str:
        if not 2 <= self.value <= VALUE_ACE:
            raise InvalidCardError(f"invalid value ({self.value})")
        if self.value in _FACE_LETTERS:
            return _FACE_LETTERS[self.value]
        return str(self.value)

    def suit_letter(self) -> str:
        if not 0 <= int(self.suit) < len(SUIT_LETTERS):
            raise InvalidCardError(f"invalid suit ({self.suit})")
        return SUIT_LETTERS[self.suit]

    def num(self) -> int:
        """Return the card number 0..51."""
        self._check_valid()
        return int(self.suit) * 13 + self.value - 2

    def sort_key(self) -> tuple[int, int]:
        """Key that orders cards by descending value, then descending suit."""
        return (-self.value, -int(self.suit))

    def __str__(self) -> str:
        if self.is_empty():
            return "??"
        return self.value_letter() + self.suit_letter()
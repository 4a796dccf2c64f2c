import pytest

from pokersim.cards import (
    VALUE_ACE,
    VALUE_KING,
    Card,
    HandRanking,
    InvalidCardError,
    Suit,
    ranking_to_string,
    suit_from_letter,
    value_from_letter,
)


def test_king_of_hearts_letters():
    card = Card(VALUE_KING, Suit.HEARTS)
    assert card.value_letter() == "K"
    assert card.suit_letter() == "h"
    assert str(card) == "Kh"


@pytest.mark.parametrize(
    "letter, value",
    [("2", 2), ("9", 9), ("0", 10), ("J", 11), ("Q", 12), ("K", 13), ("A", 14)],
)
def test_value_from_letter(letter, value):
    assert value_from_letter(letter) == value


@pytest.mark.parametrize("letter", ["1", "T", "x", "", "10"])
def test_value_from_letter_invalid(letter):
    with pytest.raises(InvalidCardError):
        value_from_letter(letter)


@pytest.mark.parametrize(
    "letter, suit",
    [("s", Suit.SPADES), ("h", Suit.HEARTS), ("d", Suit.DIAMONDS), ("c", Suit.CLUBS)],
)
def test_suit_from_letter(letter, suit):
    assert suit_from_letter(letter) is suit


def test_suit_from_letter_invalid():
    with pytest.raises(InvalidCardError):
        suit_from_letter("x")


def test_from_letters():
    card = Card.from_letters("0", "d")
    assert card == Card(10, Suit.DIAMONDS)
    assert str(card) == "0d"


def test_from_letters_invalid():
    with pytest.raises(InvalidCardError):
        Card.from_letters("A", "z")


@pytest.mark.parametrize("num", range(52))
def test_num_round_trip(num):
    assert Card.from_num(num).num() == num


def test_from_num_values():
    assert Card.from_num(0) == Card(2, Suit.SPADES)
    assert Card.from_num(12) == Card(VALUE_ACE, Suit.SPADES)
    assert Card.from_num(51) == Card(VALUE_ACE, Suit.CLUBS)


@pytest.mark.parametrize("num", [-1, 52])
def test_from_num_out_of_range(num):
    with pytest.raises(InvalidCardError):
        Card.from_num(num)


def test_empty_card():
    card = Card.empty()
    assert card.is_empty()
    assert card.value == 0 and card.suit == 0
    assert not Card.from_letters("2", "s").is_empty()
    with pytest.raises(InvalidCardError):
        card.num()


def test_sort_key_orders_descending():
    cards = [Card.from_letters(c[0], c[1]) for c in "7c 0h Ac Jd Ah".split()]
    cards.sort(key=Card.sort_key)
    assert " ".join(str(c) for c in cards) == "Ac Ah Jd 0h 7c"


def test_ranking_to_string():
    assert ranking_to_string(HandRanking.STRAIGHT_FLUSH) == "STRAIGHT_FLUSH"
    assert ranking_to_string(HandRanking.TWO_PAIR) == "TWO_PAIR"
    assert ranking_to_string(8) == "NOTHING"


def test_ranking_to_string_invalid():
    with pytest.raises(ValueError):
        ranking_to_string(9)
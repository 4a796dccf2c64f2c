import pytest

from pokersim.cards import Card
from pokersim.deck import Deck, make_deck_exclude
from pokersim.future import FutureCardError, FutureCards

HANDS = [
    ["Kh", "Qh", "As", "4c", "2c", "?3", "?4"],
    ["Ac", "Qc", "As", "4c", "2c", "?3", "?4"],
]


def _build(rows):
    fc = FutureCards()
    hands = []
    for row in rows:
        hand = Deck()
        for text in row:
            if text[0] == "?":
                fc.add_future_card(int(text[1:]), hand.add_empty_card())
            else:
                hand.add_card(Card.from_letters(text[0], text[1]))
        hands.append(hand)
    return fc, hands


def test_add_future_card_full():
    fc, hands = _build(HANDS)
    assert [len(hand) for hand in hands] == [7, 7]
    assert len(fc) == 5
    assert fc[0] == [] and fc[1] == [] and fc[2] == []
    assert len(fc[3]) == 2
    assert fc[3][0] is hands[0][5]
    assert fc[3][1] is hands[1][5]
    assert fc[4][0] is hands[0][6]
    assert fc[4][1] is hands[1][6]


def test_indices_out_of_order():
    fc = FutureCards()
    hand = Deck()
    fc.add_future_card(2, hand.add_empty_card())
    fc.add_future_card(0, hand.add_empty_card())
    assert len(fc) == 3
    assert fc[1] == []
    assert fc[0][0] is hand[1]
    assert fc[2][0] is hand[0]


def test_fill_from_deck_assigns_by_index():
    fc, hands = _build(HANDS)
    known = [card for hand in hands for card in hand if not card.is_empty()]
    deck = make_deck_exclude(known)
    deck.shuffle()
    fc.fill_from_deck(deck)
    assert hands[0][5] == deck[3]
    assert hands[1][5] == deck[3]
    assert hands[0][6] == deck[4]
    assert hands[1][6] == deck[4]
    assert not any(card.is_empty() for hand in hands for card in hand)


def test_fill_twice_overwrites():
    fc, hands = _build(HANDS)
    first = make_deck_exclude([])
    fc.fill_from_deck(first)
    second = Deck(reversed(list(first)))
    fc.fill_from_deck(second)
    assert hands[0][5] == second[3]
    assert hands[1][6] == second[4]


def test_filled_cards_not_in_deck_of_known_cards():
    fc, hands = _build(HANDS)
    known = Deck(card for hand in hands for card in hand if not card.is_empty())
    deck = make_deck_exclude(known)
    fc.fill_from_deck(deck)
    assert hands[0][5] not in known
    assert hands[0][6] not in known


def test_fill_from_short_deck_raises():
    fc, _ = _build(HANDS)
    short = Deck([Card.from_num(n) for n in range(3)])
    with pytest.raises(FutureCardError):
        fc.fill_from_deck(short)


def test_negative_index_raises():
    fc = FutureCards()
    with pytest.raises(FutureCardError):
        fc.add_future_card(-1, Card.empty())
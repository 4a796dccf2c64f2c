"""Poker hand evaluation and comparison."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from pokersim.cards import VALUE_ACE, Card, HandRanking, Suit
from pokersim.deck import Deck, sort_cards

HAND_SIZE = 5


@dataclass
class HandEval:
    """The ranking of a hand and the five cards that make it."""

    ranking: HandRanking
    cards: list[Card] = field(default_factory=list)


def _card_list(hand: Deck | Sequence[Card]) -> list[Card]:
    return list(hand)


def _suit_matches(card: Card, fs: Suit | None) -> bool:
    return fs is None or card.suit == fs


def flush_suit(hand: Deck | Sequence[Card]) -> Suit | None:
    """Return the first suit with at least five cards in the hand, else None."""
    counts: Counter[Suit] = Counter()
    for card in hand:
        counts[card.suit] += 1
        if counts[card.suit] >= HAND_SIZE:
            return Suit(card.suit)
    return None


def get_match_counts(hand: Deck | Sequence[Card]) -> list[int]:
    """For each card, the number of cards in the hand sharing its value."""
    cards = _card_list(hand)
    counts = Counter(card.value for card in cards)
    return [counts[card.value] for card in cards]


def _match_index(counts: list[int], n_of_a_kind: int) -> int:
    return next(
        (i for i, count in enumerate(counts) if count == n_of_a_kind), len(counts)
    )


def _secondary_pair(cards: list[Card], counts: list[int], match_idx: int) -> int | None:
    """Index of a second group of at least two, differing in value from the first."""
    match_value = cards[match_idx].value if match_idx < len(cards) else None
    for index, (card, count) in enumerate(zip(cards, counts)):
        if count > 1 and card.value != match_value:
            return index
    return None


def _is_n_length_straight_at(cards: list[Card], index: int, fs: Suit | None, n: int) -> bool:
    """True if n cards in descending sequence start at index (assumes sorted)."""
    if fs is not None and cards[index].suit != fs:
        return False
    in_a_row = 0
    last_value = cards[index].value + 1
    for card in cards[index:]:
        if fs is None:
            if card.value == last_value:
                continue
        elif card.suit != fs:
            continue
        if card.value != last_value - 1:
            return False
        in_a_row += 1
        if in_a_row >= n:
            return True
        last_value = card.value
    return False


def _is_ace_low_straight_at(cards: list[Card], index: int, fs: Suit | None) -> int:
    i = index + 1
    while cards[i].value != 5 or not _suit_matches(cards[i], fs):
        i += 1
        if i > len(cards) - 4:
            return 0
    return -1 if _is_n_length_straight_at(cards, i, fs, 4) else 0


def is_straight_at(hand: Deck | Sequence[Card], index: int, fs: Suit | None) -> int:
    """Look for a straight starting exactly at index of a sorted hand.

    With fs None any straight counts; otherwise only a straight flush in fs.
    Returns 1 for a straight, -1 for an ace-low straight and 0 for none.
    """
    cards = _card_list(hand)
    if index < 0 or len(cards) - index < HAND_SIZE:
        return 0
    if _is_n_length_straight_at(cards, index, fs, HAND_SIZE):
        return 1
    i = index
    while cards[i].value == VALUE_ACE and i < len(cards) - 4:
        if _suit_matches(cards[i], fs):
            return _is_ace_low_straight_at(cards, i, fs)
        i += 1
    return 0


def _copy_straight(cards: list[Card], index: int, fs: Suit | None, count: int) -> list[Card]:
    next_value = cards[index].value
    copied: list[Card] = []
    for card in cards[index:]:
        if len(copied) == count:
            break
        if card.value == next_value and _suit_matches(card, fs):
            copied.append(card)
            next_value -= 1
    if len(copied) != count:
        raise ValueError("hand does not hold the expected straight")
    return copied


def find_straight(hand: Deck | Sequence[Card], fs: Suit | None) -> list[Card] | None:
    """Return the five cards of the first straight in a sorted hand, or None.

    An ace-low straight is returned as 5 4 3 2 A.
    """
    cards = _card_list(hand)
    if len(cards) < HAND_SIZE:
        return None
    for i in range(len(cards) - HAND_SIZE + 1):
        found = is_straight_at(cards, i, fs)
        if found < 0:
            five = next(
                j
                for j in range(i + 1, len(cards))
                if cards[j].value == 5 and _suit_matches(cards[j], fs)
            )
            return _copy_straight(cards, five, fs, 4) + [cards[i]]
        if found > 0:
            return _copy_straight(cards, i, fs, HAND_SIZE)
    return None


def _build_hand_from_match(
    cards: list[Card], n: int, ranking: HandRanking, idx: int
) -> HandEval:
    """The n matching cards at idx, followed by the highest remaining cards."""
    others = cards[:idx] + cards[idx + n:]
    return HandEval(ranking, cards[idx:idx + n] + others[: HAND_SIZE - n])


def evaluate_hand(hand: Deck | Sequence[Card]) -> HandEval:
    """Evaluate a hand whose cards are sorted in descending order."""
    cards = _card_list(hand)
    fs = flush_suit(cards)
    if fs is not None:
        straight = find_straight(cards, fs)
        if straight is not None:
            return HandEval(HandRanking.STRAIGHT_FLUSH, straight)

    counts = get_match_counts(cards)
    n_of_a_kind = max(counts, default=0)
    if n_of_a_kind > 4:
        raise ValueError(f"hand holds {n_of_a_kind} cards of one value")
    match_idx = _match_index(counts, n_of_a_kind)
    other_pair = _secondary_pair(cards, counts, match_idx)

    if n_of_a_kind == 4:
        return _build_hand_from_match(cards, 4, HandRanking.FOUR_OF_A_KIND, match_idx)
    if n_of_a_kind == 3 and other_pair is not None:
        result = _build_hand_from_match(cards, 3, HandRanking.FULL_HOUSE, match_idx)
        result.cards[3:5] = cards[other_pair:other_pair + 2]
        return result
    if fs is not None:
        suited = [card for card in cards if card.suit == fs]
        return HandEval(HandRanking.FLUSH, suited[:HAND_SIZE])
    straight = find_straight(cards, None)
    if straight is not None:
        return HandEval(HandRanking.STRAIGHT, straight)
    if n_of_a_kind == 3:
        return _build_hand_from_match(cards, 3, HandRanking.THREE_OF_A_KIND, match_idx)
    if other_pair is not None:
        result = _build_hand_from_match(cards, 2, HandRanking.TWO_PAIR, match_idx)
        result.cards[2:4] = cards[other_pair:other_pair + 2]
        if match_idx > 0:
            kicker = cards[0]
        elif other_pair > 2:
            kicker = cards[2]
        else:
            kicker = cards[4]
        result.cards[4:5] = [kicker]
        return result
    if n_of_a_kind == 2:
        return _build_hand_from_match(cards, 2, HandRanking.PAIR, match_idx)
    return _build_hand_from_match(cards, 0, HandRanking.NOTHING, 0)


def _sort_in_place(hand: Deck | list[Card]) -> None:
    if isinstance(hand, Deck):
        hand.sort()
    else:
        sort_cards(hand)


def compare_hands(hand1: Deck | list[Card], hand2: Deck | list[Card]) -> int:
    """Sort both hands in place and compare them.

    Positive if hand1 wins, negative if hand2 wins, zero for a tie.
    """
    _sort_in_place(hand1)
    _sort_in_place(hand2)
    eval1 = evaluate_hand(hand1)
    eval2 = evaluate_hand(hand2)
    if eval1.ranking != eval2.ranking:
        return int(eval2.ranking) - int(eval1.ranking)
    for card1, card2 in zip(eval1.cards, eval2.cards):
        if card1.value != card2.value:
            return card1.value - card2.value
    return 0
"""Monte Carlo estimate of how often each poker hand wins."""

from __future__ import annotations

import math
import random
import re
import sys
from collections.abc import Iterable, Sequence

from pokersim.deck import Deck, build_remaining_deck
from pokersim.evaluation import compare_hands
from pokersim.future import FutureCardError, FutureCards
from pokersim.hand_input import InputError, read_input

DEFAULT_TRIALS = 10000
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DECIMAL = re.compile(r"\s*[+-]?[0-9]+", re.ASCII)


def parse_trials(text: str) -> int:
    """Parse a decimal integer in the range of a 32-bit int."""
    match = _DECIMAL.match(text)
    if match is None:
        raise ValueError(f"{text}: not a decimal number")
    rest = text[match.end():]
    if rest:
        raise ValueError(f"{text}: extra characters at end of input: {rest}")
    value = int(match.group())
    if value > INT_MAX:
        raise ValueError(f"{value} greater than INT_MAX")
    if value < INT_MIN:
        raise ValueError(f"{value} less than INT_MIN")
    return value


def run_trial(
    hands: Sequence[Deck],
    remaining_deck: Deck,
    future_cards: FutureCards,
    wins: list[int],
    rng: random.Random | None = None,
) -> int:
    """Draw the unknown cards once and count the result in wins.

    wins has one slot per hand and a last slot for ties. Returns the index
    that was counted.
    """
    remaining_deck.shuffle(rng)
    future_cards.fill_from_deck(remaining_deck)
    winner = 0
    for i in range(1, len(hands)):
        if compare_hands(hands[winner], hands[i]) < 0:
            winner = i
    if any(
        i != winner and compare_hands(hands[winner], hand) == 0
        for i, hand in enumerate(hands)
    ):
        winner = len(hands)
    wins[winner] += 1
    return winner


def simulate(
    stream: Iterable[str], n_trials: int, rng: random.Random | None = None
) -> list[int]:
    """Read hands from stream and play n_trials random draws.

    Returns the win count of each hand followed by the number of ties.
    """
    future_cards = FutureCards()
    hands = read_input(stream, future_cards)
    remaining_deck = build_remaining_deck(hands)
    wins = [0] * (len(hands) + 1)
    for _ in range(n_trials):
        run_trial(hands, remaining_deck, future_cards, wins, rng)
    return wins


def format_results(wins: Sequence[int], n_trials: int) -> str:
    """Report per-hand wins and the number of ties."""
    lines = []
    for i, count in enumerate(wins[:-1]):
        percent = count * 100 / n_trials if n_trials else math.nan
        lines.append(f"Hand {i} won {count} / {n_trials} times ({percent:.2f}%)\n")
    lines.append(f"And there were {wins[-1]} ties\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: pokersim <filename> [number of trials]", file=sys.stderr)
        return 1

    n_trials = DEFAULT_TRIALS
    if len(args) > 1:
        try:
            n_trials = parse_trials(args[1])
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1

    try:
        with open(args[0], encoding="utf-8") as stream:
            wins = simulate(stream, n_trials)
    except OSError as exc:
        print(f"Failed to open the input file: {exc.strerror}", file=sys.stderr)
        print(f"Did you mean to call it {args[0]}?", file=sys.stderr)
        return 1
    except (InputError, FutureCardError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(format_results(wins, n_trials), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
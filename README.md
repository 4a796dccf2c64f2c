# pokersim

Estimate how often each of several poker hands wins. The cards that are not
known yet are drawn at random many times, and every hand is scored each time.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Input format

The input file holds one hand per line, cards separated by spaces. A card is
a value letter followed by a suit letter:

- values: `2` to `9`, `0` (ten), `J`, `Q`, `K`, `A`
- suits: `s`, `h`, `d`, `c`

A card not yet known is written `?` followed by a number, such as `?0` or
`?12`. Every occurrence of the same `?n`, in any hand, stands for the same
card; this is how shared community cards are written. Numbers may be skipped
or appear in any order. Every line, blank lines included, must hold at least
five cards.

    Kh Qs ?0 ?1 ?2 ?3 ?4
    As Ac ?0 ?1 ?2 ?3 ?4

## Running a simulation

    pokersim hands.txt
    pokersim hands.txt 50000

The optional second argument is the number of trials (10000 by default); it
must be a decimal integer. In each trial the cards that appear in no hand are
shuffled, unknown card `?n` takes the card at position `n` of that shuffled
deck, and the best hand is counted as a win. When another hand equals the
best one, a tie is counted instead. The output looks like:

    Hand 0 won 5721 / 10000 times (57.21%)
    Hand 1 won 4105 / 10000 times (41.05%)
    And there were 174 ties

If the file cannot be opened, the trial count is not a number, or a hand is
malformed, a message goes to standard error and the command exits with
status 1.

## Using it from Python

    import random
    from pokersim.simulation import simulate, format_results

    with open("hands.txt") as stream:
        wins = simulate(stream, 10000, random.Random(1))
    print(format_results(wins, 10000), end="")

`simulate` returns the win count of each hand followed by the number of
ties. Passing a `random.Random` makes a run repeatable.

The building blocks:

- `pokersim.cards`: `Card`, `Suit`, `HandRanking`, `InvalidCardError`.
  `Card.from_letters("K", "h")`, `Card.from_num(n)` for `n` in 0..51, and
  `Card.empty()` for a placeholder, which prints as `??`.
- `pokersim.deck`: `Deck` (a list of cards that supports `in`, `len`,
  iteration, indexing, `shuffle`, `sort` and `is_full`), `sort_cards`,
  `make_deck_exclude` and `build_remaining_deck`.
- `pokersim.evaluation`: `evaluate_hand` returns a `HandEval` with the
  ranking and the five cards that make it; `compare_hands` is positive when
  the first hand wins, negative when the second does and zero for a tie.
  `flush_suit`, `get_match_counts`, `is_straight_at` and `find_straight` are
  available on their own.
- `pokersim.future`: `FutureCards`, which maps each `?n` to its placeholder
  cards and fills them from a deck with `fill_from_deck`.
- `pokersim.hand_input`: `hand_from_string`, `deck_from_string`,
  `add_card_from_string` and `read_input`; bad input raises `InputError`.

## Limits

- `evaluate_hand` and `is_straight_at` expect the hand already sorted highest
  card first; `compare_hands` sorts both hands in place before comparing.
- Hands are scored on their best five cards only; there are no betting
  rounds, wild cards or game variants other than plain high hands.
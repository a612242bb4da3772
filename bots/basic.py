"""A straightforward rule-based Hearts bot.

Passing:
- Always pass the queen of spades if held.
- Always pass the ace and king of spades.
- Pass the highest cards, preferring hearts, then the shortest suit.

Playing:
- Leading
  - If someone else has the queen, play the highest spade below it.
  - Play the lowest legal card, preferring the shortest suit.
- Following
  - In fourth seat, take a point-free trick with the highest card.
  - Otherwise play the highest card that ducks under the trick, else the lowest.
- Discarding
  - Dump the queen if it is a legal play.
  - Dump the highest heart.
  - Dump the highest card, using the lowest card in its suit as a tie-breaker.
"""

from __future__ import annotations

from typing import List, Optional

from engine.cards import QUEEN_OF_SPADES, SUIT_ORDER, Card, Rank, Seat, Suit
from engine.deck import Hand, flatten_hand
from engine.scoring import GameState, points_for_trick
from engine.state import CurrentPlay

from .base import BotStrategy

PASS_COUNT = 3


def shortest_suit(hand: Hand) -> Optional[Suit]:
    """Return the non-empty suit with the fewest cards; ties go to the first in suit order."""
    held = [suit for suit in SUIT_ORDER if hand[suit]]
    if not held:
        return None
    return min(held, key=lambda suit: len(hand[suit]))


class BasicStrategy(BotStrategy):
    name = "Basic"

    def __init__(self, pass_count: int = PASS_COUNT) -> None:
        self.pass_count = pass_count

    def pass_cards(self, hand: Hand, seat: Seat, count: Optional[int] = None) -> List[Card]:
        count = self.pass_count if count is None else count
        short = shortest_suit(hand)

        def score(card: Card) -> int:
            if card == QUEEN_OF_SPADES:
                return 1000
            if card.suit is Suit.SPADES and card.rank > Rank.QUEEN:
                return 500
            value = int(card.rank)
            if card.suit is short:
                value += 50
            if card.suit is Suit.HEARTS:
                value += 100
            return value

        ordered = sorted(flatten_hand(hand), key=score)
        return ordered[-count:]

    def lead(self, hand: Hand, current: CurrentPlay, state: GameState, candidates: Hand) -> Card:
        # Flush out the queen with our highest safe spade.
        have_queen = QUEEN_OF_SPADES in hand[Suit.SPADES]
        if not state.is_queen_played and not have_queen:
            low_spades = [card for card in candidates[Suit.SPADES] if card.rank < Rank.QUEEN]
            if low_spades:
                return max(low_spades, key=lambda c: c.rank)

        short = shortest_suit(hand)
        return min(
            flatten_hand(candidates),
            key=lambda c: int(c.rank) * 10 + (-1 if c.suit is short else 0),
        )

    def follow(self, hand: Hand, current: CurrentPlay, state: GameState, candidates: List[Card]) -> Card:
        trick = current.trick
        points = points_for_trick(trick)
        led = trick.led_suit()
        high_rank = max(play.card.rank for play in trick.plays if play.card.suit is led)

        safe = [card for card in candidates if card != QUEEN_OF_SPADES]
        highest = safe[-1] if safe else None
        under = [card for card in candidates if card.rank < high_rank]
        duck = under[-1] if under else None
        lowest = candidates[0]

        if len(trick.plays) == 3 and points == 0 and highest is not None:
            # Last to play on a clean trick: take it with our highest card.
            return highest
        return duck or lowest

    def discard(self, hand: Hand, current: CurrentPlay, state: GameState, candidates: Hand) -> Card:
        if QUEEN_OF_SPADES in candidates[Suit.SPADES]:
            return QUEEN_OF_SPADES

        if candidates[Suit.HEARTS]:
            return candidates[Suit.HEARTS][-1]

        return max(
            flatten_hand(candidates),
            key=lambda c: 100 * int(c.rank) - int(hand[c.suit][0].rank),
        )

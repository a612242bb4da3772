"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import List, Optional, Sequence

from engine.cards import Card, Seat
from engine.deck import Hand, flatten_hand, hand_size
from engine.mechanics import PlayType, legal_plays, play_type
from engine.scoring import GameState, game_state
from engine.state import Board, CurrentPlay, IllegalPlay
from engine.trick import Play


class BotStrategy:
    """Base class for bot policies.

    A strategy only sees the acting seat's own hand, the trick in progress,
    the public :class:`GameState` and the legal candidates; never the other
    seats' cards.
    """

    name: str = "BaseBot"

    def pass_cards(self, hand: Hand, seat: Seat, count: Optional[int] = None) -> Sequence[Card]:
        """Return the cards to pass before play starts; ``count`` overrides the bot's own pass size."""
        raise NotImplementedError

    def lead(self, hand: Hand, current: CurrentPlay, state: GameState, candidates: Hand) -> Card:
        """Choose a card to open a trick."""
        raise NotImplementedError

    def follow(self, hand: Hand, current: CurrentPlay, state: GameState, candidates: List[Card]) -> Card:
        """Choose a card of the led suit; candidates are sorted by ascending rank."""
        raise NotImplementedError

    def discard(self, hand: Hand, current: CurrentPlay, state: GameState, candidates: Hand) -> Card:
        """Choose a card when void in the led suit."""
        raise NotImplementedError


def make_play(board: Board, strategy: BotStrategy) -> Play:
    """Pick the next card for the seat to act on ``board``."""
    current = board.current_play
    if current is None:
        raise IllegalPlay("No current play!")
    player = current.player
    candidates = legal_plays(board)
    state = game_state(board)
    kind = play_type(board)

    # Forced plays skip the strategy.
    if hand_size(candidates) == 1:
        return Play(seat=player, card=flatten_hand(candidates)[0])

    hand = board.hands[player]
    if kind is PlayType.LEAD:
        card = strategy.lead(hand, current, state, candidates)
    elif kind is PlayType.ON_SUIT:
        ordered = sorted(flatten_hand(candidates), key=lambda c: c.rank)
        card = strategy.follow(hand, current, state, ordered)
    else:
        card = strategy.discard(hand, current, state, candidates)
    return Play(seat=player, card=card)

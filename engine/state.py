"""Board state for a single deal of Hearts.

A :class:`Board` is never modified in place: :func:`play` returns a new board,
so earlier boards stay valid and can be kept for history or undo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from .cards import SEAT_ORDER, TWO_OF_CLUBS, Card, Seat, Suit, next_seat
from .deck import Deal, Hand, find_card, remove_card
from .trick import CompleteTrick, InvariantViolation, Trick

TRICKS_PER_DEAL = 13


class IllegalPlay(RuntimeError):
    """Raised when an illegal card play is attempted."""


def _empty_cards_taken() -> Dict[Seat, Tuple[Card, ...]]:
    return {seat: () for seat in SEAT_ORDER}


@dataclass(frozen=True)
class CurrentPlay:
    trick: Trick
    player: Seat


@dataclass(frozen=True)
class Board:
    hands: Deal
    current_play: Optional[CurrentPlay]
    completed_tricks: Tuple[CompleteTrick, ...] = ()
    cards_taken: Dict[Seat, Tuple[Card, ...]] = field(default_factory=_empty_cards_taken)
    trump: Optional[Suit] = None

    def is_complete(self) -> bool:
        return len(self.completed_tricks) == TRICKS_PER_DEAL

    def played_cards(self) -> List[Card]:
        """Cards from completed tricks, in play order."""
        return [play.card for trick in self.completed_tricks for play in trick.plays]

    def hand_of(self, seat: Seat) -> Hand:
        return self.hands[seat]


def _copy_deal(deal: Mapping[Seat, Mapping[Suit, Tuple[Card, ...]]]) -> Deal:
    return {seat: {suit: tuple(cards) for suit, cards in hand.items()} for seat, hand in deal.items()}


def make_board(deal: Deal) -> Board:
    """Start a board; the holder of the two of clubs leads."""
    leader = find_card(deal, TWO_OF_CLUBS)
    if leader is None:
        raise InvariantViolation("Unable to locate two of clubs on board.")
    return Board(
        hands=_copy_deal(deal),
        current_play=CurrentPlay(trick=Trick(leader=leader), player=leader),
    )


def play(board: Board, card: Card) -> Board:
    """Play ``card`` for the seat to act and return the resulting board."""
    current = board.current_play
    if current is None:
        raise IllegalPlay("Tried to play on a completed board.")
    player = current.player
    hand = board.hands[player]
    if card not in hand[card.suit]:
        raise IllegalPlay(f"{card} is not {player}'s card to play.")

    hands = dict(board.hands)
    hands[player] = remove_card(hand, card)
    trick = current.trick.with_play(player, card)

    if not trick.is_full():
        return Board(
            hands=hands,
            current_play=CurrentPlay(trick=trick, player=next_seat(player)),
            completed_tricks=board.completed_tricks,
            cards_taken=board.cards_taken,
            trump=board.trump,
        )

    complete = CompleteTrick.from_trick(trick, board.trump)
    winner = complete.winner
    cards_taken = dict(board.cards_taken)
    cards_taken[winner] = cards_taken[winner] + complete.cards()
    completed_tricks = board.completed_tricks + (complete,)

    next_play: Optional[CurrentPlay] = None
    if len(completed_tricks) < TRICKS_PER_DEAL:
        next_play = CurrentPlay(trick=Trick(leader=winner), player=winner)

    return Board(
        hands=hands,
        current_play=next_play,
        completed_tricks=completed_tricks,
        cards_taken=cards_taken,
        trump=board.trump,
    )

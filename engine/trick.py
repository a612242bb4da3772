"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .cards import Card, Seat, Suit


class InvariantViolation(RuntimeError):
    """Raised when engine state is malformed, e.g. a missing opening card."""


class TrickError(InvariantViolation):
    """Raised when trick play breaks ordering constraints."""


PLAYERS_PER_TRICK = 4


@dataclass(frozen=True)
class Play:
    seat: Seat
    card: Card


@dataclass(frozen=True)
class Trick:
    leader: Seat
    plays: Tuple[Play, ...] = ()

    def is_empty(self) -> bool:
        return not self.plays

    def is_full(self) -> bool:
        return len(self.plays) == PLAYERS_PER_TRICK

    def led_suit(self) -> Optional[Suit]:
        return self.plays[0].card.suit if self.plays else None

    def cards(self) -> Tuple[Card, ...]:
        return tuple(play.card for play in self.plays)

    def with_play(self, seat: Seat, card: Card) -> "Trick":
        """Return a new trick with ``card`` appended."""
        if self.is_full():
            raise TrickError("Trick already complete.")
        if self.is_empty() and seat is not self.leader:
            raise TrickError("Only the leader can start the trick.")
        if any(play.seat is seat for play in self.plays):
            raise TrickError(f"{seat} already played to this trick.")
        return Trick(leader=self.leader, plays=self.plays + (Play(seat, card),))


@dataclass(frozen=True)
class CompleteTrick:
    leader: Seat
    plays: Tuple[Play, ...]
    winner: Seat

    @classmethod
    def from_trick(cls, trick: Trick, trump: Optional[Suit] = None) -> "CompleteTrick":
        return cls(leader=trick.leader, plays=trick.plays, winner=find_winner(trick, trump))

    def cards(self) -> Tuple[Card, ...]:
        return tuple(play.card for play in self.plays)


def beats(candidate: Card, current: Card, led_suit: Suit, trump: Optional[Suit]) -> bool:
    """Return True if candidate takes over from the current winning card."""
    if candidate.suit is led_suit and current.suit is led_suit and candidate.rank > current.rank:
        return True
    if trump is not None and candidate.suit is trump:
        return candidate.rank > current.rank or current.suit is not trump
    return False


def find_winner(trick: Trick, trump: Optional[Suit] = None) -> Seat:
    if trick.is_empty():
        raise InvariantViolation("Cannot determine winner on empty trick.")
    led = trick.plays[0].card.suit
    winner = trick.leader
    winning_card = trick.plays[0].card
    for play in trick.plays[1:]:
        if beats(play.card, winning_card, led, trump):
            winner, winning_card = play.seat, play.card
    return winner

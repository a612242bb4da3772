"""Legal move generation for Hearts."""

from __future__ import annotations

from enum import Enum, auto

from .cards import TWO_OF_CLUBS, Suit
from .deck import Hand, empty_hand, find_card, hand_size
from .scoring import is_hearts_broken
from .state import Board, IllegalPlay
from .trick import InvariantViolation


class PlayType(Enum):
    LEAD = auto()
    ON_SUIT = auto()
    OFF_SUIT = auto()


def play_type(board: Board) -> PlayType:
    current = board.current_play
    if current is None:
        raise IllegalPlay("Tried to play on a completed board.")
    led = current.trick.led_suit()
    if led is None:
        return PlayType.LEAD
    if board.hand_of(current.player)[led]:
        return PlayType.ON_SUIT
    return PlayType.OFF_SUIT


def legal_plays(board: Board) -> Hand:
    """Return the cards the seat to act may play, grouped by suit."""
    current = board.current_play
    if current is None:
        raise IllegalPlay("Tried to play on a completed board.")
    player = current.player
    full_hand = board.hand_of(player)
    kind = play_type(board)

    if kind is PlayType.LEAD:
        if not board.completed_tricks:
            if find_card(board.hands, TWO_OF_CLUBS) is not player:
                raise InvariantViolation(f"{player} is first to play but does not have 2C.")
            candidates = empty_hand()
            candidates[Suit.CLUBS] = (TWO_OF_CLUBS,)
            return candidates

        candidates = dict(full_hand)
        only_hearts = hand_size(full_hand) == len(full_hand[Suit.HEARTS])
        if not is_hearts_broken(board) and not only_hearts:
            # Hearts may not be led until broken, unless nothing else is held.
            candidates[Suit.HEARTS] = ()
        return candidates

    if kind is PlayType.ON_SUIT:
        led = current.trick.led_suit()
        assert led is not None
        candidates = empty_hand()
        candidates[led] = full_hand[led]
        return candidates

    return dict(full_hand)

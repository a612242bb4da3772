"""Public game knowledge and penalty points derived from a board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .cards import QUEEN_OF_SPADES, SEAT_ORDER, Card, Seat, Suit
from .deck import find_card
from .rules_schema import DEFAULT_RULES, RuleSet
from .state import Board
from .trick import Trick

PENALTY_SUIT = Suit.HEARTS


@dataclass(frozen=True)
class GameState:
    is_hearts_broken: bool
    is_queen_played: bool


def is_hearts_broken(board: Board) -> bool:
    return any(card.suit is PENALTY_SUIT for card in board.played_cards())


def is_queen_played(board: Board) -> bool:
    return find_card(board.hands, QUEEN_OF_SPADES) is None


def game_state(board: Board) -> GameState:
    return GameState(
        is_hearts_broken=is_hearts_broken(board),
        is_queen_played=is_queen_played(board),
    )


def points_for_card(card: Card, rules: RuleSet = DEFAULT_RULES) -> int:
    if card.suit is PENALTY_SUIT:
        return rules.scoring.heart_points
    if card == QUEEN_OF_SPADES:
        return rules.scoring.queen_points
    return 0


def points_in_cards(cards: Iterable[Card], rules: RuleSet = DEFAULT_RULES) -> int:
    return sum(points_for_card(card, rules) for card in cards)


def points_for_trick(trick: Trick, rules: RuleSet = DEFAULT_RULES) -> int:
    return points_in_cards((play.card for play in trick.plays), rules)


def points_taken(board: Board, rules: RuleSet = DEFAULT_RULES) -> Dict[Seat, int]:
    """Penalty points each seat has taken so far in this deal."""
    return {seat: points_in_cards(board.cards_taken[seat], rules) for seat in SEAT_ORDER}

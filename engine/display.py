"""Human-readable rendering of hands, tricks and boards."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from .cards import SEAT_ORDER, SUIT_ORDER, Card, Seat, Suit, rank_to_text
from .rules_schema import DEFAULT_RULES, RuleSet
from .scoring import points_taken
from .state import Board
from .trick import Play

SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


def card_symbol(card: Card) -> str:
    return rank_to_text(card.rank) + SUIT_SYMBOLS[card.suit]


def format_hand(hand: Mapping[Suit, Sequence[Card]]) -> str:
    """Render a hand as e.g. ``♠68 ♥56K ♦248 ♣23479``; voids show as ``-``."""
    parts = []
    for suit in SUIT_ORDER:
        ranks = "".join(rank_to_text(card.rank) for card in hand[suit]) or "-"
        parts.append(SUIT_SYMBOLS[suit] + ranks)
    return " ".join(parts)


def format_plays(plays: Sequence[Play], winner: Optional[Seat] = None) -> str:
    text = " ".join(f"{play.seat}:{card_symbol(play.card)}" for play in plays)
    if winner is not None:
        text += f" -> {winner}"
    return text


def format_board(board: Board, rules: RuleSet = DEFAULT_RULES) -> str:
    lines: List[str] = [f"{seat}: {format_hand(board.hands[seat])}" for seat in SEAT_ORDER]
    for index, trick in enumerate(board.completed_tricks, start=1):
        lines.append(f"trick {index:2d}: {format_plays(trick.plays, trick.winner)}")
    if board.current_play is None:
        points = points_taken(board, rules)
        lines.append("points: " + " ".join(f"{seat}={points[seat]}" for seat in SEAT_ORDER))
    else:
        current = board.current_play
        lines.append(f"to play: {current.player} (trick: {format_plays(current.trick.plays) or 'empty'})")
    return "\n".join(lines)

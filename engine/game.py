"""High-level orchestration of a single deal of Hearts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Dict, List, Mapping, Optional, Sequence

from .cards import SEAT_ORDER, Card, Seat
from .deck import Deal, Hand, assemble_hand, flatten_hand, random_deal
from .mechanics import legal_plays
from .rules_schema import DEFAULT_RULES, RuleSet
from .scoring import points_taken
from .state import Board, IllegalPlay, make_board, play

logger = logging.getLogger(__name__)


class InvalidPass(RuntimeError):
    """Raised when passed cards violate the rules."""


class PassDirection(Enum):
    LEFT = 1
    ACROSS = 2
    RIGHT = 3
    HOLD = 0

    @classmethod
    def from_name(cls, name: str) -> "PassDirection":
        try:
            return cls[name.upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown pass direction: {name!r}") from exc


class HandPhase(Enum):
    PASS = auto()
    PLAY = auto()
    COMPLETE = auto()


def pass_target(seat: Seat, direction: PassDirection) -> Seat:
    index = SEAT_ORDER.index(seat)
    return SEAT_ORDER[(index + direction.value) % len(SEAT_ORDER)]


def exchange_cards(
    deal: Deal,
    passes: Mapping[Seat, Sequence[Card]],
    direction: PassDirection,
    *,
    count: int = DEFAULT_RULES.passing.cards,
) -> Deal:
    """Return a new deal with every seat's passed cards moved to its target."""
    if direction is PassDirection.HOLD:
        return {seat: dict(hand) for seat, hand in deal.items()}

    remaining: Dict[Seat, List[Card]] = {}
    for seat in SEAT_ORDER:
        cards = list(passes.get(seat, ()))
        _validate_pass(deal, seat, cards, count)
        remaining[seat] = [card for card in flatten_hand(deal[seat]) if card not in cards]

    for seat in SEAT_ORDER:
        remaining[pass_target(seat, direction)].extend(passes[seat])
    return {seat: assemble_hand(remaining[seat]) for seat in SEAT_ORDER}


def _validate_pass(deal: Deal, seat: Seat, cards: Sequence[Card], count: int) -> None:
    if len(cards) != count:
        raise InvalidPass(f"{seat} must pass exactly {count} cards, got {len(cards)}.")
    if len(set(cards)) != len(cards):
        raise InvalidPass(f"{seat} passed the same card twice.")
    held = deal[seat]
    for card in cards:
        if card not in held[card.suit]:
            raise InvalidPass(f"{seat} does not hold {card}.")


@dataclass
class HandEngine:
    """Manage a single deal: passing, then thirteen tricks."""

    deal: Optional[Deal] = None
    rng: Optional[Random] = None
    direction: PassDirection = PassDirection.LEFT
    rules: RuleSet = field(default_factory=lambda: DEFAULT_RULES)

    phase: HandPhase = field(init=False, default=HandPhase.PASS)
    hands: Deal = field(init=False)
    passes: Dict[Seat, List[Card]] = field(init=False, default_factory=dict)
    board: Optional[Board] = field(init=False, default=None)
    history: List[Board] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.hands = self.deal if self.deal is not None else random_deal(self.rng)
        if self.direction is PassDirection.HOLD:
            self._start_play()

    @property
    def current_player(self) -> Optional[Seat]:
        if self.board is None or self.board.current_play is None:
            return None
        return self.board.current_play.player

    def submit_pass(self, seat: Seat, cards: Sequence[Card]) -> None:
        self._ensure_phase(HandPhase.PASS)
        if seat in self.passes:
            raise InvalidPass(f"{seat} has already passed.")
        cards = list(cards)
        _validate_pass(self.hands, seat, cards, self.rules.passing.cards)
        self.passes[seat] = cards
        logger.debug("%s passes %s", seat, " ".join(str(card) for card in cards))
        if len(self.passes) == len(SEAT_ORDER):
            self.hands = exchange_cards(self.hands, self.passes, self.direction, count=self.rules.passing.cards)
            self._start_play()

    def legal_plays(self) -> Hand:
        self._ensure_phase(HandPhase.PLAY)
        assert self.board is not None
        return legal_plays(self.board)

    def play_card(self, seat: Seat, card: Card) -> None:
        self._ensure_phase(HandPhase.PLAY)
        assert self.board is not None
        if seat is not self.current_player:
            raise IllegalPlay(f"Not {seat}'s turn.")
        if card not in self.legal_plays()[card.suit]:
            raise IllegalPlay(f"Card {card} is not legal in this context.")

        self.history.append(self.board)
        self.board = play(self.board, card)
        logger.debug("%s plays %s", seat, card)
        if self.board.is_complete():
            self.phase = HandPhase.COMPLETE
            logger.info("Hand complete: %s", self._points_summary())

    def undo(self) -> Board:
        """Take back the last card played and return the restored board."""
        if not self.history:
            raise IllegalPlay("Nothing to undo.")
        self.board = self.history.pop()
        self.phase = HandPhase.PLAY
        return self.board

    def points(self) -> Dict[Seat, int]:
        if self.board is None:
            return {seat: 0 for seat in SEAT_ORDER}
        return points_taken(self.board, self.rules)

    def _points_summary(self) -> str:
        points = self.points()
        return " ".join(f"{seat}={points[seat]}" for seat in SEAT_ORDER)

    def _start_play(self) -> None:
        self.board = make_board(self.hands)
        self.phase = HandPhase.PLAY

    def _ensure_phase(self, expected: HandPhase) -> None:
        if self.phase != expected:
            raise RuntimeError(f"Action not allowed in phase {self.phase}. Expected {expected}.")

"""Card-related data structures and helpers for Hearts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


class NotationError(ValueError):
    """Raised when card or deal text cannot be parsed."""


class Suit(Enum):
    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Seat(Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def __str__(self) -> str:
        return self.value


# Canonical suit order, used for sorting, formatting and suit iteration.
SUIT_ORDER: Tuple[Suit, ...] = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)
SUIT_INDEX: dict[Suit, int] = {suit: index for index, suit in enumerate(SUIT_ORDER)}

# Play goes clockwise.
SEAT_ORDER: Tuple[Seat, ...] = (Seat.NORTH, Seat.EAST, Seat.SOUTH, Seat.WEST)

RANK_TEXT: dict[Rank, str] = {
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}
TEXT_RANK: dict[str, Rank] = {text: rank for rank, text in RANK_TEXT.items()}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        try:
            rank = Rank(self.rank)
        except ValueError as exc:
            raise ValueError(f"Invalid card rank: {self.rank!r}") from exc
        object.__setattr__(self, "rank", rank)

    def __str__(self) -> str:
        return format_card(self)


TWO_OF_CLUBS = Card(Rank.TWO, Suit.CLUBS)
QUEEN_OF_SPADES = Card(Rank.QUEEN, Suit.SPADES)


def next_seat(seat: Seat) -> Seat:
    return SEAT_ORDER[(SEAT_ORDER.index(seat) + 1) % len(SEAT_ORDER)]


def card_sort_key(card: Card) -> Tuple[int, int]:
    """Return a key ordering cards by suit (S, H, D, C), then ascending rank."""
    return SUIT_INDEX[card.suit], int(card.rank)


def compare_cards(a: Card, b: Card) -> int:
    if a.suit is not b.suit:
        return SUIT_INDEX[a.suit] - SUIT_INDEX[b.suit]
    return int(a.rank) - int(b.rank)


def text_to_rank(text: str) -> Rank:
    if len(text) != 1:
        raise NotationError(f"Invalid card symbol: {text!r}")
    if "2" <= text <= "9":
        return Rank(int(text))
    if text in TEXT_RANK:
        return TEXT_RANK[text]
    raise NotationError(f"Invalid card symbol: {text!r}")


def rank_to_text(rank: int) -> str:
    if 2 <= rank <= 9:
        return str(int(rank))
    try:
        return RANK_TEXT[Rank(rank)]
    except (KeyError, ValueError) as exc:
        raise NotationError(f"Invalid card rank: {rank!r}") from exc


def text_to_suit(text: str) -> Suit:
    try:
        return Suit(text)
    except ValueError as exc:
        raise NotationError(f"Invalid suit symbol: {text!r}") from exc


def parse_card(text: str) -> Card:
    """Parse a two character code such as ``"QS"`` or ``"TH"``."""
    if len(text) != 2:
        raise NotationError(f"Card text must be two characters, got {text!r}")
    return Card(text_to_rank(text[0]), text_to_suit(text[1]))


def format_card(card: Card) -> str:
    """Return a 2-character string like ``"QD"`` or ``"TH"``."""
    return rank_to_text(card.rank) + card.suit.value

"""Deck creation and hand utilities for Hearts."""

from __future__ import annotations

from random import Random
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .cards import SEAT_ORDER, SUIT_ORDER, Card, Rank, Seat, Suit, card_sort_key

# A hand groups the cards held in each suit, ascending by rank. Every suit is
# present, possibly empty.
Hand = Dict[Suit, Tuple[Card, ...]]
Deal = Dict[Seat, Hand]

HAND_SIZE = 13
DECK_SIZE = 52


def build_deck() -> List[Card]:
    """Return the ordered 52-card deck (S, H, D, C; ascending ranks)."""
    return [Card(rank, suit) for suit in SUIT_ORDER for rank in Rank]


def empty_hand() -> Hand:
    return {suit: () for suit in SUIT_ORDER}


def assemble_hand(cards: Iterable[Card]) -> Hand:
    """Group cards into suits, sorted in ascending order."""
    grouped: Dict[Suit, List[Card]] = {suit: [] for suit in SUIT_ORDER}
    for card in cards:
        grouped[card.suit].append(card)
    return {suit: tuple(sorted(holding, key=card_sort_key)) for suit, holding in grouped.items()}


def flatten_hand(hand: Mapping[Suit, Sequence[Card]]) -> List[Card]:
    return [card for suit in SUIT_ORDER for card in hand.get(suit, ())]


def hand_size(hand: Mapping[Suit, Sequence[Card]]) -> int:
    return sum(len(holding) for holding in hand.values())


def remove_card(hand: Hand, card: Card) -> Hand:
    """Return a copy of ``hand`` without ``card``."""
    holding = hand[card.suit]
    if card not in holding:
        raise ValueError(f"{card} is not in hand.")
    updated = dict(hand)
    updated[card.suit] = tuple(c for c in holding if c != card)
    return updated


def find_card(deal: Mapping[Seat, Hand], card: Card) -> Optional[Seat]:
    """Return the seat holding ``card``, or None if nobody holds it."""
    for seat in SEAT_ORDER:
        hand = deal.get(seat)
        if hand is not None and card in hand[card.suit]:
            return seat
    return None


def deal_from_deck(deck: Sequence[Card]) -> Deal:
    """Deal 13 consecutive cards to each seat, in N, E, S, W order."""
    cards = list(deck)
    if len(cards) != DECK_SIZE:
        raise ValueError("Deck must contain exactly 52 cards.")
    if len(set(cards)) != DECK_SIZE:
        raise ValueError("Deck contains duplicate cards.")
    return {
        seat: assemble_hand(cards[index * HAND_SIZE : (index + 1) * HAND_SIZE])
        for index, seat in enumerate(SEAT_ORDER)
    }


def random_deal(rng: Optional[Random] = None) -> Deal:
    cards = build_deck()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return deal_from_deck(cards)

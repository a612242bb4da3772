"""Deal notation: ``"N:<hand> <hand> <hand> <hand>"``.

Each hand lists its holdings in S.H.D.C order, ranks ascending, e.g.
``"N:68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK"``.
The leading seat owns the first hand; the rest follow clockwise.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Set

from .cards import SEAT_ORDER, SUIT_ORDER, Card, NotationError, Seat, next_seat, rank_to_text, text_to_rank
from .deck import Deal, Hand, assemble_hand, flatten_hand

_SEAT_PREFIX = re.compile(r"^([NESW]):")


def _split_seats(text: str) -> Dict[Seat, str]:
    parts = text.split(" ")
    if len(parts) != 4:
        raise NotationError(f"Deal must have four hands (got {len(parts)}).")
    match = _SEAT_PREFIX.match(parts[0])
    if not match:
        raise NotationError('Deal must start with either "N:", "E:", "S:" or "W:".')
    parts[0] = parts[0][2:]
    seat = Seat(match.group(1))
    holdings: Dict[Seat, str] = {}
    for part in parts:
        holdings[seat] = part
        seat = next_seat(seat)
    return holdings


def parse_hand(text: str) -> Hand:
    suits = text.split(".")
    if len(suits) != 4:
        raise NotationError(f"Hand must have four suits, got {len(suits)}: {text!r}")
    for suit, holding in zip(SUIT_ORDER, suits):
        if len(set(holding)) != len(holding):
            raise NotationError(f"Repeated rank in {suit.name.lower()} holding {holding!r}")
    return assemble_hand(
        Card(text_to_rank(symbol), suit) for suit, holding in zip(SUIT_ORDER, suits) for symbol in holding
    )


def parse_deal(text: str) -> Deal:
    deal: Deal = {}
    seen: Set[Card] = set()
    for seat, holding in _split_seats(text).items():
        try:
            hand = parse_hand(holding)
        except NotationError as exc:
            raise NotationError(f"{seat}: {exc}") from exc
        for card in flatten_hand(hand):
            if card in seen:
                raise NotationError(f"{seat}: {card} is dealt twice.")
            seen.add(card)
        deal[seat] = hand
    return {seat: deal[seat] for seat in SEAT_ORDER}


def format_hand(hand: Mapping) -> str:
    return ".".join("".join(rank_to_text(card.rank) for card in hand[suit]) for suit in SUIT_ORDER)


def format_deal(deal: Mapping[Seat, Hand], start: Seat = Seat.NORTH) -> str:
    seat = start
    hands = []
    for _ in SEAT_ORDER:
        hands.append(format_hand(deal[seat]))
        seat = next_seat(seat)
    return f"{start.value}:" + " ".join(hands)

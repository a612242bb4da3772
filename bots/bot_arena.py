"""Deal boards and let bots play them out."""

from __future__ import annotations

import argparse
import logging
from random import Random
from typing import Dict, Iterable, Mapping, Optional, Sequence

from engine.cards import SEAT_ORDER, Seat
from engine.display import format_board, format_plays
from engine.game import HandEngine, HandPhase, PassDirection
from engine.notation import format_deal
from engine.rules_schema import DEFAULT_RULES, RuleSet, load_rules

from .base import BotStrategy, make_play
from .basic import BasicStrategy

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "basic": BasicStrategy,
}


def _resolve_pass(hand: HandEngine, bots: Mapping[Seat, BotStrategy]) -> None:
    if hand.phase != HandPhase.PASS:
        return
    for seat in SEAT_ORDER:
        cards = list(bots[seat].pass_cards(hand.hands[seat], seat, hand.rules.passing.cards))
        hand.submit_pass(seat, cards)


def _play_out(hand: HandEngine, bots: Mapping[Seat, BotStrategy]) -> None:
    while hand.phase == HandPhase.PLAY:
        assert hand.board is not None
        tricks_before = len(hand.board.completed_tricks)
        decision = make_play(hand.board, bots[decision_seat(hand)])
        hand.play_card(decision.seat, decision.card)
        if len(hand.board.completed_tricks) > tricks_before:
            last = hand.board.completed_tricks[-1]
            logger.debug("Trick %d: %s", len(hand.board.completed_tricks), format_plays(last.plays, last.winner))


def decision_seat(hand: HandEngine) -> Seat:
    seat = hand.current_player
    if seat is None:
        raise RuntimeError("No seat to act.")
    return seat


def seat_bots(bots: Sequence[BotStrategy]) -> Dict[Seat, BotStrategy]:
    """Assign one bot per seat in N, E, S, W order; a single bot plays every seat."""
    if len(bots) == 1:
        return {seat: bots[0] for seat in SEAT_ORDER}
    if len(bots) != len(SEAT_ORDER):
        raise ValueError("Provide one bot, or one bot per seat.")
    return dict(zip(SEAT_ORDER, bots))


def play_hand(hand: HandEngine, bots: Sequence[BotStrategy]) -> None:
    by_seat = seat_bots(bots)
    _resolve_pass(hand, by_seat)
    _play_out(hand, by_seat)


def run_match(
    bots: Sequence[BotStrategy],
    *,
    n_hands: int = 4,
    seed: Optional[int] = None,
    rules: RuleSet = DEFAULT_RULES,
) -> dict:
    """Play ``n_hands`` independent deals, rotating the pass direction."""
    rng = Random(seed)
    history = []
    for idx in range(n_hands):
        direction = PassDirection.from_name(rules.pass_direction_name(idx))
        hand = HandEngine(rng=rng, direction=direction, rules=rules)
        dealt = format_deal(hand.hands)
        play_hand(hand, bots)
        history.append(
            {
                "deal": dealt,
                "direction": direction.name.lower(),
                "points": {str(seat): points for seat, points in hand.points().items()},
            }
        )
    return {"history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Deal a random Hearts board and optionally play it out.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--play", action="store_true", help="Play the deal out with the bots.")
    parser.add_argument("--bot", default="basic", choices=BOT_REGISTRY.keys())
    parser.add_argument(
        "--pass-direction",
        default="hold",
        choices=[direction.name.lower() for direction in PassDirection],
    )
    parser.add_argument("--rules", default=None, help="Path to a JSON rules file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every play.")
    args = parser.parse_args(None if argv is None else list(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    rules = load_rules(args.rules) if args.rules else DEFAULT_RULES
    hand = HandEngine(
        rng=Random(args.seed),
        direction=PassDirection.from_name(args.pass_direction),
        rules=rules,
    )
    print(format_deal(hand.hands))

    if args.play:
        bot = BOT_REGISTRY[args.bot](rules.passing.cards)
        play_hand(hand, [bot])
        assert hand.board is not None
        print(format_board(hand.board, rules))


if __name__ == "__main__":
    main()

import pytest

from bots.base import make_play
from bots.basic import BasicStrategy
from engine.cards import SEAT_ORDER, Seat, Suit, parse_card
from engine.deck import build_deck, deal_from_deck, flatten_hand, hand_size
from engine.game import (
    HandEngine,
    HandPhase,
    InvalidPass,
    PassDirection,
    exchange_cards,
    pass_target,
)
from engine.notation import parse_deal
from engine.rules_schema import PassingConfig, RuleSet
from engine.state import IllegalPlay

N, E, S, W = Seat.NORTH, Seat.EAST, Seat.SOUTH, Seat.WEST
c = parse_card

DEAL = "N:68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK"


def top_three(hand):
    return flatten_hand(hand)[-3:]


def test_pass_targets():
    assert pass_target(N, PassDirection.LEFT) is E
    assert pass_target(N, PassDirection.ACROSS) is S
    assert pass_target(N, PassDirection.RIGHT) is W
    assert pass_target(W, PassDirection.LEFT) is N
    assert pass_target(S, PassDirection.HOLD) is S


def test_exchange_cards_moves_passes_to_the_left():
    deal = deal_from_deck(build_deck())
    passes = {seat: top_three(deal[seat]) for seat in SEAT_ORDER}
    exchanged = exchange_cards(deal, passes, PassDirection.LEFT)

    for seat in SEAT_ORDER:
        assert hand_size(exchanged[seat]) == 13
        for card in passes[seat]:
            assert card in exchanged[pass_target(seat, PassDirection.LEFT)][card.suit]
    # West passed its top clubs to North.
    assert c("AC") in exchanged[N][Suit.CLUBS]
    assert c("AC") not in deal[N][Suit.CLUBS]


def test_exchange_cards_validates_passes():
    deal = deal_from_deck(build_deck())
    passes = {seat: top_three(deal[seat]) for seat in SEAT_ORDER}

    short = dict(passes)
    short[N] = passes[N][:2]
    with pytest.raises(InvalidPass):
        exchange_cards(deal, short, PassDirection.LEFT)

    stolen = dict(passes)
    stolen[N] = [c("2C"), c("AS"), c("KS")]
    with pytest.raises(InvalidPass):
        exchange_cards(deal, stolen, PassDirection.LEFT)

    twice = dict(passes)
    twice[N] = [c("AS"), c("AS"), c("KS")]
    with pytest.raises(InvalidPass):
        exchange_cards(deal, twice, PassDirection.LEFT)

    assert exchange_cards(deal, {}, PassDirection.HOLD) == deal


def test_hold_hand_starts_in_play():
    hand = HandEngine(deal=parse_deal(DEAL), direction=PassDirection.HOLD)
    assert hand.phase == HandPhase.PLAY
    assert hand.current_player is N
    assert [str(card) for card in flatten_hand(hand.legal_plays())] == ["2C"]


def test_passing_phase_then_play():
    hand = HandEngine(deal=parse_deal(DEAL), direction=PassDirection.ACROSS)
    assert hand.phase == HandPhase.PASS
    with pytest.raises(RuntimeError):
        hand.play_card(N, c("2C"))

    bot = BasicStrategy()
    for seat in SEAT_ORDER:
        hand.submit_pass(seat, bot.pass_cards(hand.hands[seat], seat))
        if seat is not W:
            with pytest.raises(InvalidPass):
                hand.submit_pass(seat, bot.pass_cards(hand.hands[seat], seat))

    assert hand.phase == HandPhase.PLAY
    # Passing across sends North's cards to South.
    for card in hand.passes[N]:
        assert card in hand.hands[S][card.suit]
    assert all(hand_size(hand.hands[seat]) == 13 for seat in SEAT_ORDER)


def test_play_card_checks_turn_and_legality():
    hand = HandEngine(deal=parse_deal(DEAL), direction=PassDirection.HOLD)
    with pytest.raises(IllegalPlay):
        hand.play_card(E, c("QC"))
    with pytest.raises(IllegalPlay):
        hand.play_card(N, c("3C"))

    hand.play_card(N, c("2C"))
    assert hand.current_player is E
    with pytest.raises(IllegalPlay):
        hand.play_card(E, c("2H"))


def test_undo_restores_previous_board():
    hand = HandEngine(deal=parse_deal(DEAL), direction=PassDirection.HOLD)
    start = hand.board
    hand.play_card(N, c("2C"))
    hand.play_card(E, c("QC"))
    assert hand.undo().current_play.player is E
    assert hand.undo() is start
    with pytest.raises(IllegalPlay):
        hand.undo()


def test_full_hand_with_bots():
    hand = HandEngine(deal=parse_deal(DEAL), direction=PassDirection.HOLD)
    bot = BasicStrategy()
    while hand.phase == HandPhase.PLAY:
        decision = make_play(hand.board, bot)
        hand.play_card(decision.seat, decision.card)

    assert hand.phase == HandPhase.COMPLETE
    assert hand.board.is_complete()
    assert len(hand.history) == 52
    assert sum(hand.points().values()) == 26

    last = hand.undo()
    assert hand.phase == HandPhase.PLAY
    assert len(last.completed_tricks) == 12


def test_custom_rules_change_pass_count_and_points():
    rules = RuleSet(passing=PassingConfig(cards=1), scoring={"heart_points": 2, "queen_points": 10})
    hand = HandEngine(deal=parse_deal(DEAL), direction=PassDirection.RIGHT, rules=rules)
    with pytest.raises(InvalidPass):
        hand.submit_pass(N, [c("KH"), c("9C")])

    bot = BasicStrategy(pass_count=1)
    for seat in SEAT_ORDER:
        hand.submit_pass(seat, bot.pass_cards(hand.hands[seat], seat))
    while hand.phase == HandPhase.PLAY:
        decision = make_play(hand.board, bot)
        hand.play_card(decision.seat, decision.card)
    assert sum(hand.points().values()) == 13 * 2 + 10

import pytest

from engine.cards import NotationError, Seat, Suit, parse_card
from engine.deck import build_deck, deal_from_deck, hand_size
from engine.display import format_board, format_hand
from engine.notation import format_deal, parse_deal
from engine.state import make_board

DEAL = "N:68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK"


def test_parse_deal_assigns_hands_clockwise():
    deal = parse_deal(DEAL)
    assert [str(card) for card in deal[Seat.NORTH][Suit.SPADES]] == ["6S", "8S"]
    assert deal[Seat.EAST][Suit.CLUBS] == (parse_card("QC"),)
    assert parse_card("AC") in deal[Seat.SOUTH][Suit.CLUBS]
    assert parse_card("KC") in deal[Seat.WEST][Suit.CLUBS]
    assert all(hand_size(hand) == 13 for hand in deal.values())


def test_deal_text_round_trips():
    assert format_deal(parse_deal(DEAL)) == DEAL

    canonical = deal_from_deck(build_deck())
    assert parse_deal(format_deal(canonical)) == canonical


def test_start_seat_other_than_north():
    deal = parse_deal("E:68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK")
    assert parse_card("2C") in deal[Seat.EAST][Suit.CLUBS]
    assert deal[Seat.NORTH][Suit.CLUBS] == tuple(parse_card(c) for c in ["5C", "8C", "TC", "JC", "KC"])
    assert format_deal(deal, start=Seat.EAST).startswith("E:68.56K")


def test_empty_holdings_are_empty_strings():
    deal = parse_deal("N:AKQJT98765432... .AKQJT98765432.. ..AKQJT98765432. ...AKQJT98765432")
    assert deal[Seat.NORTH][Suit.HEARTS] == ()
    assert len(deal[Seat.WEST][Suit.CLUBS]) == 13
    assert format_deal(deal) == "N:23456789TJQKA... .23456789TJQKA.. ..23456789TJQKA. ...23456789TJQKA"


@pytest.mark.parametrize(
    "text",
    [
        "N:68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A",
        "X:68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK",
        "68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK",
        "N:68.56K.248 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK",
        "N:68.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJX",
        "N:668.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK",
        "N:268.56K.248.23479 39K.279QA.57KA.Q 7TJQ.4TJ.69TQ.6A 245A.38.3J.58TJK",
    ],
)
def test_malformed_deal_text_raises(text):
    with pytest.raises(NotationError):
        parse_deal(text)


def test_display_formats_hand_and_board():
    deal = parse_deal(DEAL)
    assert format_hand(deal[Seat.NORTH]) == "♠68 ♥56K ♦248 ♣23479"
    assert format_hand(deal[Seat.EAST]) == "♠39K ♥279QA ♦57KA ♣Q"

    rendered = format_board(make_board(deal))
    assert rendered.splitlines()[0] == "N: ♠68 ♥56K ♦248 ♣23479"
    assert rendered.splitlines()[-1] == "to play: N (trick: empty)"

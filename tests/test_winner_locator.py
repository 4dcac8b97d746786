"""Tests for the winner locator."""

from uuid import uuid4

import pytest

from models import Colour, Outcome, Table
from core.exceptions import TableNotSpun
from services.winner_locator import locate


def test_marks_bets_covering_the_outcome(make_bet):
    table_id = uuid4()
    hit = make_bet(table_id, spaces=[1, 5, 9])
    miss = make_bet(table_id, spaces=[16])
    table = Table(
        id=table_id,
        is_closed=True,
        outcome=Outcome(position=5, colour=Colour.RED),
        bets=[hit, miss],
    )

    result = locate(table)

    assert [b.win for b in result.bets] == [True, False]


def test_never_resets_a_win(make_bet):
    table_id = uuid4()
    bet = make_bet(table_id, spaces=[16])
    bet.win = True
    table = Table(
        id=table_id,
        is_closed=True,
        outcome=Outcome(position=0, colour=Colour.GREEN),
        bets=[bet],
    )

    assert locate(table).bets[0].win is True


def test_table_without_bets():
    table = Table(id=uuid4(), is_closed=True, outcome=Outcome(position=0, colour=Colour.GREEN))

    assert locate(table).bets == []


def test_rejects_table_without_outcome(make_bet):
    table_id = uuid4()
    table = Table(id=table_id, is_closed=True, bets=[make_bet(table_id)])

    with pytest.raises(TableNotSpun):
        locate(table)

"""Tests for the in-memory bet store."""

import threading
from dataclasses import replace
from uuid import uuid4

import pytest

from models import BetStatus
from core.exceptions import BetNotFound, DuplicateKey


def test_insert_then_get(bet_store, make_bet):
    bet = make_bet(uuid4())
    bet_store.insert(bet)

    assert bet_store.get(bet.id) == bet


def test_insert_duplicate_fails(bet_store, make_bet):
    bet = make_bet(uuid4())
    bet_store.insert(bet)

    with pytest.raises(DuplicateKey):
        bet_store.insert(bet)


def test_get_unknown_bet(bet_store):
    with pytest.raises(BetNotFound):
        bet_store.get(uuid4())


def test_stored_bet_is_a_copy(bet_store, make_bet):
    bet = make_bet(uuid4(), spaces=[1, 2])
    bet_store.insert(bet)

    bet.selected_spaces.append(3)
    bet_store.get(bet.id).selected_spaces.append(4)

    assert bet_store.get(bet.id).selected_spaces == [1, 2]


def test_list_by_table_filters(bet_store, make_bet):
    table_id = uuid4()
    mine = [make_bet(table_id), make_bet(table_id)]
    other = make_bet(uuid4())
    for bet in mine + [other]:
        bet_store.insert(bet)

    assert {b.id for b in bet_store.list_by_table(table_id)} == {b.id for b in mine}


def test_list_by_table_without_bets(bet_store):
    assert bet_store.list_by_table(uuid4()) == []


def test_update_status_live_does_not_stamp_settled_at(bet_store, make_bet):
    table_id = uuid4()
    bet = make_bet(table_id)
    bet_store.insert(bet)

    bet_store.update_status_by_table(table_id, BetStatus.LIVE)

    stored = bet_store.get(bet.id)
    assert stored.status is BetStatus.LIVE
    assert stored.settled_at is None


def test_update_status_settled_stamps_settled_at(bet_store, make_bet):
    table_id = uuid4()
    bet = make_bet(table_id)
    untouched = make_bet(uuid4())
    bet_store.insert(bet)
    bet_store.insert(untouched)

    bet_store.update_status_by_table(table_id, BetStatus.SETTLED)

    stored = bet_store.get(bet.id)
    assert stored.status is BetStatus.SETTLED
    assert stored.settled_at is not None
    assert stored.settled_at.tzinfo is not None
    assert bet_store.get(untouched.id).status is BetStatus.UNSETTLED


def test_update_status_without_bets_is_noop(bet_store):
    bet_store.update_status_by_table(uuid4(), BetStatus.SETTLED)


def test_set_winners_overwrites_by_id(bet_store, make_bet):
    table_id = uuid4()
    winner, loser = make_bet(table_id), make_bet(table_id)
    bet_store.insert(winner)
    bet_store.insert(loser)

    bet_store.set_winners([replace(winner, win=True), loser])

    assert bet_store.get(winner.id).win is True
    assert bet_store.get(loser.id).win is False


def test_concurrent_reads_and_status_updates(bet_store, make_bet):
    table_id = uuid4()
    for _ in range(50):
        bet_store.insert(make_bet(table_id))
    errors = []

    def read():
        try:
            for _ in range(50):
                assert len(bet_store.list_by_table(table_id)) == 50
        except AssertionError as e:
            errors.append(e)

    def write():
        for status in (BetStatus.LIVE, BetStatus.SETTLED) * 10:
            bet_store.update_status_by_table(table_id, status)

    threads = [threading.Thread(target=read) for _ in range(4)]
    threads.append(threading.Thread(target=write))
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert errors == []
    statuses = {b.status for b in bet_store.list_by_table(table_id)}
    assert statuses == {BetStatus.SETTLED}


def test_update_status_never_moves_backwards(bet_store, make_bet):
    table_id = uuid4()
    bet = make_bet(table_id)
    bet_store.insert(bet)
    bet_store.update_status_by_table(table_id, BetStatus.SETTLED)
    settled_at = bet_store.get(bet.id).settled_at

    bet_store.update_status_by_table(table_id, BetStatus.LIVE)

    stored = bet_store.get(bet.id)
    assert stored.status is BetStatus.SETTLED
    assert stored.settled_at == settled_at

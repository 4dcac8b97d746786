"""Tests for the bet manager."""

from uuid import uuid4

import pytest

from models import Table
from core.bet_manager import BetManager
from core.exceptions import BetNotFound, DuplicateKey, TableClosed, TableNotFound


@pytest.fixture
def manager(bet_store, table_store):
    return BetManager(bet_store, table_store)


@pytest.fixture
def open_table(table_store):
    table = Table(id=uuid4())
    table_store.insert(table)
    return table


def test_create_on_open_table(manager, bet_store, open_table, make_bet):
    bet = make_bet(open_table.id)

    created = manager.create(bet)

    assert created == bet
    assert manager.get(bet.id) == bet
    assert bet_store.list_by_table(open_table.id) == [bet]


def test_create_on_closed_table(manager, bet_store, table_store, open_table, make_bet):
    table_store.close(open_table.id)

    with pytest.raises(TableClosed):
        manager.create(make_bet(open_table.id))

    assert bet_store.list_by_table(open_table.id) == []


def test_create_on_unknown_table(manager, bet_store, make_bet):
    table_id = uuid4()

    with pytest.raises(TableNotFound):
        manager.create(make_bet(table_id))

    assert bet_store.list_by_table(table_id) == []


def test_create_duplicate_bet(manager, open_table, make_bet):
    bet = make_bet(open_table.id)
    manager.create(bet)

    with pytest.raises(DuplicateKey):
        manager.create(bet)


def test_get_unknown_bet(manager):
    with pytest.raises(BetNotFound):
        manager.get(uuid4())

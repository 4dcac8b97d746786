"""Shared fixtures for the roulette tests."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from models import NUMBERS_TO_COLOURS, Bet, Outcome, Stake
from core.bet_store import InMemoryBetStore
from core.table_store import InMemoryTableStore


class FixedBallPlacer:
    """Ball placer that lands on the given positions in order."""

    def __init__(self, *positions):
        self.positions = list(positions)
        self.calls = 0

    def get_position(self) -> Outcome:
        position = self.positions[min(self.calls, len(self.positions) - 1)]
        self.calls += 1
        return Outcome(position=position, colour=NUMBERS_TO_COLOURS[position])


@pytest.fixture
def table_store():
    return InMemoryTableStore()


@pytest.fixture
def bet_store():
    return InMemoryBetStore()


@pytest.fixture
def make_bet():
    start = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make_bet(table_id, spaces=(5,), amount="10.00", currency="GBP"):
        counter["n"] += 1
        return Bet(
            id=uuid4(),
            table=table_id,
            selected_spaces=list(spaces),
            stake=Stake(amount=Decimal(amount), currency=currency),
            placed_at=start + timedelta(seconds=counter["n"]),
        )

    return _make_bet

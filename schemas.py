"""
API Schemas：request / response 模型與領域模型之間的轉換

JSON 欄位一律使用 camelCase（selectedSpaces, placedAt, isClosed ...）
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models import (
    MAX_POSITION,
    MIN_POSITION,
    Bet,
    BetStatus,
    Colour,
    Outcome,
    Stake,
    Table,
)


Space = Annotated[int, Field(ge=MIN_POSITION, le=MAX_POSITION)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StakeSchema(CamelModel):
    amount: Decimal = Field(gt=0)
    currency: str = Field(pattern=r"^[A-Z]{3}$")


class BetRequest(CamelModel):
    """下注需要的欄位"""
    selected_spaces: List[Space] = Field(min_length=1)
    stake: StakeSchema


class BetResponse(CamelModel):
    id: UUID
    table: UUID
    selected_spaces: List[int]
    stake: StakeSchema
    placed_at: datetime
    status: BetStatus
    settled_at: Optional[datetime] = None
    win: bool = False


class OutcomeSchema(CamelModel):
    position: int
    colour: Colour


class TableResponse(CamelModel):
    id: UUID
    bets: List[BetResponse] = []
    is_closed: bool
    outcome: Optional[OutcomeSchema] = None


def adapt_bet_to_domain(request: BetRequest, table_id: UUID) -> Bet:
    """
    BetRequest -> Bet

    id 與 placed_at 由這裡產生，狀態固定為 UNSETTLED、win=False
    """
    return Bet(
        id=uuid4(),
        table=table_id,
        selected_spaces=list(request.selected_spaces),
        stake=Stake(amount=request.stake.amount, currency=request.stake.currency),
        placed_at=datetime.now(timezone.utc),
        status=BetStatus.UNSETTLED,
        settled_at=None,
        win=False,
    )


def adapt_bet_from_domain(bet: Bet) -> BetResponse:
    return BetResponse(
        id=bet.id,
        table=bet.table,
        selected_spaces=list(bet.selected_spaces),
        stake=StakeSchema(amount=bet.stake.amount, currency=bet.stake.currency),
        placed_at=bet.placed_at,
        status=bet.status,
        settled_at=bet.settled_at,
        win=bet.win,
    )


def adapt_bets_from_domain(bets: List[Bet]) -> List[BetResponse]:
    return [adapt_bet_from_domain(bet) for bet in bets]


def adapt_outcome_from_domain(outcome: Optional[Outcome]) -> Optional[OutcomeSchema]:
    if outcome is None:
        return None
    return OutcomeSchema(position=outcome.position, colour=outcome.colour)


def adapt_table_from_domain(table: Table) -> TableResponse:
    return TableResponse(
        id=table.id,
        bets=adapt_bets_from_domain(table.bets),
        is_closed=table.is_closed,
        outcome=adapt_outcome_from_domain(table.outcome),
    )


def adapt_tables_from_domain(tables: List[Table]) -> List[TableResponse]:
    return [adapt_table_from_domain(table) for table in tables]

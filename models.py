"""
領域模型：Table、Bet、Outcome

這裡只定義資料結構與固定對照表，不包含任何狀態轉換邏輯。
狀態轉換集中在 core/table_manager.py。
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional
from uuid import UUID


class Colour(str, Enum):
    """輪盤格子的顏色"""
    RED = "red"
    BLACK = "black"
    GREEN = "green"


class BetStatus(str, Enum):
    """
    下注狀態（單向前進）

    UNSETTLED -> LIVE -> SETTLED
    """
    UNSETTLED = "unsettled"
    LIVE = "live"
    SETTLED = "settled"


RED_POSITIONS = frozenset({
    1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36
})

MIN_POSITION = 0
MAX_POSITION = 36


def _build_colour_table() -> Dict[int, Colour]:
    table = {0: Colour.GREEN}
    for position in range(1, MAX_POSITION + 1):
        table[position] = Colour.RED if position in RED_POSITIONS else Colour.BLACK
    return table


# 0 為綠色，其餘 1-36 依歐式輪盤配色
NUMBERS_TO_COLOURS: Dict[int, Colour] = _build_colour_table()


@dataclass(frozen=True)
class Outcome:
    """開獎結果：位置（0-36）與顏色"""
    position: int
    colour: Colour


@dataclass(frozen=True)
class Stake:
    """下注金額與 ISO 4217 幣別，相等性只比較金額與幣別"""
    amount: Decimal
    currency: str


@dataclass
class Bet:
    id: UUID
    table: UUID
    selected_spaces: List[int]
    stake: Stake
    placed_at: datetime
    status: BetStatus = BetStatus.UNSETTLED
    settled_at: Optional[datetime] = None
    win: bool = False


@dataclass
class Table:
    """
    一局輪盤

    狀態：
    - Open: is_closed=False, outcome=None
    - Closed/Spinning: is_closed=True, outcome=None（Spin 進行中）
    - Resolved: is_closed=True, outcome 已設定

    bets 不會被 TableStore 保存，只在 TableManager 回傳時附上。
    """
    id: UUID
    is_closed: bool = False
    outcome: Optional[Outcome] = None
    bets: List[Bet] = field(default_factory=list)

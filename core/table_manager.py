"""
Table Manager：管理 Table 的完整生命週期（狀態機）

Table 狀態：
    Open (is_closed=False, outcome=None)
      -> Closed/Spinning (is_closed=True, outcome=None，Spin 進行中)
      -> Resolved (is_closed=True, outcome 已設定)

Bet 狀態（由 Spin / Settle 推進）：
    UNSETTLED -> LIVE -> SETTLED

注意：
- 每一次 store 呼叫各自是原子的，但 Spin / Settle 整體不是 transaction
- 同一張桌子重複 Spin 會重新開獎並覆蓋前一次結果
"""
from typing import Callable, List, Optional
from uuid import UUID, uuid4
import logging

from models import Bet, BetStatus, Table
from core.bet_store import BetProvider
from core.exceptions import (
    CloseFailed,
    CreateFailed,
    FetchBetsFailed,
    FetchFailed,
    RouletteException,
    SetOutcomeFailed,
    SetWinnersFailed,
    SettleFailed,
    SpinFailed,
    TableNotSpun,
)
from core.table_store import TableProvider
from services.ball_placer import BallPlacer
from services.winner_locator import locate

logger = logging.getLogger(__name__)


def _placement_order(bets: List[Bet]) -> List[Bet]:
    return sorted(bets, key=lambda bet: (bet.placed_at, str(bet.id)))


class TableManager:
    """Table 生命週期管理器"""

    def __init__(
        self,
        table_store: TableProvider,
        bet_store: BetProvider,
        ball_placer: Optional[BallPlacer] = None,
        winner_locator: Callable[[Table], Table] = locate,
    ):
        self.table_store = table_store
        self.bet_store = bet_store
        self.ball_placer = ball_placer or BallPlacer()
        self.winner_locator = winner_locator

    def create(self) -> Table:
        """
        建立新桌子（狀態 Open）

        返回：
            新的 Table

        異常：
            CreateFailed: 寫入 store 失敗
        """
        table = Table(id=uuid4())
        try:
            self.table_store.insert(table)
        except RouletteException as e:
            raise CreateFailed(table.id) from e

        logger.info(f"Created table {table.id}")
        return table

    def spin(self, table_id: UUID) -> Table:
        """
        開獎（Open -> Closed -> Resolved）

        流程：
        1. 關閉桌子
        2. 所有 Bet 轉為 LIVE
        3. 開獎
        4. 寫入開獎結果
        5. 重新讀取 Table 並附上 bets

        參數：
            table_id: Table UUID

        返回：
            is_closed=True、outcome 已設定、bets 皆為 LIVE 的 Table

        異常：
            CloseFailed: Table 不存在
            SpinFailed: Bet 狀態更新失敗
            SetOutcomeFailed: 寫入開獎結果失敗
            FetchFailed / FetchBetsFailed: 重新讀取失敗
            RandomnessUnavailable: 亂數源無法使用（不攔截）

        注意：
            對已關閉的桌子呼叫也會成功，並重新開獎
            已結算的 Bet 維持 SETTLED，不會退回 LIVE
        """
        # 1. 關閉（冪等）
        try:
            self.table_store.close(table_id)
        except RouletteException as e:
            raise CloseFailed(table_id) from e

        # 2. Bet -> LIVE
        try:
            self.bet_store.update_status_by_table(table_id, BetStatus.LIVE)
        except RouletteException as e:
            raise SpinFailed(table_id) from e

        # 3. 開獎
        outcome = self.ball_placer.get_position()

        # 4. 寫入結果
        try:
            self.table_store.set_outcome(table_id, outcome)
        except RouletteException as e:
            raise SetOutcomeFailed(table_id) from e

        logger.info(
            f"Table {table_id} spun: {outcome.position} {outcome.colour.value}"
        )

        # 5. 回傳最新狀態
        return self.get(table_id)

    def settle(self, table_id: UUID) -> Table:
        """
        結算（所有 Bet -> SETTLED，並標記贏家）

        前置條件：
        - Table 必須已經 Spin 過（outcome 不為空）

        流程：
        1. 檢查 Table 已開獎
        2. 所有 Bet 轉為 SETTLED（寫入 settled_at）
        3. 讀取 Table 與 bets
        4. WinnerLocator 標記 win
        5. 寫回 win 旗標
        6. 重新讀取 bets 作為最終結果

        異常：
            FetchFailed: Table 不存在
            TableNotSpun: Table 尚未開獎（此時不會動到任何 Bet）
            SettleFailed: Bet 狀態更新失敗
            FetchBetsFailed: 讀取 bets 失敗
            SetWinnersFailed: 寫回 win 旗標失敗
        """
        # 1. 未開獎的桌子不能結算
        table = self._fetch_table(table_id)
        if table.outcome is None:
            raise TableNotSpun(table_id)

        # 2. Bet -> SETTLED
        try:
            self.bet_store.update_status_by_table(table_id, BetStatus.SETTLED)
        except RouletteException as e:
            raise SettleFailed(table_id) from e

        # 3. 以最新的 outcome 與 bets 計算
        table = self._fetch_table(table_id)
        table.bets = self._fetch_bets(table_id)

        # 4. 標記贏家（win 一律從 False 開始重新計算）
        for bet in table.bets:
            bet.win = False
        table = self.winner_locator(table)

        # 5. 寫回
        try:
            self.bet_store.set_winners(table.bets)
        except RouletteException as e:
            raise SetWinnersFailed(table_id) from e

        # 6. 以 store 內容為準
        table.bets = self._fetch_bets(table_id)

        winners = sum(1 for bet in table.bets if bet.win)
        logger.info(
            f"Table {table_id} settled: {winners}/{len(table.bets)} winning bets"
        )
        return table

    def get(self, table_id: UUID) -> Table:
        """
        取得 Table 並附上 bets

        異常：
            FetchFailed: Table 不存在
            FetchBetsFailed: 讀取 bets 失敗
        """
        table = self._fetch_table(table_id)
        table.bets = self._fetch_bets(table_id)
        return table

    def list(self) -> List[Table]:
        """
        取得所有 Table 並附上各自的 bets

        某張桌子讀取 bets 失敗時，該桌以空 bets 回傳，不影響整體結果。

        異常：
            FetchFailed: 讀取 Table 列表失敗
        """
        try:
            tables = self.table_store.list()
        except RouletteException as e:
            raise FetchFailed() from e

        for table in tables:
            try:
                table.bets = _placement_order(self.bet_store.list_by_table(table.id))
            except RouletteException as e:
                logger.warning(f"Failed to locate bets for table {table.id}: {e}")
                table.bets = []

        return tables

    def _fetch_table(self, table_id: UUID) -> Table:
        try:
            return self.table_store.get(table_id)
        except RouletteException as e:
            raise FetchFailed(table_id) from e

    def _fetch_bets(self, table_id: UUID) -> List[Bet]:
        try:
            return _placement_order(self.bet_store.list_by_table(table_id))
        except RouletteException as e:
            raise FetchBetsFailed(table_id) from e

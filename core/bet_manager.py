"""
Bet Manager：下注規則

職責：
1. 下注（桌子必須存在且尚未關閉）
2. 查詢下注

Bet 的狀態轉換（LIVE / SETTLED）只會經由 TableManager 的 Spin / Settle，
這裡不提供任何其他修改入口。
"""
from uuid import UUID
import logging

from models import Bet
from core.bet_store import BetProvider
from core.exceptions import TableClosed
from core.table_store import TableReader

logger = logging.getLogger(__name__)


class BetManager:
    """Bet 規則管理器"""

    def __init__(self, bet_store: BetProvider, table_reader: TableReader):
        self.bet_store = bet_store
        self.table_reader = table_reader

    def create(self, bet: Bet) -> Bet:
        """
        下注

        流程：
        1. 取得對應的 Table
        2. 檢查 Table 是否已關閉
        3. 存入 Bet

        參數：
            bet: 已由 API 層產生 id 與 placed_at 的 Bet

        返回：
            原封不動的 Bet

        異常：
            TableNotFound: Table 不存在
            TableClosed: Table 已關閉
            DuplicateKey: Bet id 重複（id 為新產生的 UUID，實務上不會發生）
        """
        # 1. 取得 Table
        table = self.table_reader.get(bet.table)

        # 2. 關閉後不接受下注
        if table.is_closed:
            raise TableClosed(table.id)

        # 3. 存入
        self.bet_store.insert(bet)

        logger.info(f"Placed bet {bet.id} on table {bet.table}: {bet.selected_spaces}")
        return bet

    def get(self, bet_id: UUID) -> Bet:
        """
        查詢下注

        異常：
            BetNotFound: Bet 不存在
        """
        return self.bet_store.get(bet_id)

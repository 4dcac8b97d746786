"""
Bet Store：Bet 的 in-memory 儲存

職責：
1. 以 id 保存 Bet
2. 依 table 查詢、批次更新狀態
3. 寫回 WinnerLocator 算出的 win 旗標

與 Table Store 相同：進出都是複本，每個實例一把讀寫鎖。
"""
from copy import deepcopy
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Protocol
from uuid import UUID

from models import Bet, BetStatus
from core.exceptions import BetNotFound, DuplicateKey
from core.locks import RWLock


_STATUS_ORDER = {
    BetStatus.UNSETTLED: 0,
    BetStatus.LIVE: 1,
    BetStatus.SETTLED: 2,
}


class BetReader(Protocol):
    def get(self, bet_id: UUID) -> Bet: ...

    def list_by_table(self, table_id: UUID) -> List[Bet]: ...


class BetWriter(Protocol):
    def insert(self, bet: Bet) -> None: ...

    def update_status_by_table(self, table_id: UUID, status: BetStatus) -> None: ...

    def set_winners(self, bets: Iterable[Bet]) -> None: ...


class BetProvider(BetReader, BetWriter, Protocol):
    pass


class InMemoryBetStore:
    """以 dict 保存 Bet，讀寫鎖保護"""

    def __init__(self):
        self._bets: Dict[UUID, Bet] = {}
        self._lock = RWLock()

    def insert(self, bet: Bet) -> None:
        """
        新增 Bet

        異常：
            DuplicateKey: id 已存在
        """
        stored = deepcopy(bet)
        with self._lock.write_locked():
            if stored.id in self._bets:
                raise DuplicateKey(stored.id)
            self._bets[stored.id] = stored

    def get(self, bet_id: UUID) -> Bet:
        """
        取得 Bet 複本

        異常：
            BetNotFound: Bet 不存在
        """
        with self._lock.read_locked():
            bet = self._bets.get(bet_id)
            if bet is None:
                raise BetNotFound(bet_id)
            return deepcopy(bet)

    def list_by_table(self, table_id: UUID) -> List[Bet]:
        """
        取得某張桌子的所有 Bet（沒有則回傳空 list，不算錯誤）

        返回順序不保證。
        """
        with self._lock.read_locked():
            return [deepcopy(bet) for bet in self._bets.values() if bet.table == table_id]

    def update_status_by_table(self, table_id: UUID, status: BetStatus) -> None:
        """
        批次更新某張桌子所有 Bet 的狀態

        - 狀態只會前進，已經在更後面狀態的 Bet 不受影響
        - 狀態為 SETTLED 時同時寫入 settled_at（UTC 現在時間）
        - 沒有符合的 Bet 時什麼都不做
        """
        settled_at = datetime.now(timezone.utc) if status == BetStatus.SETTLED else None
        with self._lock.write_locked():
            for bet in self._bets.values():
                if bet.table != table_id:
                    continue
                if _STATUS_ORDER[bet.status] > _STATUS_ORDER[status]:
                    continue
                bet.status = status
                if settled_at is not None:
                    bet.settled_at = settled_at

    def set_winners(self, bets: Iterable[Bet]) -> None:
        """以 id 整筆覆蓋傳入的 Bet，用來保存 win 旗標"""
        replacements = [deepcopy(bet) for bet in bets]
        with self._lock.write_locked():
            for bet in replacements:
                self._bets[bet.id] = bet

"""
Table Store：Table 的 in-memory 儲存

職責：
1. 以 id 保存 Table（不含 bets）
2. 關閉桌子、寫入開獎結果

所有進出 store 的 Table 都是複本，呼叫者無法繞過 store 修改內部狀態。
"""
from copy import deepcopy
from typing import Dict, List, Protocol
from uuid import UUID

from models import Outcome, Table
from core.exceptions import DuplicateKey, TableNotFound
from core.locks import RWLock


class TableReader(Protocol):
    def get(self, table_id: UUID) -> Table: ...

    def list(self) -> List[Table]: ...


class TableWriter(Protocol):
    def insert(self, table: Table) -> None: ...

    def close(self, table_id: UUID) -> None: ...

    def set_outcome(self, table_id: UUID, outcome: Outcome) -> None: ...


class TableProvider(TableReader, TableWriter, Protocol):
    pass


class InMemoryTableStore:
    """以 dict 保存 Table，讀寫鎖保護"""

    def __init__(self):
        self._tables: Dict[UUID, Table] = {}
        self._lock = RWLock()

    def insert(self, table: Table) -> None:
        """
        新增 Table

        異常：
            DuplicateKey: id 已存在
        """
        stored = deepcopy(table)
        stored.bets = []
        with self._lock.write_locked():
            if stored.id in self._tables:
                raise DuplicateKey(stored.id)
            self._tables[stored.id] = stored

    def get(self, table_id: UUID) -> Table:
        """
        取得 Table 複本

        異常：
            TableNotFound: Table 不存在
        """
        with self._lock.read_locked():
            table = self._tables.get(table_id)
            if table is None:
                raise TableNotFound(table_id)
            return deepcopy(table)

    def list(self) -> List[Table]:
        """所有 Table 的複本，不保證順序"""
        with self._lock.read_locked():
            return [deepcopy(table) for table in self._tables.values()]

    def close(self, table_id: UUID) -> None:
        """
        關閉桌子（冪等，重複關閉不算錯誤）

        異常：
            TableNotFound: Table 不存在
        """
        with self._lock.write_locked():
            table = self._tables.get(table_id)
            if table is None:
                raise TableNotFound(table_id)
            table.is_closed = True

    def set_outcome(self, table_id: UUID, outcome: Outcome) -> None:
        """
        寫入開獎結果（直接覆蓋，重複 Spin 的防護不在這一層）

        異常：
            TableNotFound: Table 不存在
        """
        with self._lock.write_locked():
            table = self._tables.get(table_id)
            if table is None:
                raise TableNotFound(table_id)
            table.outcome = outcome

"""
並發控制工具

提供 in-memory store 使用的讀寫鎖（Readers-Writer Lock）

規則：
- 多個讀取者可以同時持有鎖
- 寫入者獨佔，且與所有讀取者互斥
- 有寫入者在等待時，新的讀取者會排隊（避免寫入者餓死）

每個 store 實例各自持有一把鎖，不提供跨 store 的 transaction。
"""
from contextlib import contextmanager
import threading


class RWLock:
    """讀寫鎖"""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        """
        取得讀取鎖

        範例：
            with self._lock.read_locked():
                table = self._tables.get(table_id)
        """
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        """
        取得寫入鎖

        範例：
            with self._lock.write_locked():
                self._tables[table.id] = table
        """
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

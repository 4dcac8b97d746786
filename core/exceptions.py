"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理

傳遞原則：
- Store 直接拋出 NotFound / DuplicateKey
- TableManager 以 `raise StageFailed(...) from err` 包上階段資訊，不吞掉原始錯誤
- 核心內部不做任何重試
"""


class RouletteException(Exception):
    """所有輪盤異常的基類"""
    pass


# ============ Store 相關異常 ============

class NotFound(RouletteException):
    """找不到指定的 Table 或 Bet"""
    pass


class TableNotFound(NotFound):
    """桌子不存在"""
    def __init__(self, table_id):
        self.table_id = table_id
        super().__init__(f"Table {table_id} not found")


class BetNotFound(NotFound):
    """下注不存在"""
    def __init__(self, bet_id):
        self.bet_id = bet_id
        super().__init__(f"Bet {bet_id} not found")


class DuplicateKey(RouletteException):
    """插入時 id 已存在"""
    def __init__(self, key):
        self.key = key
        super().__init__(f"Duplicate key {key}")


# ============ 規則相關異常 ============

class TableClosed(RouletteException):
    """桌子已關閉，不再接受下注"""
    def __init__(self, table_id):
        self.table_id = table_id
        super().__init__(f"Table {table_id} is not accepting any more bets")


class TableNotSpun(RouletteException):
    """桌子尚未開獎（outcome 為空），無法結算"""
    def __init__(self, table_id):
        self.table_id = table_id
        super().__init__(f"Table {table_id} has no outcome yet")


# ============ TableManager 階段性異常 ============

class TableOperationFailed(RouletteException):
    """
    TableManager 某個階段失敗

    原始的 store 異常保留在 __cause__
    """
    stage = "table operation"

    def __init__(self, table_id=None):
        self.table_id = table_id
        message = f"failed to {self.stage}"
        if table_id is not None:
            message = f"{message}: {table_id}"
        super().__init__(message)


class CreateFailed(TableOperationFailed):
    stage = "create table"


class CloseFailed(TableOperationFailed):
    stage = "close table"


class SpinFailed(TableOperationFailed):
    stage = "spin table"


class SetOutcomeFailed(TableOperationFailed):
    stage = "set outcome on table"


class FetchFailed(TableOperationFailed):
    stage = "locate table"


class FetchBetsFailed(TableOperationFailed):
    stage = "locate bets"


class SettleFailed(TableOperationFailed):
    stage = "settle bets"


class SetWinnersFailed(TableOperationFailed):
    stage = "set winners"


# ============ 不可恢復的錯誤 ============

class RandomnessUnavailable(RuntimeError):
    """
    無法取得亂數，開獎無法繼續

    不屬於 RouletteException，核心內不攔截。
    """
    pass

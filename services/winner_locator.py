"""
贏家判定服務：標記哪些下注贏了

純計算邏輯，不涉及狀態轉換
"""
from models import Table
from core.exceptions import TableNotSpun


def locate(table: Table) -> Table:
    """
    依開獎結果標記贏家

    規則：
    - 開獎位置在 bet 的 selected_spaces 內 -> win=True
    - 其他 bet 保持原樣（不會重設為 False，呼叫者需確保 win 從 False 開始）

    參數：
        table: 已開獎且附上 bets 的 Table

    返回：
        同一個 Table（bets 已標記）

    異常：
        TableNotSpun: Table 尚未開獎（outcome 為空）
    """
    if table.outcome is None:
        raise TableNotSpun(table.id)

    position = table.outcome.position
    for bet in table.bets:
        if position in bet.selected_spaces:
            bet.win = True

    return table

"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- Store：Table 與 Bet 的 in-memory 儲存
- Manager：管理 Table 的生命週期與下注規則
- Locks：並發控制工具（讀寫鎖）
- Exceptions：業務異常
"""

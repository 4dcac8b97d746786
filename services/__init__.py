"""
服務層

這個 package 包含純計算邏輯，不負責狀態轉換：
- BallPlacer：開獎邏輯
- WinnerLocator：判斷贏家邏輯
"""

"""
HTTP 層

只負責 request 解析、呼叫 Manager、把結果與異常轉成 HTTP 回應，
不包含任何業務規則。
"""

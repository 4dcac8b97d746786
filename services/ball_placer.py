"""
開獎服務：決定球落在哪一格

純計算邏輯，不涉及狀態轉換
"""
import logging
import secrets

from models import MAX_POSITION, NUMBERS_TO_COLOURS, Outcome
from core.exceptions import RandomnessUnavailable

logger = logging.getLogger(__name__)


class BallPlacer:
    """以作業系統的密碼學亂數源產生開獎結果"""

    def get_position(self) -> Outcome:
        """
        產生一次開獎結果

        返回：
            Outcome，position 均勻分布於 0-36，colour 依固定對照表

        異常：
            RandomnessUnavailable: 亂數源無法使用（不可恢復）
        """
        try:
            position = secrets.randbelow(MAX_POSITION + 1)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"Random number failed to generate: {e}")
            raise RandomnessUnavailable("random number failed to generate") from e

        return Outcome(position=position, colour=NUMBERS_TO_COLOURS[position])

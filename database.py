from dataclasses import dataclass
from functools import lru_cache
import logging

from fastapi import Request
from pydantic_settings import BaseSettings

from core.bet_manager import BetManager
from core.bet_store import InMemoryBetStore
from core.table_manager import TableManager
from core.table_store import InMemoryTableStore
from services.ball_placer import BallPlacer

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: str = "*"

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()


@dataclass
class Managers:
    tables: TableManager
    bets: BetManager


def build_managers(ball_placer: BallPlacer = None) -> Managers:
    """
    建立一組獨立的 in-memory store 與對應的 Manager

    每次呼叫都是全新的 store（測試時可以各自隔離）

    參數：
        ball_placer: 開獎器，預設使用 BallPlacer（測試可以換成固定結果）
    """
    table_store = InMemoryTableStore()
    bet_store = InMemoryBetStore()

    logger.info("Initialised in-memory table and bet stores")

    return Managers(
        tables=TableManager(table_store, bet_store, ball_placer=ball_placer),
        bets=BetManager(bet_store, table_store),
    )


def get_table_manager(request: Request) -> TableManager:
    """FastAPI dependency：提供 TableManager"""
    return request.app.state.managers.tables


def get_bet_manager(request: Request) -> BetManager:
    """FastAPI dependency：提供 BetManager"""
    return request.app.state.managers.bets

"""
Bet API Endpoints

職責：
1. 在桌子上下注
2. 查詢下注
"""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
import logging

from database import get_bet_manager
from schemas import BetRequest, BetResponse, adapt_bet_from_domain, adapt_bet_to_domain
from core.bet_manager import BetManager
from core.exceptions import DuplicateKey, NotFound, TableClosed

router = APIRouter(prefix="/v1", tags=["bets"])
logger = logging.getLogger(__name__)


@router.post("/tables/{table_id}/bet", response_model=BetResponse, status_code=201)
def place_bet(
    table_id: UUID,
    bet_request: BetRequest,
    manager: BetManager = Depends(get_bet_manager)
):
    """
    下注（玩家 endpoint）

    前置條件：
    - 桌子必須存在
    - 桌子尚未 Spin（未關閉）

    返回：
        新建立的 Bet（status=unsettled）
    """
    try:
        bet = manager.create(adapt_bet_to_domain(bet_request, table_id))
        logger.info(f"Created bet: {bet.id}")
        return adapt_bet_from_domain(bet)

    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TableClosed as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateKey as e:
        logger.error(f"Failed to create bet on table {table_id}: {e}")
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create bet on table {table_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/bets/{bet_id}", response_model=BetResponse)
def get_bet(bet_id: UUID, manager: BetManager = Depends(get_bet_manager)):
    try:
        return adapt_bet_from_domain(manager.get(bet_id))

    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to get bet {bet_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")

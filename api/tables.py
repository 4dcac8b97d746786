"""
Table API Endpoints

職責：
1. 建立 / 查詢桌子
2. 開獎（Spin）與結算（Settle）
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
import logging

from database import get_table_manager
from schemas import TableResponse, adapt_table_from_domain, adapt_tables_from_domain
from core.table_manager import TableManager
from core.exceptions import NotFound, TableNotSpun, TableOperationFailed

router = APIRouter(prefix="/v1/tables", tags=["tables"])
logger = logging.getLogger(__name__)


def _stage_failure(e: TableOperationFailed, action: str) -> HTTPException:
    """Table 不存在 -> 404，其餘 -> 500"""
    if isinstance(e.__cause__, NotFound):
        return HTTPException(status_code=404, detail=str(e.__cause__))
    logger.error(f"Failed to {action}: {e}", exc_info=True)
    return HTTPException(status_code=500, detail="Internal error")


@router.post("", response_model=TableResponse, status_code=201)
def create_table(manager: TableManager = Depends(get_table_manager)):
    """建立新桌子（狀態 Open）"""
    try:
        table = manager.create()
        return adapt_table_from_domain(table)

    except TableOperationFailed as e:
        raise _stage_failure(e, "create table")
    except Exception as e:
        logger.error(f"Failed to create table: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("", response_model=List[TableResponse])
def list_tables(manager: TableManager = Depends(get_table_manager)):
    """
    列出所有桌子（含 bets）

    沒有任何桌子時回傳空 list
    """
    try:
        return adapt_tables_from_domain(manager.list())

    except TableOperationFailed as e:
        raise _stage_failure(e, "list tables")
    except Exception as e:
        logger.error(f"Failed to list tables: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/{table_id}", response_model=TableResponse)
def get_table(table_id: UUID, manager: TableManager = Depends(get_table_manager)):
    try:
        return adapt_table_from_domain(manager.get(table_id))

    except TableOperationFailed as e:
        raise _stage_failure(e, "get table")
    except Exception as e:
        logger.error(f"Failed to get table: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.put("/{table_id}/spin", response_model=TableResponse)
def spin_table(table_id: UUID, manager: TableManager = Depends(get_table_manager)):
    """
    開獎（Host endpoint）

    效果：
    - 桌子關閉，不再接受下注
    - 所有 bets 轉為 live
    - 抽出 outcome

    注意：
        重複呼叫會重新開獎並覆蓋前一次結果
    """
    try:
        table = manager.spin(table_id)
        logger.info(f"Table has been spun: {table.id}")
        return adapt_table_from_domain(table)

    except TableOperationFailed as e:
        raise _stage_failure(e, "spin table")
    except Exception as e:
        logger.error(f"Failed to spin table: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.put("/{table_id}/settle", response_model=TableResponse)
def settle_table(table_id: UUID, manager: TableManager = Depends(get_table_manager)):
    """
    結算（Host endpoint）

    前置條件：
    - 桌子必須已經開獎

    效果：
    - 所有 bets 轉為 settled，並標記 win
    """
    try:
        table = manager.settle(table_id)
        logger.info(f"Settled table: {table.id}")
        return adapt_table_from_domain(table)

    except TableNotSpun as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TableOperationFailed as e:
        raise _stage_failure(e, "settle table")
    except Exception as e:
        logger.error(f"Failed to settle table: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")

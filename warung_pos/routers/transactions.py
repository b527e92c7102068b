"""
Transaction History Router

Read access to committed checkouts plus the daily sales figure.
"""
from fastapi import APIRouter, HTTPException, Depends, Query

from warung_pos.config import HISTORY_DEFAULT_LIMIT
from warung_pos.errors import ERROR_TRANSACTION_NOT_FOUND
from warung_pos.services.money import format_rupiah
from warung_pos.services.repositories import TransactionRepository
from .deps import get_transaction_repo

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("")
async def list_transactions(
    limit: int = Query(HISTORY_DEFAULT_LIMIT, ge=1),
    show_all: bool = Query(False, alias="all"),
    repo: TransactionRepository = Depends(get_transaction_repo),
):
    """Newest transactions first. ``?all=true`` ignores the limit."""
    records = await repo.list_recent(None if show_all else limit)
    return [r.model_dump(mode="json") for r in records]


@router.get("/summary/today")
async def today_summary(repo: TransactionRepository = Depends(get_transaction_repo)):
    """Number of transactions and total sales for today."""
    summary = await repo.daily_summary()
    return {
        **summary.model_dump(),
        "total_sales_display": format_rupiah(summary.total_sales),
    }


@router.get("/{transaction_id}")
async def get_transaction(
    transaction_id: int,
    repo: TransactionRepository = Depends(get_transaction_repo),
):
    record = await repo.get_by_id(transaction_id)
    if record is None:
        raise HTTPException(status_code=404, detail=ERROR_TRANSACTION_NOT_FOUND)
    return record.model_dump(mode="json")


@router.delete("/{transaction_id}")
async def delete_transaction(
    transaction_id: int,
    repo: TransactionRepository = Depends(get_transaction_repo),
):
    if not await repo.delete(transaction_id):
        raise HTTPException(status_code=404, detail=ERROR_TRANSACTION_NOT_FOUND)
    return {"deleted": transaction_id}

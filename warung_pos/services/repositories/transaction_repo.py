"""Transaction Repository - committed checkouts and sales history."""
import json
from datetime import datetime, time, timedelta, timezone
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from warung_pos.config import (
    HISTORY_DEFAULT_LIMIT,
    RETENTION_DAYS,
    TIMEZONE,
    TRANSACTIONS_TABLE,
)
from warung_pos.logging import get_logger
from warung_pos.services.models import SalesSummary, TransactionItem, TransactionRecord
from .base import BaseRepository

logger = get_logger(__name__)

REGISTER_TZ = ZoneInfo(TIMEZONE)

# Reads are safe to repeat; inserts are not and go out exactly once
_retry_read = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    retry=retry_if_exception_type(httpx.TransportError),
    reraise=True,
)


class TransactionRepository(BaseRepository):
    """Transaction database operations.

    Table layout: id, total_amount, items (JSON text), timestamp (ISO UTC).
    """

    table = TRANSACTIONS_TABLE

    async def record_transaction(
        self,
        total_amount: int,
        items: Sequence[TransactionItem],
    ) -> TransactionRecord:
        """Insert one transaction row and return it as a record.

        Raises:
            ValueError: non-positive total or no items
        """
        if not isinstance(total_amount, int) or total_amount <= 0:
            raise ValueError("total_amount must be a positive integer")
        if not items:
            raise ValueError("items must not be empty")

        data = {
            "total_amount": total_amount,
            "items": json.dumps([item.model_dump(mode="json") for item in items]),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        result = await self.client.table(self.table).insert(data).execute()
        record = TransactionRecord(**result.data[0])
        logger.info(f"Transaction {record.id} saved, total={record.total_amount}")
        return record

    @_retry_read
    async def list_recent(self, limit: Optional[int] = HISTORY_DEFAULT_LIMIT) -> List[TransactionRecord]:
        """Transactions newest first. ``limit=None`` returns everything."""
        query = self.client.table(self.table).select("*").order("timestamp", desc=True)
        if limit is not None:
            query = query.limit(limit)

        result = await query.execute()
        return [TransactionRecord(**row) for row in result.data]

    @_retry_read
    async def get_by_id(self, transaction_id: int) -> Optional[TransactionRecord]:
        """Get transaction by ID."""
        result = await self.client.table(self.table).select("*").eq("id", transaction_id).execute()
        if not result.data:
            logger.info(f"Transaction {transaction_id} not found")
            return None
        return TransactionRecord(**result.data[0])

    @_retry_read
    async def daily_summary(self, day: Optional[datetime] = None) -> SalesSummary:
        """Count and sum of transactions on the register's local calendar day of ``day``.

        Naive datetimes are taken as register-local time.
        """
        day = day or datetime.now(REGISTER_TZ)
        local_day = day.astimezone(REGISTER_TZ).date() if day.tzinfo else day.date()
        start = datetime.combine(local_day, time.min, tzinfo=REGISTER_TZ)
        end = datetime.combine(local_day + timedelta(days=1), time.min, tzinfo=REGISTER_TZ)

        result = await self.client.table(self.table).select("total_amount").gte(
            "timestamp", start.astimezone(timezone.utc).isoformat()
        ).lt("timestamp", end.astimezone(timezone.utc).isoformat()).execute()

        return SalesSummary(
            transaction_count=len(result.data),
            total_sales=sum(int(row["total_amount"]) for row in result.data),
        )

    async def delete(self, transaction_id: int) -> bool:
        """Delete a transaction. Returns False if it did not exist."""
        result = await self.client.table(self.table).delete().eq("id", transaction_id).execute()
        if result.data:
            logger.info(f"Transaction {transaction_id} deleted")
            return True
        logger.info(f"Transaction {transaction_id} not found for delete")
        return False

    async def delete_older_than(self, days: int = RETENTION_DAYS) -> int:
        """Delete transactions older than ``days`` days. Returns the number removed."""
        cutoff = datetime.now(timezone.utc) - timedelta(days=days)
        result = await self.client.table(self.table).delete().lt(
            "timestamp", cutoff.isoformat()
        ).execute()
        removed = len(result.data or [])
        logger.info(f"Removed {removed} transactions older than {days} days")
        return removed

"""
Checkout - commit the cart as a transaction record.

The cart is cleared only after the transaction store confirms the write.
A failed write leaves every line and the total exactly as they were.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence

from warung_pos.errors import (
    CartError,
    EmptyCart,
    PersistenceFailure,
    MESSAGE_CHECKOUT_OK,
)
from warung_pos.logging import get_logger
from warung_pos.services.models import CatalogProduct, TransactionItem, TransactionRecord
from .models import to_transaction_item
from .service import Cart

logger = get_logger(__name__)


class TransactionRecorder(Protocol):
    """Durable store for committed checkouts. Must be all-or-nothing."""

    async def record_transaction(
        self, total_amount: int, items: Sequence[TransactionItem]
    ) -> TransactionRecord: ...


class CatalogLookup(Protocol):
    """Read-only product source used before adding catalog items."""

    async def fetch_catalog_item(self, catalog_id: str) -> Optional[CatalogProduct]: ...


class CheckoutState(str, Enum):
    IDLE = "idle"
    COMMITTING = "committing"


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a checkout, for callers that prefer a value over exceptions."""
    success: bool
    message: str
    record: Optional[TransactionRecord] = None
    error: Optional[CartError] = None


class CheckoutService:
    """
    Runs checkouts for one cart against one transaction store.

    Usage:
        service = CheckoutService(cart, TransactionRepository(client))
        record = await service.checkout()
    """

    def __init__(self, cart: Cart, recorder: TransactionRecorder):
        self.cart = cart
        self.recorder = recorder
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        return self._state

    def snapshot(self) -> tuple[TransactionItem, ...]:
        """Frozen receipt rows for the current cart contents."""
        return tuple(to_transaction_item(item) for item in self.cart.items)

    async def checkout(self) -> TransactionRecord:
        """
        Commit the cart.

        Raises:
            EmptyCart: nothing to commit; no I/O is attempted
            CheckoutInProgress: another checkout holds the cart
            PersistenceFailure: the store failed; the cart is unchanged
        """
        if self.cart.is_empty:
            raise EmptyCart()

        with self.cart.checkout_lock():
            items = self.snapshot()
            total_amount = self.cart.total_amount
            self._state = CheckoutState.COMMITTING
            logger.info(f"Checkout started: {len(items)} lines, total={total_amount}")
            try:
                record = await self.recorder.record_transaction(total_amount, items)
            except Exception as e:
                logger.error(f"Checkout failed, cart kept: {e}", exc_info=True)
                raise PersistenceFailure(e) from e
            finally:
                self._state = CheckoutState.IDLE

        # No await between the lock release and clear(); nothing can interleave
        self.cart.clear()
        logger.info(f"Checkout committed: transaction {record.id}")
        return record

    async def checkout_result(self) -> CheckoutResult:
        """Like checkout(), but reports cart errors as a CheckoutResult."""
        try:
            record = await self.checkout()
        except CartError as e:
            return CheckoutResult(success=False, message=str(e), error=e)
        return CheckoutResult(success=True, message=MESSAGE_CHECKOUT_OK, record=record)

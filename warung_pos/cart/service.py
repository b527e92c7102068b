"""Cart aggregate: line items with merge-by-identity and a derived total."""
from contextlib import contextmanager
from dataclasses import replace
from typing import Callable, Iterator, List, Optional

from warung_pos.errors import CheckoutInProgress, InvalidQuantity
from warung_pos.logging import (
    get_logger,
    sanitize_id_for_logging,
    sanitize_string_for_logging,
)
from warung_pos.services.money import ensure_amount, format_rupiah, total
from .models import (
    AdHocItem,
    CatalogItem,
    LineItem,
    ad_hoc_identity,
    catalog_identity,
    describe,
    ensure_catalog_fields,
    identity_of,
)

logger = get_logger(__name__)


class Cart:
    """
    In-memory shopping cart for a single register.

    Features:
    - Ad-hoc (quick-price) and catalog items
    - Repeat additions merge into the existing line
    - Total recomputed after every mutation
    - Locked while a checkout is in flight

    Usage:
        cart = Cart()
        cart.add_ad_hoc(1000)
        cart.add_catalog_item("p1", "Tea", 4000)
        cart.total_amount  # 5000
    """

    def __init__(self):
        self._items: List[LineItem] = []
        self._total_amount = 0
        self._locked = False

    # ==================== READ SIDE ====================

    @property
    def items(self) -> tuple[LineItem, ...]:
        """Line items in insertion order. Items are frozen; use the commands to change them."""
        return tuple(self._items)

    @property
    def total_amount(self) -> int:
        return self._total_amount

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def total_quantity(self) -> int:
        """Number of units across all lines."""
        return sum(item.quantity for item in self._items)

    @property
    def is_locked(self) -> bool:
        return self._locked

    def get(self, identity: str) -> Optional[LineItem]:
        index = self._index_of(identity)
        return self._items[index] if index is not None else None

    def summary(self) -> dict:
        """Display-ready view of the cart."""
        return {
            "is_empty": self.is_empty,
            "total_quantity": self.total_quantity,
            "items": [
                {
                    "identity": item.identity,
                    "kind": item.kind.value,
                    "description": describe(item),
                    "unit_price": item.unit_price,
                    "quantity": item.quantity,
                    "subtotal": item.subtotal,
                    "subtotal_display": format_rupiah(item.subtotal),
                }
                for item in self._items
            ],
            "total_amount": self._total_amount,
            "total_display": format_rupiah(self._total_amount),
            "is_locked": self._locked,
        }

    # ==================== COMMANDS ====================

    def add_ad_hoc(self, unit_price: int) -> LineItem:
        """Add one unit at the given price, merging with an existing line of the same price."""
        self._ensure_unlocked()
        ensure_amount(unit_price)

        item = self._merge_or_append(ad_hoc_identity(unit_price), lambda: AdHocItem(unit_price=unit_price))
        logger.debug(f"Ad-hoc {unit_price} added, qty={item.quantity}")
        return item

    def add_catalog_item(self, catalog_id: str, display_name: str, unit_price: int) -> LineItem:
        """Add one unit of a catalog product, merging by catalog id."""
        self._ensure_unlocked()
        ensure_catalog_fields(catalog_id, display_name)
        ensure_amount(unit_price)

        item = self._merge_or_append(
            catalog_identity(catalog_id),
            lambda: CatalogItem(
                catalog_id=catalog_id,
                display_name=display_name,
                unit_price=unit_price,
            ),
        )
        logger.debug(
            f"Catalog item {sanitize_id_for_logging(catalog_id)} "
            f"({sanitize_string_for_logging(display_name)}) added, qty={item.quantity}"
        )
        return item

    def increment(self, identity: str) -> Optional[LineItem]:
        """Add one more unit of an existing line through the regular add path."""
        self._ensure_unlocked()
        item = self.get(identity)
        if item is None:
            return None

        if isinstance(item, AdHocItem):
            return self.add_ad_hoc(item.unit_price)
        return self.add_catalog_item(item.catalog_id, item.display_name, item.unit_price)

    def decrement(self, identity: str) -> Optional[LineItem]:
        """
        Remove one unit. The line disappears when its quantity reaches zero.

        Returns the line if it is still in the cart, None otherwise.
        """
        self._ensure_unlocked()
        index = self._index_of(identity)
        if index is None:
            return None

        item = self._items[index]
        if item.quantity <= 1:
            del self._items[index]
            item = None
        else:
            item = replace(item, quantity=item.quantity - 1)
            self._items[index] = item

        self._recalculate()
        logger.debug(f"Decremented {sanitize_id_for_logging(identity)}")
        return item

    def set_quantity(self, identity: str, new_quantity: int) -> Optional[LineItem]:
        """Overwrite a line's quantity; anything below 1 removes the line."""
        self._ensure_unlocked()
        if not isinstance(new_quantity, int) or isinstance(new_quantity, bool):
            raise InvalidQuantity()

        if new_quantity < 1:
            self.remove(identity)
            return None

        index = self._index_of(identity)
        if index is None:
            return None

        item = replace(self._items[index], quantity=new_quantity)
        self._items[index] = item
        self._recalculate()
        return item

    def remove(self, identity: str) -> bool:
        """Drop a line regardless of its quantity."""
        self._ensure_unlocked()
        index = self._index_of(identity)
        if index is None:
            return False

        del self._items[index]
        self._recalculate()
        logger.debug(f"Removed {sanitize_id_for_logging(identity)}")
        return True

    def clear(self) -> None:
        """Empty the cart."""
        self._ensure_unlocked()
        self._items = []
        self._recalculate()
        logger.debug("Cart cleared")

    # ==================== CHECKOUT GUARD ====================

    @contextmanager
    def checkout_lock(self) -> Iterator["Cart"]:
        """
        Hold the cart read-only for the duration of a checkout.

        Mutations (and a second checkout) raise CheckoutInProgress until the
        block exits, whatever the outcome.
        """
        self._ensure_unlocked()
        self._locked = True
        try:
            yield self
        finally:
            self._locked = False

    # ==================== INTERNALS ====================

    def _index_of(self, identity: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if identity_of(item) == identity:
                return index
        return None

    def _ensure_unlocked(self) -> None:
        if self._locked:
            raise CheckoutInProgress()

    def _recalculate(self) -> None:
        self._total_amount = total(self._items)

    def _merge_or_append(self, identity: str, build: Callable[[], LineItem]) -> LineItem:
        """Bump the line with this identity in place, or append a new one."""
        index = self._index_of(identity)
        if index is None:
            item = build()
            self._items.append(item)
        else:
            item = replace(self._items[index], quantity=self._items[index].quantity + 1)
            self._items[index] = item
        self._recalculate()
        return item

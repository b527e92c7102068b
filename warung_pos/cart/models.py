"""Cart line items: ad-hoc quick-price items and catalog products."""
from dataclasses import dataclass
from typing import ClassVar, Union

from warung_pos.config import AD_HOC_LABEL, CURRENCY_PREFIX
from warung_pos.errors import (
    InvalidLineItem,
    ERROR_INVALID_CATALOG_ID,
    ERROR_INVALID_DISPLAY_NAME,
)
from warung_pos.services.models import LineItemKind, TransactionItem
from warung_pos.services.money import ensure_amount, ensure_quantity, subtotal


def ad_hoc_identity(unit_price: int) -> str:
    return f"{LineItemKind.AD_HOC.value}:{unit_price}"


def catalog_identity(catalog_id: str) -> str:
    return f"{LineItemKind.CATALOG.value}:{catalog_id}"


def ensure_catalog_fields(catalog_id, display_name) -> None:
    """Raise InvalidLineItem unless both are usable strings."""
    if not catalog_id or not isinstance(catalog_id, str):
        raise InvalidLineItem(ERROR_INVALID_CATALOG_ID)
    if not isinstance(display_name, str) or not display_name.strip():
        raise InvalidLineItem(ERROR_INVALID_DISPLAY_NAME)


@dataclass(frozen=True)
class AdHocItem:
    """Quick-price item: only a price, no catalog record behind it."""
    unit_price: int
    quantity: int = 1

    kind: ClassVar[LineItemKind] = LineItemKind.AD_HOC

    def __post_init__(self):
        ensure_amount(self.unit_price)
        ensure_quantity(self.quantity)

    @property
    def identity(self) -> str:
        return ad_hoc_identity(self.unit_price)

    @property
    def subtotal(self) -> int:
        return subtotal(self.unit_price, self.quantity)


@dataclass(frozen=True)
class CatalogItem:
    """Item referencing a product from the catalog."""
    catalog_id: str
    display_name: str
    unit_price: int
    quantity: int = 1

    kind: ClassVar[LineItemKind] = LineItemKind.CATALOG

    def __post_init__(self):
        ensure_catalog_fields(self.catalog_id, self.display_name)
        ensure_amount(self.unit_price)
        ensure_quantity(self.quantity)

    @property
    def identity(self) -> str:
        return catalog_identity(self.catalog_id)

    @property
    def subtotal(self) -> int:
        return subtotal(self.unit_price, self.quantity)


LineItem = Union[AdHocItem, CatalogItem]


def identity_of(item: LineItem) -> str:
    """Merge key: two additions with the same identity share one line."""
    if isinstance(item, AdHocItem):
        return ad_hoc_identity(item.unit_price)
    if isinstance(item, CatalogItem):
        return catalog_identity(item.catalog_id)
    raise TypeError(f"Unknown line item type: {type(item).__name__}")


def describe(item: LineItem) -> str:
    """Receipt label for a line."""
    if isinstance(item, AdHocItem):
        return f"{AD_HOC_LABEL} {CURRENCY_PREFIX}{item.unit_price}"
    if isinstance(item, CatalogItem):
        return item.display_name
    raise TypeError(f"Unknown line item type: {type(item).__name__}")


def to_transaction_item(item: LineItem) -> TransactionItem:
    """Freeze a line into a receipt row."""
    return TransactionItem(
        kind=item.kind,
        description=describe(item),
        unit_price=item.unit_price,
        quantity=item.quantity,
        subtotal=item.subtotal,
    )

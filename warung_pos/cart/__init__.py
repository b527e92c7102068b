"""Cart package: line items, the cart aggregate, and checkout."""
from .models import AdHocItem, CatalogItem, LineItem, identity_of, describe
from .service import Cart
from .checkout import (
    CatalogLookup,
    CheckoutResult,
    CheckoutService,
    CheckoutState,
    TransactionRecorder,
)

__all__ = [
    "AdHocItem",
    "CatalogItem",
    "LineItem",
    "identity_of",
    "describe",
    "Cart",
    "CatalogLookup",
    "CheckoutResult",
    "CheckoutService",
    "CheckoutState",
    "TransactionRecorder",
]

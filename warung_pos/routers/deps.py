"""
Shared Dependencies for Routers

The register owns one cart per process; repositories wrap the shared
Supabase client. Tests swap any of these through
``app.dependency_overrides``.
"""

from typing import Optional

from warung_pos.cart import Cart, CheckoutService
from warung_pos.db import get_supabase
from warung_pos.services.repositories import ProductRepository, TransactionRepository


_cart: Optional[Cart] = None
_checkout_service: Optional[CheckoutService] = None


def get_cart() -> Cart:
    """Get or create the register's cart."""
    global _cart
    if _cart is None:
        _cart = Cart()
    return _cart


async def get_transaction_repo() -> TransactionRepository:
    return TransactionRepository(await get_supabase())


async def get_product_repo() -> ProductRepository:
    return ProductRepository(await get_supabase())


async def get_checkout_service() -> CheckoutService:
    """Get or create the checkout service bound to the register's cart."""
    global _checkout_service
    if _checkout_service is None:
        _checkout_service = CheckoutService(get_cart(), await get_transaction_repo())
    return _checkout_service


def reset_register() -> None:
    """Drop the cart and checkout service (new shift, tests)."""
    global _cart, _checkout_service
    _cart = None
    _checkout_service = None

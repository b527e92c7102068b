"""HTTP routers for the register."""
from .cart import router as cart_router
from .products import router as products_router
from .transactions import router as transactions_router

__all__ = ["cart_router", "products_router", "transactions_router"]

"""
Repository Pattern for Database Operations

- TransactionRepository: committed checkouts, history, daily sales
- ProductRepository: read-only catalog lookups
"""
from .transaction_repo import TransactionRepository
from .product_repo import ProductRepository

__all__ = [
    "TransactionRepository",
    "ProductRepository",
]

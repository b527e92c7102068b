# Services Module
from .models import CatalogProduct, SalesSummary, TransactionItem, TransactionRecord
from .repositories import ProductRepository, TransactionRepository

__all__ = [
    "CatalogProduct",
    "SalesSummary",
    "TransactionItem",
    "TransactionRecord",
    "ProductRepository",
    "TransactionRepository",
]

"""
Catalog Router

Active products for the register screen, searchable by name so the cashier
can find the catalog id to add.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from warung_pos.services.money import format_rupiah
from warung_pos.services.repositories import ProductRepository
from .deps import get_product_repo

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    repo: ProductRepository = Depends(get_product_repo),
):
    """Active products sorted by name."""
    products = await repo.list_active(search=search, category=category)
    return [
        {**p.model_dump(), "price_display": format_rupiah(p.price)}
        for p in products
    ]

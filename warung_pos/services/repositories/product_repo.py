"""Product Repository - read-only catalog lookups."""
from typing import List, Optional

from warung_pos.config import PRODUCTS_TABLE
from warung_pos.services.models import CatalogProduct
from .base import BaseRepository


class ProductRepository(BaseRepository):
    """Catalog reads used by the register before adding catalog items."""

    table = PRODUCTS_TABLE

    async def fetch_catalog_item(self, catalog_id: str) -> Optional[CatalogProduct]:
        """Get an active product by ID, or None."""
        result = await self.client.table(self.table).select("*").eq(
            "id", catalog_id
        ).eq("is_active", True).execute()
        return CatalogProduct(**result.data[0]) if result.data else None

    async def list_active(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[CatalogProduct]:
        """Active products sorted by name, optionally filtered by name and category."""
        query = self.client.table(self.table).select("*").eq("is_active", True)
        if search:
            query = query.ilike("name", f"%{search.strip()}%")
        if category:
            query = query.eq("category", category)

        result = await query.order("name").execute()
        return [CatalogProduct(**p) for p in result.data]

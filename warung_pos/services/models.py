"""Database Models - Pydantic models for persisted entities."""
import json
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class LineItemKind(str, Enum):
    """Discriminator for cart line items and their receipt rows."""
    AD_HOC = "ad_hoc"
    CATALOG = "catalog"


class TransactionItem(BaseModel):
    """One frozen receipt row inside a transaction."""
    model_config = ConfigDict(frozen=True)

    kind: LineItemKind
    description: str
    unit_price: int
    quantity: int
    subtotal: int


class TransactionRecord(BaseModel):
    """A committed checkout. Owned by the transaction store once created."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    total_amount: int
    items: tuple[TransactionItem, ...]
    timestamp: datetime

    @field_validator("items", mode="before")
    @classmethod
    def decode_items(cls, v):
        # Rows carry items as JSON text
        if isinstance(v, str):
            return json.loads(v)
        return v


class SalesSummary(BaseModel):
    """Aggregate sales for a period."""
    transaction_count: int = 0
    total_sales: int = 0


class CatalogProduct(BaseModel):
    """A product as the catalog exposes it to the register."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    price: int
    category: Optional[str] = None
    is_active: bool = True

    @field_validator("id", mode="before")
    @classmethod
    def convert_id_to_str(cls, v):
        return str(v)

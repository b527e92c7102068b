"""
Register API Pydantic Models

Request bodies for the cart and history endpoints.
"""
from pydantic import BaseModel


# ==================== CART MODELS ====================

class AddAdHocRequest(BaseModel):
    unit_price: int


class AddCatalogItemRequest(BaseModel):
    catalog_id: str


class SetQuantityRequest(BaseModel):
    quantity: int  # below 1 removes the line

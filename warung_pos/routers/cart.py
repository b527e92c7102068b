"""
Register Cart Router

Cart commands and checkout. Every response carries the cart summary so the
screen can redraw from a single payload.
"""
from fastapi import APIRouter, HTTPException, Depends

from warung_pos.cart import Cart, CatalogLookup, CheckoutService
from warung_pos.errors import (
    CheckoutInProgress,
    EmptyCart,
    InvalidLineItem,
    InvalidQuantity,
    PersistenceFailure,
    ERROR_PRODUCT_NOT_FOUND,
    MESSAGE_CHECKOUT_OK,
)
from warung_pos.logging import get_logger, sanitize_id_for_logging
from .deps import get_cart, get_checkout_service, get_product_repo
from .models import AddAdHocRequest, AddCatalogItemRequest, SetQuantityRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


def _apply(command, *args):
    """Run a cart command, mapping cart errors to HTTP errors."""
    try:
        return command(*args)
    except (InvalidLineItem, InvalidQuantity) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CheckoutInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("")
async def get_register_cart(cart: Cart = Depends(get_cart)):
    """Current cart contents and total."""
    return cart.summary()


@router.post("/ad-hoc")
async def add_ad_hoc(request: AddAdHocRequest, cart: Cart = Depends(get_cart)):
    """Add one quick-price item."""
    _apply(cart.add_ad_hoc, request.unit_price)
    return cart.summary()


@router.post("/catalog")
async def add_catalog_item(
    request: AddCatalogItemRequest,
    cart: Cart = Depends(get_cart),
    products: CatalogLookup = Depends(get_product_repo),
):
    """Look a product up in the catalog and add one unit of it."""
    product = await products.fetch_catalog_item(request.catalog_id)
    if product is None:
        logger.warning(f"Catalog item {sanitize_id_for_logging(request.catalog_id)} not found")
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    _apply(cart.add_catalog_item, product.id, product.name, product.price)
    return cart.summary()


@router.post("/items/{identity}/increment")
async def increment_item(identity: str, cart: Cart = Depends(get_cart)):
    _apply(cart.increment, identity)
    return cart.summary()


@router.post("/items/{identity}/decrement")
async def decrement_item(identity: str, cart: Cart = Depends(get_cart)):
    _apply(cart.decrement, identity)
    return cart.summary()


@router.put("/items/{identity}")
async def set_item_quantity(
    identity: str,
    request: SetQuantityRequest,
    cart: Cart = Depends(get_cart),
):
    """Set a line's quantity directly (0 removes it)."""
    _apply(cart.set_quantity, identity, request.quantity)
    return cart.summary()


@router.delete("/items/{identity}")
async def remove_item(identity: str, cart: Cart = Depends(get_cart)):
    _apply(cart.remove, identity)
    return cart.summary()


@router.post("/checkout")
async def checkout(service: CheckoutService = Depends(get_checkout_service)):
    """
    Commit the cart as a transaction.

    On a storage failure the cart is kept and 502 is returned; the cashier
    can retry the same checkout.
    """
    try:
        record = await service.checkout()
    except EmptyCart as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CheckoutInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PersistenceFailure as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "message": MESSAGE_CHECKOUT_OK,
        "transaction": record.model_dump(mode="json"),
        "cart": service.cart.summary(),
    }

"""
Cart Errors

Exception taxonomy for cart mutations and checkout, plus the user-facing
messages shared by the cart core and the HTTP layer.
"""

# User-facing messages
ERROR_INVALID_AMOUNT = "Price must be a positive whole number"
ERROR_INVALID_QUANTITY = "Quantity must be a positive whole number"
ERROR_INVALID_CATALOG_ID = "Catalog id must be a non-empty string"
ERROR_INVALID_DISPLAY_NAME = "Product name must be a non-empty string"
ERROR_EMPTY_CART = "Cart is empty"
ERROR_CHECKOUT_IN_PROGRESS = "Checkout already in progress"
ERROR_PERSISTENCE_FAILED = "Failed to save transaction"
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_TRANSACTION_NOT_FOUND = "Transaction not found"

# Success messages
MESSAGE_CHECKOUT_OK = "Transaction saved"


class CartError(Exception):
    """Base class for everything the cart core rejects."""

    message = "Cart error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidLineItem(CartError, ValueError):
    """Line item cannot be built from the given fields."""

    message = "Invalid line item"


class InvalidAmount(InvalidLineItem):
    """Non-positive or non-integer price."""

    message = ERROR_INVALID_AMOUNT


class InvalidQuantity(CartError, ValueError):
    """Non-positive or non-integer quantity."""

    message = ERROR_INVALID_QUANTITY


class EmptyCart(CartError):
    """Checkout attempted with no items."""

    message = ERROR_EMPTY_CART


class CheckoutInProgress(CartError):
    """Cart is locked by an in-flight checkout."""

    message = ERROR_CHECKOUT_IN_PROGRESS


class PersistenceFailure(CartError):
    """The transaction store failed; the cart was left intact.

    The underlying exception is kept on ``cause`` and chained as
    ``__cause__``.
    """

    message = ERROR_PERSISTENCE_FAILED

    def __init__(self, cause: BaseException, message: str | None = None):
        self.cause = cause
        super().__init__(message or f"{self.message}: {cause}")

"""
Warung POS - point-of-sale cart engine.

    from warung_pos.cart import Cart, CheckoutService
"""

__version__ = "0.1.0"

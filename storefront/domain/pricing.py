# storefront/domain/pricing.py
"""
Cart totals.

Money is Decimal. Every result is quantized to cents with banker's rounding
(ROUND_HALF_EVEN), line totals and the cart total alike.
"""
from decimal import Decimal, ROUND_HALF_EVEN

from storefront.domain.entities import Cart, CartItem
from storefront.domain.errors import InvalidState

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_EVEN)


def line_total(item: CartItem) -> Decimal:
    if item.product is None:
        raise InvalidState(f"Cart item {item.id} has no product")
    return to_money(item.product.price * item.quantity)


def cart_total(cart: Cart) -> Decimal:
    total = sum((line_total(i) for i in cart.items), ZERO)
    return to_money(total)

from decimal import Decimal

from storefront.domain.entities import CartItem, Product


def money(value) -> Decimal:
    return Decimal(str(value))


def make_item(product: Product, quantity: int = 1) -> CartItem:
    return CartItem(product=product, quantity=quantity)

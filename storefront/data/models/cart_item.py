# storefront/data/models/cart_item.py
import uuid

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin


class CartItemModel(TimestampMixin, Base):
    __tablename__ = "cart_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    cart_id = Column(Uuid, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    cart = relationship("CartModel", back_populates="items")
    product = relationship("ProductModel")

    __table_args__ = (UniqueConstraint("cart_id", "product_id", name="u_cart_product"),)

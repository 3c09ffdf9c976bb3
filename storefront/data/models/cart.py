# storefront/data/models/cart.py
import uuid

from sqlalchemy import Column, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin


class CartModel(TimestampMixin, Base):
    __tablename__ = "carts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.created_at",
    )

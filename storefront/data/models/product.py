# storefront/data/models/product.py
import uuid

from sqlalchemy import Column, ForeignKey, Numeric, String, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin


class ProductModel(TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(String(255), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)

    category = relationship("CategoryModel", back_populates="products")

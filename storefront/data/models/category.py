# storefront/data/models/category.py
import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin


class CategoryModel(TimestampMixin, Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)

    #inverse side, no cascade
    products = relationship("ProductModel", back_populates="category")

# storefront/data/models/tag.py
import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin
from storefront.data.models.user import user_tags


class TagModel(TimestampMixin, Base):
    __tablename__ = "tags"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(String(255), nullable=True)

    users = relationship("UserModel", secondary=user_tags, back_populates="tags")

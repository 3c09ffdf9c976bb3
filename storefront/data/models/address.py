# storefront/data/models/address.py
import uuid

from sqlalchemy import Column, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin


class AddressModel(TimestampMixin, Base):
    __tablename__ = "addresses"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    zip = Column(String(10), nullable=False)
    #keeps the user's address list ordered
    position = Column(Integer, nullable=False, default=0)

    user = relationship("UserModel", back_populates="addresses")

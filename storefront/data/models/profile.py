# storefront/data/models/profile.py
import uuid

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin


class ProfileModel(TimestampMixin, Base):
    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    bio = Column(String(255), nullable=True)
    phone_number = Column(String(255), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    loyalty_points = Column(Integer, nullable=False, default=0)

    user = relationship("UserModel", back_populates="profile")

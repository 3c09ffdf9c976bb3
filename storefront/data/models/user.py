# storefront/data/models/user.py
import uuid

from sqlalchemy import Column, ForeignKey, String, Table, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.base import TimestampMixin

user_tags = Table(
    "user_tags",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

wishlists = Table(
    "wishlists",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("product_id", Uuid, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
)


class UserModel(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)

    addresses = relationship(
        "AddressModel",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="AddressModel.position",
    )
    profile = relationship(
        "ProfileModel",
        back_populates="user",
        cascade="all, delete-orphan",
        uselist=False,
    )
    tags = relationship("TagModel", secondary=user_tags, back_populates="users")
    favorite_products = relationship("ProductModel", secondary=wishlists)

import uuid
from sqlalchemy import (
    CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, Uuid
)
from sqlalchemy.orm import relationship
from app.core.database import Base, utcnow


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("available_quantity >= 0", name="ck_products_available_quantity"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    # Precio en la unidad mínima de la moneda (centavos)
    price = Column(Integer, nullable=False)
    available_quantity = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
    deleted_at = Column(DateTime, nullable=True)

    features = relationship(
        "ProductFeature",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductFeature.position",
        lazy="selectin",
    )
    images = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.position",
        lazy="selectin",
    )
    order_items = relationship("OrderItem", back_populates="product")


class ProductFeature(Base):
    __tablename__ = "product_features"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(100), nullable=False)
    description = Column(String(255), nullable=False)

    product = relationship("Product", back_populates="features")


class ProductImage(Base):
    __tablename__ = "product_images"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    url = Column(String(255), nullable=False)
    description = Column(String(255), nullable=False)

    product = relationship("Product", back_populates="images")

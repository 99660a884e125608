"""
Product model.
"""

from sqlalchemy import (
    Column,
    Integer,
    Float,
    Text,
    TIMESTAMP,
    Enum as SQLEnum,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship, foreign
from sqlalchemy.sql import func

from domain.enums import Category
from domain.models.database import Base
from domain.models.ingredient import Ingredient


class Product(Base):
    """Catalog product, owning its ingredients through product_reference"""

    __tablename__ = "product"

    product_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(SQLEnum(Category, name="product_category"), nullable=False)
    product_reference = Column(Text, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Read-only: ingredient rows are written and deleted through the repository
    ingredients = relationship(
        Ingredient,
        primaryjoin=lambda: Product.product_reference == foreign(Ingredient.product_reference),
        viewonly=True,
        order_by=lambda: Ingredient.ingredient_id,
    )

    __table_args__ = (
        UniqueConstraint("product_reference", name="uq_product_reference"),
    )

    def __repr__(self):
        return (
            f"<Product(id={self.product_id}, name='{self.name}', "
            f"product_reference='{self.product_reference}')>"
        )

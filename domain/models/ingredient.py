"""
Ingredient model - constituent rows of a product.
"""

from sqlalchemy import Column, Integer, Float, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


class Ingredient(Base):
    """
    Ingredient of a product.

    The owning product is identified by product_reference, a copy of the
    product's token rather than a foreign key.
    """

    __tablename__ = "ingredient"

    ingredient_id = Column(Integer, primary_key=True, autoincrement=True)
    product_reference = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self):
        return (
            f"<Ingredient(id={self.ingredient_id}, name='{self.name}', "
            f"product_reference='{self.product_reference}')>"
        )

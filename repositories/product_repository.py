"""
Product Repository - Data access layer for products
"""

from typing import Optional
from sqlalchemy.orm import Session

from domain.models import Product
from repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for product data access"""

    search_fields = ("name", "quantity", "price", "category", "product_reference")

    def __init__(self, db: Session):
        super().__init__(db, Product)

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        with self.storage_errors("get"):
            return (
                self.db.query(Product)
                .filter(Product.product_id == product_id)
                .first()
            )

    def get_by_product_reference(self, product_reference: str) -> Optional[Product]:
        """Get the product carrying a product reference"""
        with self.storage_errors("get"):
            return (
                self.db.query(Product)
                .filter(Product.product_reference == product_reference)
                .first()
            )

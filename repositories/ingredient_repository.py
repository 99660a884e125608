"""
Ingredient Repository - Data access layer for ingredient rows
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from domain.models import Ingredient
from repositories.base import BaseRepository


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredients, addressed by ID or by product reference"""

    search_fields = ("product_reference", "name", "quantity", "price")

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def get_by_id(self, ingredient_id: int) -> Optional[Ingredient]:
        """Get ingredient by ID"""
        with self.storage_errors("get"):
            return (
                self.db.query(Ingredient)
                .filter(Ingredient.ingredient_id == ingredient_id)
                .first()
            )

    def get_by_product_reference(self, product_reference: str) -> List[Ingredient]:
        """Get all ingredients linked to a product reference"""
        with self.storage_errors("list"):
            return (
                self.db.query(Ingredient)
                .filter(Ingredient.product_reference == product_reference)
                .order_by(Ingredient.ingredient_id)
                .all()
            )

    def delete_by_product_reference(
        self, product_reference: str, commit: bool = True
    ) -> int:
        """Bulk delete all ingredients linked to a product reference

        Returns:
            Number of deleted rows
        """
        with self.storage_errors("delete"):
            count = (
                self.db.query(Ingredient)
                .filter(Ingredient.product_reference == product_reference)
                .delete(synchronize_session=False)
            )
            if commit:
                self.db.commit()
        return count

    def reassign_product_reference(
        self, old_reference: str, new_reference: str, commit: bool = True
    ) -> int:
        """Re-stamp every ingredient of old_reference with new_reference

        Returns:
            Number of updated rows
        """
        with self.storage_errors("update"):
            count = (
                self.db.query(Ingredient)
                .filter(Ingredient.product_reference == old_reference)
                .update(
                    {Ingredient.product_reference: new_reference},
                    synchronize_session=False,
                )
            )
            if commit:
                self.db.commit()
        return count

"""Ingredient service - listing, search and partial updates of ingredient rows."""

from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Ingredient
from domain.schemas.ingredient_schemas import IngredientUpdate, IngredientSearch
from repositories import IngredientRepository, ProductRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("products.ingredient")

INGREDIENT_UPDATE_FIELDS = ("product_reference", "name", "quantity", "price")


class IngredientService:
    """Business logic for ingredient rows."""

    @staticmethod
    def list_ingredients(db: Session) -> List[Ingredient]:
        return IngredientRepository(db).get_all()

    @staticmethod
    def update_ingredient(
        db: Session, ingredient_id: int, payload: IngredientUpdate
    ) -> Ingredient:
        """
        Partially update an ingredient: only non-null fields overwrite.

        Moving an ingredient to another product_reference is allowed only if
        some product carries that reference, so no ingredient is orphaned.

        Raises:
            NotFoundError: unknown ingredient_id
            ServiceValidationError: product_reference matches no product
        """
        ingredient_repo = IngredientRepository(db)
        ingredient = ingredient_repo.get_by_id(ingredient_id)
        if ingredient is None:
            raise NotFoundError(f"Ingredient {ingredient_id} not found")

        changes = payload.model_dump(exclude_none=True)
        new_reference = changes.get("product_reference")
        if (
            new_reference is not None
            and new_reference != ingredient.product_reference
            and ProductRepository(db).get_by_product_reference(new_reference) is None
        ):
            raise ServiceValidationError(
                f"No product with reference {new_reference}",
                details={"field": "product_reference"},
            )

        for field in INGREDIENT_UPDATE_FIELDS:
            if field in changes:
                setattr(ingredient, field, changes[field])

        ingredient = ingredient_repo.save(ingredient)
        logger.info(f"Updated ingredient {ingredient_id}: {sorted(changes)}")
        return ingredient

    @staticmethod
    def search_ingredients(db: Session, filters: IngredientSearch) -> List[Ingredient]:
        """Ingredients matching every supplied filter exactly"""
        return IngredientRepository(db).search(**filters.model_dump())

"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.product_schemas import (
    IngredientCreate,
    ProductCreate,
    ProductUpdate,
    ProductSearch,
    ProductResponse,
)
from domain.schemas.ingredient_schemas import (
    IngredientUpdate,
    IngredientSearch,
    IngredientResponse,
)

__all__ = [
    # Product schemas
    "IngredientCreate",
    "ProductCreate",
    "ProductUpdate",
    "ProductSearch",
    "ProductResponse",
    # Ingredient schemas
    "IngredientUpdate",
    "IngredientSearch",
    "IngredientResponse",
]

"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.product_repository import ProductRepository
from repositories.ingredient_repository import IngredientRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "IngredientRepository",
]

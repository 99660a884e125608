"""Services package - Business logic layer"""

from services.product_service import ProductService
from services.ingredient_service import IngredientService

# Note: reference_generator contains a utility function, not a class

__all__ = [
    "ProductService",
    "IngredientService",
]

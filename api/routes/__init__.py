"""API routes package"""

from . import products, ingredients, health

__all__ = ["products", "ingredients", "health"]

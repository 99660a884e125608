"""
Domain enums for the product catalog.
Contains all enumeration types used across the domain models.
"""

import enum


class Category(str, enum.Enum):
    """Product categories"""

    FOOD = "FOOD"
    DRINK = "DRINK"
    DESSERT = "DESSERT"
    SNACK = "SNACK"
    OTHER = "OTHER"

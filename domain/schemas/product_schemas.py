from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from domain.enums import Category


class IngredientCreate(BaseModel):
    """Ingredient entry of a product creation payload.

    Fields are optional here; ProductService.validate_product_payload decides
    which missing values are rejected.
    """

    name: Optional[str] = Field(None, description="Ingredient name")
    quantity: Optional[int] = Field(None, description="Ingredient quantity")
    price: Optional[float] = Field(None, description="Ingredient unit price")


class ProductCreate(BaseModel):
    """Schema for creating a product together with its ingredients"""

    name: Optional[str] = Field(None, description="Product name")
    quantity: Optional[int] = Field(None, description="Quantity in stock")
    price: Optional[float] = Field(None, description="Unit price")
    category: Optional[Category] = Field(None, description="Product category")
    ingredients: Optional[List[IngredientCreate]] = Field(
        default=None, description="Ingredients stamped with the new product reference"
    )


class ProductUpdate(BaseModel):
    """Partial update: only non-null fields overwrite stored values"""

    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None
    category: Optional[Category] = None
    product_reference: Optional[str] = None


class ProductSearch(BaseModel):
    """Exact-match search filters; unset fields impose no constraint"""

    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None
    category: Optional[Category] = None
    product_reference: Optional[str] = None


class ProductResponse(BaseModel):
    """Schema for product response"""

    product_id: int
    name: str
    quantity: int
    price: float
    category: Category
    product_reference: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

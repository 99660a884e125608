from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class IngredientUpdate(BaseModel):
    """Partial update: only non-null fields overwrite stored values"""

    product_reference: Optional[str] = None
    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None


class IngredientSearch(BaseModel):
    """Exact-match search filters; unset fields impose no constraint"""

    product_reference: Optional[str] = None
    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None


class IngredientResponse(BaseModel):
    """Schema for ingredient response"""

    ingredient_id: int
    product_reference: str
    name: str
    quantity: int
    price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

"""Ingredient routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_db
from api.responses import BAD_REQUEST_RESPONSE, NOT_FOUND_RESPONSE
from domain.schemas.ingredient_schemas import (
    IngredientUpdate,
    IngredientSearch,
    IngredientResponse,
)
from services.ingredient_service import IngredientService

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])
logger = logging.getLogger("products.api.ingredients")


@router.get("", response_model=List[IngredientResponse])
def get_ingredients(db: Session = Depends(get_db)):
    """List all ingredients"""
    ingredients = IngredientService.list_ingredients(db)
    return [IngredientResponse.model_validate(i) for i in ingredients]


@router.api_route(
    "/search", methods=["GET", "PUT"], response_model=List[IngredientResponse]
)
def search_ingredients(
    product_reference: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    quantity: Optional[int] = Query(None),
    price: Optional[float] = Query(None),
    db: Session = Depends(get_db),
):
    """Search ingredients by exact match on every supplied filter"""
    filters = IngredientSearch(
        product_reference=product_reference,
        name=name,
        quantity=quantity,
        price=price,
    )
    ingredients = IngredientService.search_ingredients(db, filters)
    return [IngredientResponse.model_validate(i) for i in ingredients]


@router.put(
    "/update/{ingredient_id}",
    response_model=IngredientResponse,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
def update_ingredient(
    ingredient_id: int, update: IngredientUpdate, db: Session = Depends(get_db)
):
    """
    Partially update an ingredient.

    Only fields present and non-null in the body overwrite stored values.
    A new product_reference must belong to an existing product.
    """
    ingredient = IngredientService.update_ingredient(db, ingredient_id, update)
    return IngredientResponse.model_validate(ingredient)

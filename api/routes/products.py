"""Product catalog routes"""

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_db
from api.responses import BAD_REQUEST_RESPONSE, CONFLICT_RESPONSE, NOT_FOUND_RESPONSE
from domain.enums import Category
from domain.schemas.product_schemas import (
    ProductCreate,
    ProductUpdate,
    ProductSearch,
    ProductResponse,
)
from domain.schemas.ingredient_schemas import IngredientResponse
from services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])
logger = logging.getLogger("products.api.products")


@router.get("", response_model=List[ProductResponse])
def get_products(db: Session = Depends(get_db)):
    """List all products"""
    products = ProductService.list_products(db)
    return [ProductResponse.model_validate(p) for p in products]


@router.post(
    "/add",
    response_model=str,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
)
def add_product(
    payload: Optional[ProductCreate] = Body(None), db: Session = Depends(get_db)
):
    """
    Create a product together with its ingredients.

    Every ingredient is stamped with the generated product reference, which
    is returned as the response body.

    Example body:
    {"name": "Burger", "quantity": 1, "price": 5.0, "category": "FOOD",
     "ingredients": [{"name": "Bun", "quantity": 2, "price": 0.5}]}
    """
    return ProductService.create_product(db, payload)


@router.api_route(
    "/search", methods=["GET", "PUT"], response_model=List[ProductResponse]
)
def search_products(
    name: Optional[str] = Query(None),
    quantity: Optional[int] = Query(None),
    price: Optional[float] = Query(None),
    category: Optional[Category] = Query(None),
    product_reference: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Search products by exact match on every supplied filter.

    Filters left out impose no constraint; no filters lists everything.
    """
    filters = ProductSearch(
        name=name,
        quantity=quantity,
        price=price,
        category=category,
        product_reference=product_reference,
    )
    products = ProductService.search_products(db, filters)
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/{product_id}", response_model=ProductResponse, responses=NOT_FOUND_RESPONSE
)
def get_product(product_id: int, db: Session = Depends(get_db)):
    """Get a single product"""
    return ProductResponse.model_validate(ProductService.get_product(db, product_id))


@router.get(
    "/{product_id}/ingredients",
    response_model=List[IngredientResponse],
    responses=NOT_FOUND_RESPONSE,
)
def get_product_ingredients(product_id: int, db: Session = Depends(get_db)):
    """List the ingredients linked to a product by its reference"""
    ingredients = ProductService.get_product_ingredients(db, product_id)
    return [IngredientResponse.model_validate(i) for i in ingredients]


@router.put(
    "/update/{product_id}",
    response_model=ProductResponse,
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE},
)
def update_product(
    product_id: int, update: ProductUpdate, db: Session = Depends(get_db)
):
    """
    Partially update a product.

    Only fields present and non-null in the body overwrite stored values.
    Changing product_reference also moves the product's ingredients to the
    new reference.
    """
    product = ProductService.update_product(db, product_id, update)
    return ProductResponse.model_validate(product)


@router.delete(
    "/remove/{product_id}",
    response_model=ProductResponse,
    responses=NOT_FOUND_RESPONSE,
)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Delete a product and every ingredient sharing its reference"""
    product = ProductService.delete_product(db, product_id)
    return ProductResponse.model_validate(product)

"""
Tests for product creation payload validation.

Checks run in a fixed order and the first failure wins:
payload, name, quantity, price, category, then each ingredient's
name, quantity and price.
"""

import math

import pytest

from test_fixtures import make_product_payload
from app.exceptions import ServiceValidationError
from domain.schemas.product_schemas import IngredientCreate
from services.product_service import ProductService


def _field_of(error: ServiceValidationError) -> str:
    return error.details["field"]


def test_valid_payload_passes():
    ProductService.validate_product_payload(make_product_payload())


def test_payload_without_ingredients_passes():
    ProductService.validate_product_payload(make_product_payload(ingredients=None))
    ProductService.validate_product_payload(make_product_payload(ingredients=[]))


def test_missing_payload_rejected():
    with pytest.raises(ServiceValidationError) as exc_info:
        ProductService.validate_product_payload(None)
    assert str(exc_info.value) == "Product cannot be null"


@pytest.mark.parametrize(
    "overrides, field, message",
    [
        ({"name": None}, "name", "Product name cannot be empty"),
        ({"name": ""}, "name", "Product name cannot be empty"),
        ({"quantity": None}, "quantity", "Product quantity cannot be null"),
        ({"price": None}, "price", "Product price cannot be null or NaN"),
        ({"price": math.nan}, "price", "Product price cannot be null or NaN"),
        ({"category": None}, "category", "Product category cannot be null"),
    ],
)
def test_product_fields_rejected(overrides, field, message):
    with pytest.raises(ServiceValidationError) as exc_info:
        ProductService.validate_product_payload(make_product_payload(**overrides))
    assert _field_of(exc_info.value) == field
    assert exc_info.value.message == message
    assert exc_info.value.http_status == 400


@pytest.mark.parametrize(
    "ingredient, field",
    [
        (IngredientCreate(name="", quantity=1, price=1.0), "ingredients[1].name"),
        (IngredientCreate(name=None, quantity=1, price=1.0), "ingredients[1].name"),
        (IngredientCreate(name="Salt", quantity=None, price=1.0), "ingredients[1].quantity"),
        (IngredientCreate(name="Salt", quantity=1, price=None), "ingredients[1].price"),
        (IngredientCreate(name="Salt", quantity=1, price=math.nan), "ingredients[1].price"),
    ],
)
def test_ingredient_fields_rejected(ingredient, field):
    """The failing ingredient is identified by its position"""
    payload = make_product_payload(
        ingredients=[IngredientCreate(name="Bun", quantity=2, price=0.5), ingredient]
    )
    with pytest.raises(ServiceValidationError) as exc_info:
        ProductService.validate_product_payload(payload)
    assert _field_of(exc_info.value) == field


def test_first_failure_wins():
    """
    Verifies:
    - Product-level checks run before ingredient checks
    - Among product fields, name is checked before price and category
    """
    payload = make_product_payload(
        name="",
        price=math.nan,
        category=None,
        ingredients=[IngredientCreate(name="", quantity=None, price=None)],
    )
    with pytest.raises(ServiceValidationError) as exc_info:
        ProductService.validate_product_payload(payload)
    assert _field_of(exc_info.value) == "name"

    payload = make_product_payload(
        ingredients=[
            IngredientCreate(name="Bun", quantity=None, price=math.nan),
            IngredientCreate(name="", quantity=1, price=1.0),
        ]
    )
    with pytest.raises(ServiceValidationError) as exc_info:
        ProductService.validate_product_payload(payload)
    assert _field_of(exc_info.value) == "ingredients[0].quantity"

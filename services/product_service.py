"""Product service - creation, partial updates and cascading deletes."""

import logging
import math
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.models import Product, Ingredient
from domain.schemas.product_schemas import ProductCreate, ProductUpdate, ProductSearch
from repositories import ProductRepository, IngredientRepository
from services.reference_generator import generate_product_reference
from app.exceptions import ConflictError, NotFoundError, ServiceValidationError

logger = logging.getLogger("products.product")

# Fields a partial update may overwrite
PRODUCT_UPDATE_FIELDS = ("name", "quantity", "price", "category", "product_reference")


def _is_missing_price(price: Optional[float]) -> bool:
    return price is None or math.isnan(price)


class ProductService:
    """Business logic for products and the ingredient rows they own."""

    @staticmethod
    def validate_product_payload(payload: Optional[ProductCreate]) -> None:
        """
        Reject a malformed creation payload before anything is written.

        Checks run in a fixed order and the first failure wins.

        Raises:
            ServiceValidationError: naming the first failing field in
                ``details["field"]``
        """
        if payload is None:
            raise ServiceValidationError("Product cannot be null", details={"field": "product"})

        if not payload.name:
            raise ServiceValidationError("Product name cannot be empty", details={"field": "name"})

        if payload.quantity is None:
            raise ServiceValidationError("Product quantity cannot be null", details={"field": "quantity"})

        if _is_missing_price(payload.price):
            raise ServiceValidationError("Product price cannot be null or NaN", details={"field": "price"})

        if payload.category is None:
            raise ServiceValidationError("Product category cannot be null", details={"field": "category"})

        for index, entry in enumerate(payload.ingredients or []):
            if not entry.name:
                raise ServiceValidationError(
                    "Ingredient name cannot be empty",
                    details={"field": f"ingredients[{index}].name"},
                )
            if entry.quantity is None:
                raise ServiceValidationError(
                    "Ingredient quantity cannot be null",
                    details={"field": f"ingredients[{index}].quantity"},
                )
            if _is_missing_price(entry.price):
                raise ServiceValidationError(
                    "Ingredient price cannot be null or NaN",
                    details={"field": f"ingredients[{index}].price"},
                )

    @staticmethod
    def list_products(db: Session) -> List[Product]:
        return ProductRepository(db).get_all()

    @staticmethod
    def get_product(db: Session, product_id: int) -> Product:
        product = ProductRepository(db).get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    @staticmethod
    def get_product_ingredients(db: Session, product_id: int) -> List[Ingredient]:
        """Ingredients carrying the product's reference"""
        product = ProductService.get_product(db, product_id)
        return IngredientRepository(db).get_by_product_reference(product.product_reference)

    @staticmethod
    def create_product(db: Session, payload: Optional[ProductCreate]) -> str:
        """
        Create a product and its ingredients in one transaction.

        Flow:
        1. Validate the payload (no write happens if this fails)
        2. Generate a fresh product reference
        3. Stage the product row, then one ingredient row per entry, all
           stamped with the reference
        4. Commit once; any store failure rolls everything back

        Returns:
            str: the new product reference

        Raises:
            ServiceValidationError: malformed payload
            StorageError: the database rejected a write
        """
        ProductService.validate_product_payload(payload)

        product_reference = generate_product_reference()
        product_repo = ProductRepository(db)
        ingredient_repo = IngredientRepository(db)

        product = Product(
            name=payload.name,
            quantity=payload.quantity,
            price=payload.price,
            category=payload.category,
            product_reference=product_reference,
        )
        product_repo.save(product, commit=False)

        entries = payload.ingredients or []
        for entry in entries:
            ingredient_repo.save(
                Ingredient(
                    product_reference=product_reference,
                    name=entry.name,
                    quantity=entry.quantity,
                    price=entry.price,
                ),
                commit=False,
            )

        product_repo.commit()
        logger.info(
            f"Created product {product.product_id} ({product_reference}) "
            f"with {len(entries)} ingredient(s)"
        )
        return product_reference

    @staticmethod
    def update_product(db: Session, product_id: int, payload: ProductUpdate) -> Product:
        """
        Partially update a product: only non-null fields overwrite.

        A new product_reference is carried over to the product's ingredients
        in the same transaction.

        Raises:
            NotFoundError: unknown product_id
            ConflictError: product_reference already used by another product
        """
        product_repo = ProductRepository(db)
        product = product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")

        changes = payload.model_dump(exclude_none=True)
        old_reference = product.product_reference
        new_reference = changes.get("product_reference")
        reference_changed = new_reference is not None and new_reference != old_reference

        if reference_changed and product_repo.get_by_product_reference(new_reference):
            raise ConflictError(
                f"Product reference {new_reference} is already in use",
                details={"product_reference": new_reference},
            )

        for field in PRODUCT_UPDATE_FIELDS:
            if field in changes:
                setattr(product, field, changes[field])

        product_repo.save(product, commit=False)
        if reference_changed:
            moved = IngredientRepository(db).reassign_product_reference(
                old_reference, new_reference, commit=False
            )
            logger.info(
                f"Moved {moved} ingredient(s) of product {product_id} "
                f"from {old_reference} to {new_reference}"
            )
        product_repo.commit()

        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return product

    @staticmethod
    def delete_product(db: Session, product_id: int) -> Product:
        """
        Delete a product and every ingredient sharing its reference.

        Both deletes are committed together.

        Returns:
            Product: the deleted record

        Raises:
            NotFoundError: unknown product_id
        """
        product_repo = ProductRepository(db)
        product = product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")

        product_reference = product.product_reference
        product_repo.delete(product, commit=False)
        removed = IngredientRepository(db).delete_by_product_reference(
            product_reference, commit=False
        )
        product_repo.commit()

        logger.info(
            f"Deleted product {product_id} ({product_reference}) "
            f"and {removed} ingredient(s)"
        )
        return product

    @staticmethod
    def search_products(db: Session, filters: ProductSearch) -> List[Product]:
        """Products matching every supplied filter exactly"""
        return ProductRepository(db).search(**filters.model_dump())

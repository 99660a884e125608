"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from contextlib import contextmanager
from typing import Generic, TypeVar, Optional, List, Type, Any
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import StorageError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("products.repository")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.

    Write methods take ``commit=True``; pass ``commit=False`` to stage several
    writes and finish them with a single ``commit()``.
    """

    # Columns accepted by search(), in filter order
    search_fields: tuple = ()

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def storage_errors(self, operation: str):
        """Roll back and re-raise SQLAlchemy failures as StorageError"""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                "%s %s failed: %s", self.model.__name__, operation, e
            )
            raise StorageError(
                f"Could not {operation} {self.model.__name__.lower()}",
                details={"operation": operation},
            ) from e

    def _order_by(self):
        return self.model.__mapper__.primary_key

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by ID.

        Note: This is a fallback implementation. Subclasses should override
        this method with their specific ID field (product_id, ingredient_id)

        Args:
            entity_id: Entity numeric identity

        Returns:
            Entity or None if not found
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement get_by_id() with specific ID field"
        )

    def get_all(self) -> List[ModelType]:
        """Get all entities ordered by primary key"""
        with self.storage_errors("list"):
            return self.db.query(self.model).order_by(*self._order_by()).all()

    def search(self, **filters: Any) -> List[ModelType]:
        """
        Exact-match search over ``search_fields``.

        Filters whose value is None impose no constraint; the remaining ones
        are combined with AND.
        """
        unknown = set(filters) - set(self.search_fields)
        if unknown:
            raise ValueError(f"Unsupported search fields: {sorted(unknown)}")

        query = self.db.query(self.model)
        for field in self.search_fields:
            value = filters.get(field)
            if value is not None:
                query = query.filter(getattr(self.model, field) == value)
        with self.storage_errors("search"):
            return query.order_by(*self._order_by()).all()

    def save(self, entity: ModelType, commit: bool = True) -> ModelType:
        """Insert or overwrite entity"""
        with self.storage_errors("save"):
            self.db.add(entity)
            if commit:
                self.db.commit()
                self.db.refresh(entity)
            else:
                self.db.flush()
        return entity

    def delete(self, entity: ModelType, commit: bool = True) -> None:
        """Delete entity"""
        with self.storage_errors("delete"):
            self.db.delete(entity)
            if commit:
                self.db.commit()
            else:
                self.db.flush()

    def commit(self) -> None:
        """Commit staged writes"""
        with self.storage_errors("commit"):
            self.db.commit()

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None

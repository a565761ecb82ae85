"""CRUD over one collection (categories or products) keyed by a store-assigned id."""

import logging
from typing import Any, Generic, TypeVar

from app.core.database import Database
from app.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class ResourceStore(Generic[ModelT]):
    """
    Repository for a single table.

    get() returns None for a missing id. update() and delete() return the
    number of rows affected, which is 0 for a missing id; callers decide
    whether that is an error. No cross-table checks are made, so product
    category ids are stored as given.
    """

    def __init__(self, db: Database, model: type[ModelT]) -> None:
        self._db = db
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def list(self) -> list[ModelT]:
        with self._db.session() as db:
            return db.query(self.model).order_by(self.model.id).all()

    def create(self, **fields: Any) -> ModelT:
        with self._db.session() as db:
            row = self.model(**fields)
            db.add(row)
            db.flush()
        logger.debug("Created %s id=%s", self.name, row.id)
        return row

    def get(self, item_id: int) -> ModelT | None:
        with self._db.session() as db:
            return db.get(self.model, item_id)

    def update(self, item_id: int, **fields: Any) -> int:
        """Overwrite the given fields on the row with item_id; return rows affected."""
        values = {getattr(self.model, key): value for key, value in fields.items()}
        with self._db.session() as db:
            updated = (
                db.query(self.model)
                .filter(self.model.id == item_id)
                .update(values, synchronize_session=False)
            )
        if updated == 0:
            logger.info("Update on %s matched no row: id=%s", self.name, item_id)
        return updated

    def delete(self, item_id: int) -> int:
        with self._db.session() as db:
            deleted = (
                db.query(self.model)
                .filter(self.model.id == item_id)
                .delete(synchronize_session=False)
            )
        if deleted == 0:
            logger.info("Delete on %s matched no row: id=%s", self.name, item_id)
        return deleted

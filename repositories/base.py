# repositories/base.py
"""
Generic CRUD repository over one SQLAlchemy model.

Rows cross the boundary as Pydantic schemas: the schema's Python field names
are the store column names and its aliases are the camelCase API names, so
every field is mapped declaratively in one place. Updates write only the
fields the caller set.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Base
from errors import NotFoundError, StoreError

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
     """CRUD for one entity type. Subclasses set model and default_order."""

     model: Type[ModelT]
     default_order: tuple = ()

     def __init__(self, db: Session):
          self.db = db

     # ------------------------------------------------------------------
     # Reads
     # ------------------------------------------------------------------

     def get_all(self) -> List[ModelT]:
          stmt = select(self.model).order_by(*self.default_order)
          return self._run(lambda: list(self.db.scalars(stmt)), "fetch")

     def get(self, entity_id: int) -> ModelT:
          row = self._run(lambda: self.db.get(self.model, entity_id), "fetch")
          if row is None:
               raise NotFoundError(f"{self.model.__name__} with ID {entity_id} not found")
          return row

     def find(self, entity_id: int) -> Optional[ModelT]:
          return self._run(lambda: self.db.get(self.model, entity_id), "fetch")

     def filter_by(self, **criteria: Any) -> List[ModelT]:
          stmt = select(self.model).filter_by(**criteria).order_by(*self.default_order)
          return self._run(lambda: list(self.db.scalars(stmt)), "fetch")

     # ------------------------------------------------------------------
     # Writes
     # ------------------------------------------------------------------

     def create(self, payload: BaseModel) -> ModelT:
          values = payload.model_dump(by_alias=False)
          return self.insert(values)

     def insert(self, values: Dict[str, Any]) -> ModelT:
          row = self.model(**values)

          def _insert():
               self.db.add(row)
               self.db.flush()  # Flush to get the ID without committing
               self.db.refresh(row)  # Pick up server defaults (created_at)
               return row

          return self._run(_insert, "insert")

     def update(self, entity_id: int, payload: BaseModel) -> ModelT:
          values = payload.model_dump(exclude_unset=True, by_alias=False)
          return self.update_values(entity_id, values)

     def update_values(self, entity_id: int, values: Dict[str, Any]) -> ModelT:
          row = self.get(entity_id)
          if not values:
               return row
          for field, value in values.items():
               setattr(row, field, value)

          def _update():
               self.db.flush()
               self.db.refresh(row)
               return row

          return self._run(_update, "update")

     def delete(self, entity_id: int) -> None:
          row = self.get(entity_id)

          def _delete():
               self.db.delete(row)
               self.db.flush()

          self._run(_delete, "delete")

     # ------------------------------------------------------------------

     def _run(self, operation, action: str):
          """Run a store call, turning driver failures into StoreError."""
          try:
               return operation()
          except SQLAlchemyError as e:
               log.exception("%s %s failed", self.model.__tablename__, action)
               self.db.rollback()
               raise StoreError(f"Database error: {e}") from e

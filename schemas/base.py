# schemas/base.py
"""
Shared Pydantic base for API payloads.

Python attribute names match the snake_case store columns; JSON uses camelCase
aliases (monthlyRent <-> monthly_rent). Update payloads are dumped with
exclude_unset so fields the caller did not send are never written.
"""
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
     """Base schema: camelCase on the wire, snake_case in Python and in the store."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
          use_enum_values=False,
     )

     def store_values(self) -> Dict[str, Any]:
          """Only the fields the caller actually set, keyed by store column name."""
          return self.model_dump(exclude_unset=True, by_alias=False)


class UpdateModel(CamelModel):
     """
     Base for partial updates.

     An explicit null is only accepted for columns that are nullable on
     `store_model`; anything else is rejected before the store sees it.
     """

     store_model: ClassVar[Optional[type]] = None

     @model_validator(mode="after")
     def reject_null_for_required_columns(self):
          if self.store_model is None:
               return self
          columns = self.store_model.__table__.columns
          for name in self.model_fields_set:
               if getattr(self, name) is not None or name not in columns:
                    continue
               if not columns[name].nullable:
                    raise ValueError(f"{to_camel(name)} cannot be null")
          return self

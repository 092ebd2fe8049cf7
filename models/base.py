# models/base.py
import enum
import re
from typing import Type

from sqlalchemy import Column, DateTime, Enum, func
from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: ElectricityReading -> electricity_readings
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'


class CreatedAtMixin:
     """Server-assigned creation timestamp shared by every table."""

     created_at = Column(DateTime, server_default=func.now(), nullable=False)


def enum_column(enum_cls: Type[enum.Enum], name: str) -> Enum:
     """Store the enum's values (not member names) in the column."""
     return Enum(
          enum_cls,
          name=name,
          values_callable=lambda members: [m.value for m in members],
          create_constraint=True,
          validate_strings=True,
     )

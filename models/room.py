# models/room.py
import enum

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtMixin, enum_column


class RoomType(str, enum.Enum):
     SINGLE = "single"
     DOUBLE = "double"
     TRIPLE = "triple"
     QUAD = "quad"


class RoomStatus(str, enum.Enum):
     OCCUPIED = "occupied"
     VACANT = "vacant"
     MAINTENANCE = "maintenance"


class Room(CreatedAtMixin, Base):
     """
     Room model - a rentable room identified by its room number.

     Tenants point at rooms by room_number. tenant_id only records the tenant
     that last moved in; shared-room occupancy is computed from tenant rows.
     """
     __tablename__ = "rooms"

     id = Column(Integer, primary_key=True, autoincrement=True)
     room_number = Column(String(20), nullable=False, unique=True, index=True)
     floor = Column(Integer, nullable=True)
     room_type = Column(enum_column(RoomType, "room_type"), default=RoomType.SINGLE, nullable=False)
     capacity = Column(Integer, default=1, nullable=False)
     rent_amount = Column(Numeric(12, 2), default=0, nullable=False)
     status = Column(
          enum_column(RoomStatus, "room_status"),
          default=RoomStatus.VACANT,
          nullable=False,
          index=True
     )
     tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="SET NULL"), nullable=True)

     # Relationships
     tenant = relationship("Tenant")

     def __repr__(self):
          return f"<Room(id={self.id}, room_number='{self.room_number}', status='{self.status}')>"

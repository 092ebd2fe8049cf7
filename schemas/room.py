# schemas/room.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from models.room import Room, RoomType, RoomStatus
from .base import CamelModel, UpdateModel


class RoomCreate(CamelModel):
     room_number: str = Field(..., min_length=1, max_length=20)
     floor: Optional[int] = Field(None, ge=0)
     room_type: RoomType = RoomType.SINGLE
     capacity: int = Field(1, ge=1, le=4)
     rent_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     status: RoomStatus = RoomStatus.VACANT
     tenant_id: Optional[int] = None


class RoomUpdate(UpdateModel):
     store_model = Room

     room_number: Optional[str] = Field(None, min_length=1, max_length=20)
     floor: Optional[int] = Field(None, ge=0)
     room_type: Optional[RoomType] = None
     capacity: Optional[int] = Field(None, ge=1, le=4)
     rent_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     status: Optional[RoomStatus] = None
     tenant_id: Optional[int] = None


class RoomResponse(RoomCreate):
     id: int
     created_at: datetime

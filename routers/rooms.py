# routers/rooms.py
"""
Room API routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from models import RoomStatus, RoomType
from repositories import RoomRepository
from schemas.room import RoomCreate, RoomResponse, RoomUpdate
from services import TenantService

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.post(
     "",
     response_model=RoomResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a room"
)
def create_room(
     room_data: RoomCreate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Add a room.

     - **roomNumber**: Unique; G-prefixed numbers are on the ground floor
     - **floor**: Worked out from the room number when left out
     - **capacity**: 1 to 4 beds
     """
     return TenantService.add_room(db, room_data)


@router.get(
     "",
     response_model=List[RoomResponse],
     summary="List rooms"
)
def list_rooms(
     room_status: Optional[RoomStatus] = Query(None, alias="status", description="Filter by status"),
     room_type: Optional[RoomType] = Query(None, alias="roomType", description="Filter by room type"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     criteria = {}
     if room_status is not None:
          criteria["status"] = room_status
     if room_type is not None:
          criteria["room_type"] = room_type
     return RoomRepository(db).filter_by(**criteria)


@router.get(
     "/{room_id}",
     response_model=RoomResponse,
     summary="Get room by ID"
)
def get_room(
     room_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return RoomRepository(db).get(room_id)


@router.patch(
     "/{room_id}",
     response_model=RoomResponse,
     summary="Update room"
)
def update_room(
     room_id: int,
     room_data: RoomUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return TenantService.update_room(db, room_id, room_data)


@router.delete(
     "/{room_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete room"
)
def delete_room(
     room_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     RoomRepository(db).delete(room_id)
     return None

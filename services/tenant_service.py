# services/tenant_service.py
"""
Tenant Service - move-in, notice, move-out and meter readings.

Rooms are matched to tenants by room number. A room stays OCCUPIED while at
least one active-like tenant references its number.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from errors import ValidationError
from models import ElectricityReading, Room, RoomStatus, Tenant, TenantStatus
from repositories import ElectricityReadingRepository, RoomRepository, TenantRepository
from schemas.electricity import ElectricityReadingCreate
from schemas.room import RoomCreate, RoomUpdate
from schemas.tenant import TenantCreate, TenantUpdate
from . import billing

log = logging.getLogger(__name__)


class TenantService:
     """Service class for tenant and room occupancy rules."""

     @staticmethod
     def add_tenant(db: Session, data: TenantCreate) -> Tenant:
          """
          Move a tenant in: create the tenant, then mark the room occupied.

          Both writes share the request's session and are committed together.
          A room number with no Room row is accepted (the tenant still counts
          as occupying it in occupancy reports).
          """
          tenant = TenantRepository(db).create(data)

          rooms = RoomRepository(db)
          room = rooms.by_number(data.room_number)
          if room is not None:
               rooms.update_values(room.id, {"status": RoomStatus.OCCUPIED, "tenant_id": tenant.id})
          else:
               log.warning("Tenant %s moved into unknown room %s", tenant.id, data.room_number)

          log.info("Tenant %s (%s) moved into room %s", tenant.id, tenant.name, tenant.room_number)
          return tenant

     @staticmethod
     def update_tenant(db: Session, tenant_id: int, changes: TenantUpdate) -> Tenant:
          """
          Partial tenant edit; keeps the meter monotonic.

          Raises:
               ValidationError: If the resulting last reading would be below the joining
                    reading, or a new last reading is below the one already recorded
          """
          tenants = TenantRepository(db)
          tenant = tenants.get(tenant_id)
          values = changes.store_values()

          joining = values.get("electricity_joining_reading", tenant.electricity_joining_reading)
          last = values.get("last_electricity_reading", tenant.last_electricity_reading)
          if last is not None and joining is not None and last < joining:
               raise ValidationError(
                    "lastElectricityReading cannot be lower than electricityJoiningReading"
               )
          recorded = tenant.last_electricity_reading
          if "last_electricity_reading" in values and recorded is not None and (last is None or last < recorded):
               raise ValidationError(
                    f"lastElectricityReading cannot move back from {recorded}"
               )
          return tenants.update_values(tenant_id, values)

     @staticmethod
     def give_notice(
          db: Session,
          tenant_id: int,
          notice_date: date,
          departure_date: Optional[date] = None
     ) -> Tenant:
          """Tenant announced they are leaving; status becomes DEPARTING."""
          tenants = TenantRepository(db)
          tenant = tenants.get(tenant_id)
          if not tenant.is_active_like:
               raise ValidationError(
                    f"Tenant {tenant_id} has status '{tenant.status.value}' and cannot give notice"
               )
          if departure_date is not None and departure_date < notice_date:
               raise ValidationError("departureDate cannot be before noticeDate")

          values = {
               "notice_given": True,
               "notice_date": notice_date,
               "status": TenantStatus.DEPARTING,
          }
          if departure_date is not None:
               values["departure_date"] = departure_date
          tenant = tenants.update_values(tenant_id, values)
          log.info("Tenant %s gave notice on %s, leaving %s", tenant_id, notice_date, departure_date)
          return tenant

     @staticmethod
     def move_out(db: Session, tenant_id: int, departure_date: date) -> Tenant:
          """
          Tenant left: status LEFT. The room is freed once nobody else active
          remains in it.
          """
          tenants = TenantRepository(db)
          tenant = tenants.update_values(tenant_id, {
               "status": TenantStatus.LEFT,
               "departure_date": departure_date,
          })

          remaining = [
               t for t in tenants.in_room(tenant.room_number)
               if t.id != tenant.id and t.is_active_like
          ]
          rooms = RoomRepository(db)
          room = rooms.by_number(tenant.room_number)
          if room is not None:
               if remaining:
                    if room.tenant_id == tenant.id:
                         rooms.update_values(room.id, {"tenant_id": remaining[0].id})
               else:
                    rooms.update_values(room.id, {"status": RoomStatus.VACANT, "tenant_id": None})

          log.info("Tenant %s left room %s on %s", tenant_id, tenant.room_number, departure_date)
          return tenant

     @staticmethod
     def add_room(db: Session, data: RoomCreate) -> Room:
          """Create a room, deriving the floor from the room number when not given."""
          if data.floor is None:
               data = data.model_copy(update={"floor": billing.floor_for_room(data.room_number)})
          return RoomRepository(db).create(data)

     @staticmethod
     def update_room(db: Session, room_id: int, changes: RoomUpdate) -> Room:
          return RoomRepository(db).update(room_id, changes)

     @staticmethod
     def record_electricity_reading(
          db: Session,
          room_number: str,
          current_reading: Decimal,
          tenant_name: Optional[str] = None,
          reading_date: Optional[date] = None
     ) -> ElectricityReading:
          """
          Log a room meter reading.

          Units are measured from the room's latest logged reading; the first
          reading for a room has no previous one and is charged nothing.
          """
          readings = ElectricityReadingRepository(db)
          previous = readings.latest_for_room(room_number)
          last_reading = previous.current_reading if previous is not None else None

          units = billing.units_consumed(current_reading, last_reading) if last_reading is not None else Decimal("0")
          amount = billing.electricity_charge(current_reading, last_reading) if last_reading is not None else Decimal("0")

          reading = readings.create(ElectricityReadingCreate(
               room_number=room_number,
               tenant_name=tenant_name,
               current_reading=current_reading,
               last_reading=last_reading,
               reading_date=reading_date or date.today(),
               units_consumed=units,
               amount=amount,
               is_billed=False,
          ))
          log.info("Room %s reading %s logged: %s units", room_number, current_reading, units)
          return reading

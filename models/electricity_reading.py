# models/electricity_reading.py
from sqlalchemy import Boolean, Column, Date, Integer, Numeric, String

from .base import Base, CreatedAtMixin


class ElectricityReading(CreatedAtMixin, Base):
     """
     Meter reading logged per room, independently of billing.

     units_consumed and amount are computed when the reading is logged, against
     the room's previous reading. is_billed marks readings already collected.
     """
     __tablename__ = "electricity_readings"

     id = Column(Integer, primary_key=True, autoincrement=True)
     room_number = Column(String(20), nullable=False, index=True)
     tenant_name = Column(String(200), nullable=True)
     current_reading = Column(Numeric(12, 2), nullable=False)
     last_reading = Column(Numeric(12, 2), nullable=True)
     reading_date = Column(Date, nullable=False, index=True)
     units_consumed = Column(Numeric(12, 2), default=0, nullable=False)
     amount = Column(Numeric(12, 2), default=0, nullable=False)
     is_billed = Column(Boolean, default=False, nullable=False)

     def __repr__(self):
          return (
               f"<ElectricityReading(id={self.id}, room='{self.room_number}', "
               f"reading={self.current_reading}, date={self.reading_date})>"
          )

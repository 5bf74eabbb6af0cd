import datetime as dt
from sqlalchemy import Integer, String, Date, Time, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional
from app.db.database import Base
from app.db.models.shifts import Shifts


class Schedules(Base):
    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # one row per calendar day
    date: Mapped[dt.date] = mapped_column(Date, unique=True, nullable=False, index=True)
    shift_id: Mapped[int] = mapped_column(Integer, ForeignKey("shifts.id", ondelete="CASCADE"), nullable=False, index=True)
    note: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    actual_start_time: Mapped[Optional[dt.time]] = mapped_column(Time, nullable=True)
    actual_end_time: Mapped[Optional[dt.time]] = mapped_column(Time, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    shift: Mapped[Shifts] = relationship(Shifts, lazy="joined")

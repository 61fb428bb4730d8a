# grease/db/models/event.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from grease.db.base import Base


class Event(Base):
    __tablename__ = "event"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(64), nullable=False)
    semester = Column(String(32), ForeignKey("semester.name"), nullable=False, index=True)

    # Plain string on purpose: rows are parsed into EventType when they are
    # loaded, so a bad value surfaces as UnknownEventType instead of a DB error
    type = Column(String(32), nullable=False)

    call_time = Column(DateTime, nullable=False, index=True)
    release_time = Column(DateTime, nullable=True)
    points = Column(Integer, nullable=False, default=0)
    comments = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    gig_count = Column(Boolean, nullable=False, default=False)
    default_attend = Column(Boolean, nullable=False, default=True)

    semester_row = relationship("Semester", back_populates="events")
    attendance = relationship("Attendance", back_populates="event_row", cascade="all, delete-orphan")
    absence_requests = relationship("AbsenceRequest", back_populates="event_row", cascade="all, delete-orphan")

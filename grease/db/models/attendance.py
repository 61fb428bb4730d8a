# grease/db/models/attendance.py
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from grease.db.base import Base


class Attendance(Base):
    __tablename__ = "attendance"

    member = Column(String(128), ForeignKey("member.email"), primary_key=True)
    event = Column(Integer, ForeignKey("event.id"), primary_key=True)

    should_attend = Column(Boolean, nullable=False, default=True)
    did_attend = Column(Boolean, nullable=False, default=False)
    confirmed = Column(Boolean, nullable=False, default=False)
    minutes_late = Column(Integer, nullable=False, default=0)

    member_row = relationship("Member", back_populates="attendance_records")
    event_row = relationship("Event", back_populates="attendance")

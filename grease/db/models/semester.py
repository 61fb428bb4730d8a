# grease/db/models/semester.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from grease.db.base import Base


class Semester(Base):
    __tablename__ = "semester"

    name = Column(String(32), primary_key=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    gig_requirement = Column(Integer, nullable=False, default=5)
    current = Column(Boolean, nullable=False, default=False)

    events = relationship("Event", back_populates="semester_row")


class ActiveSemester(Base):
    """A member is active during a semester iff a row exists here."""
    __tablename__ = "active_semester"

    member = Column(String(128), ForeignKey("member.email"), primary_key=True)
    semester = Column(String(32), ForeignKey("semester.name"), primary_key=True)
    enrollment = Column(Enum("class", "club", name="enrollment"), nullable=False, default="club")
    section = Column(String(16), nullable=True)

    member_row = relationship("Member", back_populates="active_semesters")

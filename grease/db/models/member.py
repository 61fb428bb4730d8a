# grease/db/models/member.py
from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship
from grease.db.base import Base


class Member(Base):
    __tablename__ = "member"

    email = Column(String(128), primary_key=True, index=True)
    first_name = Column(String(64), nullable=False)
    last_name = Column(String(64), nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum("member", "officer", name="member_role"), nullable=False, default="member")

    active_semesters = relationship("ActiveSemester", back_populates="member_row", cascade="all, delete-orphan")
    attendance_records = relationship("Attendance", back_populates="member_row", cascade="all, delete-orphan")
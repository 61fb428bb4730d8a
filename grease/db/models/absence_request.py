# grease/db/models/absence_request.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from grease.db.base import Base


class AbsenceRequest(Base):
    __tablename__ = "absence_request"

    member = Column(String(128), ForeignKey("member.email"), primary_key=True)
    event = Column(Integer, ForeignKey("event.id"), primary_key=True)

    time = Column(DateTime, nullable=False, server_default=func.now())
    reason = Column(Text, nullable=False)
    # pending -> approved / denied
    state = Column(Enum("pending", "approved", "denied", name="absence_request_state"),
                   nullable=False, default="pending")

    event_row = relationship("Event", back_populates="absence_requests")

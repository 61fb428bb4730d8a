# grease/db/__init__.py
# Importing grease.db registers every model on Base.metadata

from grease.db.base import Base
from grease.db.models import Member, Semester, ActiveSemester, Event, Attendance, AbsenceRequest

__all__ = ["Base", "Member", "Semester", "ActiveSemester", "Event", "Attendance", "AbsenceRequest"]

from grease.db.base import Base
from grease.db.models.member import Member
from grease.db.models.semester import Semester, ActiveSemester
from grease.db.models.event import Event
from grease.db.models.attendance import Attendance
from grease.db.models.absence_request import AbsenceRequest

__all__ = ["Base", "Member", "Semester", "ActiveSemester", "Event", "Attendance", "AbsenceRequest"]

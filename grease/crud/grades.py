# grease/crud/grades.py
# Loads what the grading engine needs from the database and runs it.
import logging
from datetime import datetime

from sqlalchemy.orm import Session
from grease.core.grades import grades_for_member as grade_events
from grease.crud.event import get_events_for_semester
from grease.crud.semester import get_active_members
from grease.db.models.absence_request import AbsenceRequest
from grease.db.models.attendance import Attendance as AttendanceModel
from grease.db.models.event import Event as EventModel
from grease.schemas.attendance import Attendance
from grease.schemas.event import Event, UnknownEventType
from grease.schemas.grades import Grades

logger = logging.getLogger(__name__)


def events_with_attendance(db: Session, member: str, semester: str):
    """Every event of the semester in call-time order, each with the member's attendance (or None)."""
    events = get_events_for_semester(db, semester)

    attendance_rows = (
        db.query(AttendanceModel)
        .join(EventModel, EventModel.id == AttendanceModel.event)
        .filter(AttendanceModel.member == member, EventModel.semester == semester)
        .all()
    )
    approved = {
        event_id for (event_id,) in db.query(AbsenceRequest.event)
        .join(EventModel, EventModel.id == AbsenceRequest.event)
        .filter(
            AbsenceRequest.member == member,
            AbsenceRequest.state == "approved",
            EventModel.semester == semester,
        )
    }

    attendance_by_event = {}
    for row in attendance_rows:
        attendance_by_event[row.event] = Attendance(
            member=row.member,
            event=row.event,
            should_attend=row.should_attend,
            did_attend=row.did_attend,
            confirmed=row.confirmed,
            minutes_late=row.minutes_late,
            approved_absence=row.event in approved,
        )

    pairs = []
    for row in events:
        try:
            event = Event.model_validate(row)
        except UnknownEventType:
            logger.error(f"Event {row.id} ({row.name}) has unknown type {row.type!r}")
            raise
        pairs.append((event, attendance_by_event.get(row.id)))
    return pairs


def grades_for_member(db: Session, member: str, semester: str, as_of: datetime) -> Grades:
    return grade_events(member, semester, events_with_attendance(db, member, semester), as_of)


def grades_for_semester(db: Session, semester: str, as_of: datetime):
    """Grades of every member active during the semester, by member email."""
    return {
        member.email: grades_for_member(db, member.email, semester, as_of)
        for member in get_active_members(db, semester)
    }

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session
from grease.core.config import settings
from grease.db.models.attendance import Attendance
from grease.db.models.event import Event
from grease.db.models.semester import ActiveSemester
from grease.schemas.event import EventType

logger = logging.getLogger(__name__)

# Everyone is expected at these; members can't opt out themselves
NO_RSVP_EVENT_TYPES = {EventType.TUTTI_GIG, EventType.SECTIONAL, EventType.REHEARSAL}


def get_attendance(db: Session, member: str, event_id: int):
    return db.query(Attendance).filter(
        Attendance.member == member,
        Attendance.event == event_id,
    ).first()


def get_attendance_for_event(db: Session, event_id: int):
    return db.query(Attendance).filter(Attendance.event == event_id).order_by(Attendance.member).all()


def create_for_new_member(db: Session, member: str, semester: str, now: datetime) -> int:
    """One record per semester event; events that already happened aren't expected."""
    events = db.query(Event).filter(Event.semester == semester).all()
    existing = {
        event_id for (event_id,) in db.query(Attendance.event).filter(
            Attendance.member == member,
            Attendance.event.in_([event.id for event in events]),
        )
    }

    created = 0
    for event in events:
        if event.id in existing:
            continue
        should_attend = False if event.call_time < now else event.default_attend
        db.add(Attendance(member=member, event=event.id, should_attend=should_attend))
        created += 1
    return created


def create_for_new_event(db: Session, event: Event) -> int:
    active_members = db.query(ActiveSemester.member).filter(ActiveSemester.semester == event.semester).all()
    for (member,) in active_members:
        db.add(Attendance(member=member, event=event.id, should_attend=event.default_attend))
    return len(active_members)


def update_attendance(db: Session, attendance: Attendance, update):
    attendance.should_attend = update.should_attend
    attendance.did_attend = update.did_attend
    attendance.confirmed = update.confirmed
    attendance.minutes_late = update.minutes_late
    db.commit()
    db.refresh(attendance)
    logger.info(
        f"Attendance for {attendance.member} at event {attendance.event} updated: "
        f"should_attend={update.should_attend} did_attend={update.did_attend} "
        f"minutes_late={update.minutes_late}"
    )
    return attendance


def rsvp_issue_for(event: Event, attendance: Attendance | None, is_active: bool, now: datetime):
    """Why the member can't RSVP to this event, or None if they can."""
    if not is_active:
        return "Member must be active to RSVP to events"
    if attendance is not None and not attendance.should_attend:
        return None
    if now + timedelta(hours=settings.RSVP_CUTOFF_HOURS) > event.call_time:
        return "Responses are closed for this event"

    event_type = EventType.parse(event.type)
    if event_type in NO_RSVP_EVENT_TYPES:
        return f"You cannot RSVP for {event_type.value} events"
    return None


def rsvp_for_event(db: Session, attendance: Attendance, attending: bool):
    attendance.should_attend = attending
    attendance.confirmed = True
    db.commit()
    db.refresh(attendance)
    return attendance


def confirm_for_event(db: Session, attendance: Attendance):
    attendance.should_attend = True
    attendance.confirmed = True
    db.commit()
    db.refresh(attendance)
    return attendance


def excuse_unconfirmed(db: Session, event_id: int) -> int:
    excused = db.query(Attendance).filter(
        Attendance.event == event_id,
        Attendance.confirmed.is_(False),
    ).update({Attendance.should_attend: False}, synchronize_session="fetch")
    db.commit()
    logger.info(f"Excused {excused} unconfirmed members from event {event_id}")
    return excused

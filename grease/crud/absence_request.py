import logging

from sqlalchemy.orm import Session
from grease.db.models.absence_request import AbsenceRequest
from grease.db.models.event import Event

logger = logging.getLogger(__name__)


def get_absence_request(db: Session, member: str, event_id: int):
    return db.query(AbsenceRequest).filter(
        AbsenceRequest.member == member,
        AbsenceRequest.event == event_id,
    ).first()


def get_absence_requests_for_semester(db: Session, semester: str):
    return (
        db.query(AbsenceRequest)
        .join(Event, Event.id == AbsenceRequest.event)
        .filter(Event.semester == semester)
        .order_by(AbsenceRequest.time)
        .all()
    )


def submit_absence_request(db: Session, member: str, event_id: int, reason: str):
    request = AbsenceRequest(member=member, event=event_id, reason=reason, state="pending")
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info(f"{member} requested absence from event {event_id}")
    return request


def set_absence_request_state(db: Session, request: AbsenceRequest, state: str):
    request.state = state
    db.commit()
    db.refresh(request)
    logger.info(f"Absence request of {request.member} for event {request.event} is now {state}")
    return request

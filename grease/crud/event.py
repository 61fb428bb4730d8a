import logging

from sqlalchemy.orm import Session
from grease.db.models.event import Event
from grease.crud import attendance as crud_attendance

logger = logging.getLogger(__name__)


def get_event(db: Session, event_id: int):
    return db.query(Event).filter(Event.id == event_id).first()


def get_events_for_semester(db: Session, semester: str):
    return (
        db.query(Event)
        .filter(Event.semester == semester)
        .order_by(Event.call_time, Event.id)
        .all()
    )


def create_event(db: Session, event_data, semester: str):
    fields = event_data.model_dump(exclude={"semester"})
    fields["type"] = event_data.type.value
    db_event = Event(**fields, semester=semester)
    db.add(db_event)
    db.flush()

    created = crud_attendance.create_for_new_event(db, db_event)
    db.commit()
    db.refresh(db_event)
    logger.info(f"Created event {db_event.id} ({db_event.name}) with {created} attendance records")
    return db_event


def update_event(db: Session, db_event: Event, event_data, semester: str):
    fields = event_data.model_dump(exclude={"semester"})
    fields["type"] = event_data.type.value
    for key, value in fields.items():
        setattr(db_event, key, value)
    db_event.semester = semester
    db.commit()
    db.refresh(db_event)
    return db_event


def delete_event(db: Session, db_event: Event):
    # attendance and absence requests go with it (cascade)
    db.delete(db_event)
    db.commit()
    logger.info(f"Deleted event {db_event.id} ({db_event.name})")

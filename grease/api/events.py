from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from grease.api.deps import get_db, get_current_member, require_officer, semester_or_current
from grease.crud import event as crud_event
from grease.db.models.member import Member
from grease.schemas.event import Event, EventCreate

router = APIRouter()


def get_event_or_404(db: Session, event_id: int):
    event = crud_event.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail=f"No event with id {event_id}")
    return event


def check_release_time(event_in: EventCreate):
    if event_in.release_time is not None and event_in.release_time <= event_in.call_time:
        raise HTTPException(status_code=400, detail="Release time must be after call time")


@router.get("/", response_model=List[Event])
def list_events(
    semester: Optional[str] = None,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
):
    return crud_event.get_events_for_semester(db, semester_or_current(db, semester).name)


@router.get("/{event_id}", response_model=Event)
def read_event(event_id: int, db: Session = Depends(get_db), current_member: Member = Depends(get_current_member)):
    return get_event_or_404(db, event_id)


@router.post("/", response_model=Event)
def create_event(event_in: EventCreate, db: Session = Depends(get_db), officer: Member = Depends(require_officer)):
    check_release_time(event_in)
    semester = semester_or_current(db, event_in.semester)
    return crud_event.create_event(db, event_in, semester.name)


@router.put("/{event_id}", response_model=Event)
def update_event(
    event_id: int,
    event_in: EventCreate,
    db: Session = Depends(get_db),
    officer: Member = Depends(require_officer),
):
    event = get_event_or_404(db, event_id)
    check_release_time(event_in)
    semester = semester_or_current(db, event_in.semester or event.semester)
    return crud_event.update_event(db, event, event_in, semester.name)


@router.delete("/{event_id}")
def delete_event(event_id: int, db: Session = Depends(get_db), officer: Member = Depends(require_officer)):
    crud_event.delete_event(db, get_event_or_404(db, event_id))
    return {"deleted": event_id}

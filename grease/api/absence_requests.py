from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from grease.api.deps import get_db, get_current_member, require_officer, semester_or_current
from grease.api.events import get_event_or_404
from grease.crud import absence_request as crud_absence
from grease.db.models.member import Member
from grease.schemas.absence_request import AbsenceRequest, AbsenceRequestCreate, AbsenceRequestState

router = APIRouter()


@router.post("/{event_id}", response_model=AbsenceRequest)
def submit_absence_request(
    event_id: int,
    request_in: AbsenceRequestCreate,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
):
    get_event_or_404(db, event_id)
    if crud_absence.get_absence_request(db, current_member.email, event_id):
        raise HTTPException(status_code=409, detail="An absence request for this event already exists")
    return crud_absence.submit_absence_request(db, current_member.email, event_id, request_in.reason)


@router.get("/", response_model=List[AbsenceRequest])
def list_absence_requests(
    semester: Optional[str] = None,
    db: Session = Depends(get_db),
    officer: Member = Depends(require_officer),
):
    return crud_absence.get_absence_requests_for_semester(db, semester_or_current(db, semester).name)


def _set_state(db: Session, event_id: int, email: str, state: AbsenceRequestState):
    request = crud_absence.get_absence_request(db, email, event_id)
    if not request:
        raise HTTPException(status_code=404, detail=f"No absence request for member {email} at event {event_id}")
    return crud_absence.set_absence_request_state(db, request, state.value)


@router.post("/{event_id}/{email}/approve", response_model=AbsenceRequest)
def approve_absence_request(event_id: int, email: str, db: Session = Depends(get_db), officer: Member = Depends(require_officer)):
    return _set_state(db, event_id, email, AbsenceRequestState.APPROVED)


@router.post("/{event_id}/{email}/deny", response_model=AbsenceRequest)
def deny_absence_request(event_id: int, email: str, db: Session = Depends(get_db), officer: Member = Depends(require_officer)):
    return _set_state(db, event_id, email, AbsenceRequestState.DENIED)

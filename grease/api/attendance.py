from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from grease.api.deps import get_db, get_current_member, get_now, require_officer
from grease.api.events import get_event_or_404
from grease.crud import attendance as crud_attendance
from grease.crud import semester as crud_semester
from grease.crud.absence_request import get_absence_request
from grease.db.models.member import Member
from grease.schemas.attendance import Attendance, AttendanceUpdate

router = APIRouter()


def get_attendance_or_404(db: Session, member: str, event_id: int):
    attendance = crud_attendance.get_attendance(db, member, event_id)
    if not attendance:
        raise HTTPException(status_code=404, detail=f"No attendance for {member} at event {event_id}")
    return attendance


def with_approved_absence(db: Session, attendance) -> Attendance:
    request = get_absence_request(db, attendance.member, attendance.event)
    return Attendance.model_validate(attendance).model_copy(
        update={"approved_absence": request is not None and request.state == "approved"}
    )


@router.get("/{event_id}/attendance", response_model=Attendance)
def read_my_attendance(event_id: int, db: Session = Depends(get_db), current_member: Member = Depends(get_current_member)):
    get_event_or_404(db, event_id)
    return with_approved_absence(db, get_attendance_or_404(db, current_member.email, event_id))


@router.get("/{event_id}/attendance/all", response_model=List[Attendance])
def read_event_attendance(event_id: int, db: Session = Depends(get_db), officer: Member = Depends(require_officer)):
    get_event_or_404(db, event_id)
    return [with_approved_absence(db, row) for row in crud_attendance.get_attendance_for_event(db, event_id)]


@router.put("/{event_id}/attendance/{email}", response_model=Attendance)
def update_attendance(
    event_id: int,
    email: str,
    update: AttendanceUpdate,
    db: Session = Depends(get_db),
    officer: Member = Depends(require_officer),
):
    get_event_or_404(db, event_id)
    attendance = get_attendance_or_404(db, email, event_id)
    return with_approved_absence(db, crud_attendance.update_attendance(db, attendance, update))


@router.post("/{event_id}/rsvp", response_model=Attendance)
def rsvp(
    event_id: int,
    attending: bool,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
    now: datetime = Depends(get_now),
):
    event = get_event_or_404(db, event_id)
    attendance = crud_attendance.get_attendance(db, current_member.email, event_id)
    is_active = crud_semester.is_active(db, current_member.email, event.semester)

    issue = crud_attendance.rsvp_issue_for(event, attendance, is_active, now)
    if issue:
        raise HTTPException(status_code=400, detail=issue)
    if not attendance:
        raise HTTPException(status_code=404, detail=f"No attendance for {current_member.email} at event {event_id}")

    return with_approved_absence(db, crud_attendance.rsvp_for_event(db, attendance, attending))


@router.post("/{event_id}/confirm", response_model=Attendance)
def confirm(event_id: int, db: Session = Depends(get_db), current_member: Member = Depends(get_current_member)):
    get_event_or_404(db, event_id)
    attendance = get_attendance_or_404(db, current_member.email, event_id)
    return with_approved_absence(db, crud_attendance.confirm_for_event(db, attendance))


@router.post("/{event_id}/excuse-unconfirmed")
def excuse_unconfirmed(event_id: int, db: Session = Depends(get_db), officer: Member = Depends(require_officer)):
    get_event_or_404(db, event_id)
    return {"excused": crud_attendance.excuse_unconfirmed(db, event_id)}

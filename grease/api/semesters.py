from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from grease.api.deps import get_db, get_current_member, get_now, require_officer, semester_or_current
from grease.crud import member as crud_member
from grease.crud import semester as crud_semester
from grease.db.models.member import Member
from grease.schemas.semester import ActiveSemester, ActiveSemesterCreate, Semester, SemesterCreate

router = APIRouter()

VALID_ENROLLMENTS = {"class", "club"}


@router.get("/", response_model=List[Semester])
def list_semesters(db: Session = Depends(get_db), current_member: Member = Depends(get_current_member)):
    return crud_semester.get_all_semesters(db)


@router.get("/current", response_model=Semester)
def read_current_semester(db: Session = Depends(get_db), current_member: Member = Depends(get_current_member)):
    return semester_or_current(db, None)


@router.post("/", response_model=Semester)
def create_semester(
    semester_in: SemesterCreate,
    db: Session = Depends(get_db),
    officer: Member = Depends(require_officer),
):
    if semester_in.end_date <= semester_in.start_date:
        raise HTTPException(status_code=400, detail="Semester must end after it starts")
    if crud_semester.get_semester(db, semester_in.name):
        raise HTTPException(status_code=409, detail=f"Semester {semester_in.name} already exists")
    return crud_semester.create_semester(db, semester_in)


@router.post("/{name}/current", response_model=Semester)
def set_current_semester(name: str, db: Session = Depends(get_db), officer: Member = Depends(require_officer)):
    return crud_semester.set_current_semester(db, semester_or_current(db, name))


@router.put("/{name}/members/{email}", response_model=ActiveSemester)
def mark_member_active(
    name: str,
    email: str,
    data: ActiveSemesterCreate,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
    now: datetime = Depends(get_now),
):
    if current_member.email != email and current_member.role != "officer":
        raise HTTPException(status_code=403, detail="Only officers can change other members' semesters")
    if data.enrollment not in VALID_ENROLLMENTS:
        raise HTTPException(status_code=400, detail="Enrollment must be 'class' or 'club'")

    semester = semester_or_current(db, name)
    if not crud_member.get_member_by_email(db, email):
        raise HTTPException(status_code=404, detail=f"No member with email {email}")

    return crud_semester.mark_member_active(db, email, semester.name, data, now)

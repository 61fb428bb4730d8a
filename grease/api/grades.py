from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from grease.api.deps import get_db, get_current_member, get_now, require_officer, semester_or_current
from grease.crud import grades as crud_grades
from grease.crud import member as crud_member
from grease.db.models.member import Member
from grease.schemas.grades import MemberGrades

router = APIRouter()


@router.get("/", response_model=MemberGrades)
def read_my_grades(
    semester: Optional[str] = None,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
    now: datetime = Depends(get_now),
):
    return read_member_grades(current_member.email, semester, db, current_member, now)


@router.get("/semester", response_model=List[MemberGrades])
def read_semester_grades(
    semester: Optional[str] = None,
    db: Session = Depends(get_db),
    officer: Member = Depends(require_officer),
    now: datetime = Depends(get_now),
):
    semester_row = semester_or_current(db, semester)
    all_grades = crud_grades.grades_for_semester(db, semester_row.name, now)
    return [
        MemberGrades(member=email, semester=semester_row.name,
                     gig_requirement=semester_row.gig_requirement, grades=grades)
        for email, grades in all_grades.items()
    ]


@router.get("/members/{email}", response_model=MemberGrades)
def read_member_grades(
    email: str,
    semester: Optional[str] = None,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
    now: datetime = Depends(get_now),
):
    if current_member.email != email and current_member.role != "officer":
        raise HTTPException(status_code=403, detail="You can only view your own grades")
    if not crud_member.get_member_by_email(db, email):
        raise HTTPException(status_code=404, detail=f"No member with email {email}")

    semester_row = semester_or_current(db, semester)
    grades = crud_grades.grades_for_member(db, email, semester_row.name, now)
    return MemberGrades(member=email, semester=semester_row.name,
                        gig_requirement=semester_row.gig_requirement, grades=grades)

# grease/schemas/grades.py
from typing import List

from pydantic import BaseModel

from grease.schemas.event import Event


class GradeChange(BaseModel):
    reason: str
    change: float
    # running total after this change, clamped to [0, 100]
    partial_score: float

    class Config:
        frozen = True


class EventWithGradeChange(BaseModel):
    event: Event
    change: GradeChange

    class Config:
        frozen = True


class Grades(BaseModel):
    final_grade: float
    volunteer_gigs_attended: int
    events_with_changes: List[EventWithGradeChange]


class MemberGrades(BaseModel):
    member: str
    semester: str
    gig_requirement: int
    grades: Grades

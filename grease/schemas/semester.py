from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SemesterCreate(BaseModel):
    name: str
    start_date: datetime
    end_date: datetime
    gig_requirement: int = Field(5, ge=0)


class Semester(SemesterCreate):
    current: bool

    class Config:
        from_attributes = True


class ActiveSemesterCreate(BaseModel):
    enrollment: str = "club"  # "class" or "club"
    section: Optional[str] = None


class ActiveSemester(BaseModel):
    member: str
    semester: str
    enrollment: str
    section: Optional[str] = None

    class Config:
        from_attributes = True

from pydantic import BaseModel, Field


class AttendanceUpdate(BaseModel):
    should_attend: bool
    did_attend: bool
    confirmed: bool
    minutes_late: int = Field(0, ge=0)


class Attendance(BaseModel):
    member: str
    event: int
    should_attend: bool = True
    did_attend: bool = False
    confirmed: bool = False
    minutes_late: int = Field(0, ge=0)
    # Derived from an approved absence request, not stored on the row
    approved_absence: bool = False

    class Config:
        from_attributes = True
        frozen = True

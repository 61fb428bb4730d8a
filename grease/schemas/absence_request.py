import enum
from datetime import datetime

from pydantic import BaseModel


class AbsenceRequestState(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class AbsenceRequestCreate(BaseModel):
    reason: str


class AbsenceRequest(BaseModel):
    member: str
    event: int
    time: datetime
    reason: str
    state: AbsenceRequestState

    class Config:
        from_attributes = True

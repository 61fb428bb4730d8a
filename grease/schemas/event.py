# grease/schemas/event.py
import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UnknownEventType(Exception):
    """A stored event type is outside the known set.

    Deliberately not a ValueError so pydantic lets it through unwrapped.
    """

    def __init__(self, value):
        super().__init__(f"Unknown event type: {value!r}")
        self.value = value


class EventType(str, enum.Enum):
    REHEARSAL = "Rehearsal"
    SECTIONAL = "Sectional"
    VOLUNTEER_GIG = "Volunteer Gig"
    TUTTI_GIG = "Tutti Gig"
    OMBUDS = "Ombuds"
    OTHER = "Other"

    @classmethod
    def parse(cls, value) -> "EventType":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownEventType(value) from None


class EventCreate(BaseModel):
    name: str
    semester: Optional[str] = None  # defaults to the current semester
    type: EventType
    call_time: datetime
    release_time: Optional[datetime] = None
    points: int = Field(0, ge=0)
    comments: Optional[str] = None
    location: Optional[str] = None
    gig_count: bool = False
    default_attend: bool = True


class Event(BaseModel):
    id: int
    name: str
    semester: str
    type: EventType
    call_time: datetime
    release_time: Optional[datetime] = None
    points: int = Field(ge=0)
    comments: Optional[str] = None
    location: Optional[str] = None
    gig_count: bool = False
    default_attend: bool = True

    class Config:
        from_attributes = True
        frozen = True

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return EventType.parse(value)

    def is_gig(self) -> bool:
        return self.type in (EventType.TUTTI_GIG, EventType.VOLUNTEER_GIG)

# grease/core/grades/week.py
from datetime import datetime, timedelta
from typing import Iterable, Iterator, List, Optional, Tuple

from grease.schemas.attendance import Attendance
from grease.schemas.event import Event, EventType

EventWithAttendance = Tuple[Event, Optional[Attendance]]

ONE_WEEK = timedelta(weeks=1)


def deny_credit(attendance: Optional[Attendance]) -> bool:
    """Expected to attend, did not, and has no approved excuse."""
    if attendance is None:
        return False
    return attendance.should_attend and not attendance.did_attend and not attendance.approved_absence


def start_of_week(moment: datetime) -> datetime:
    """Midnight of the Sunday on or before ``moment``."""
    days_after_sunday = (moment.weekday() + 1) % 7
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=days_after_sunday)


class WeekOfEvents:
    """The events (and the member's attendance at them) of one Sunday-to-Sunday week."""

    def __init__(self, start: datetime, events_with_attendance: List[EventWithAttendance]):
        self.start = start
        self.events_with_attendance = events_with_attendance

    @property
    def end(self) -> datetime:
        return self.start + ONE_WEEK

    def __iter__(self) -> Iterator[EventWithAttendance]:
        return iter(self.events_with_attendance)

    def __len__(self):
        return len(self.events_with_attendance)

    def missed_rehearsal(self) -> bool:
        return any(
            event.type == EventType.REHEARSAL and deny_credit(attendance)
            for event, attendance in self.events_with_attendance
        )

    def first_missed_sectional(self) -> Optional[EventWithAttendance]:
        for event, attendance in self.events_with_attendance:
            if event.type == EventType.SECTIONAL and deny_credit(attendance):
                return event, attendance
        return None

    def attended_sectional(self) -> bool:
        # NOTE: this checks deny_credit, not did_attend, exactly like
        # first_missed_sectional. Kept as-is until the officers decide
        # whether grades should change; see DESIGN.md.
        return any(
            event.type == EventType.SECTIONAL and deny_credit(attendance)
            for event, attendance in self.events_with_attendance
        )

    def sectionals(self) -> List[EventWithAttendance]:
        return [
            (event, attendance)
            for event, attendance in self.events_with_attendance
            if event.type == EventType.SECTIONAL
        ]

    def last_sectional(self) -> Optional[EventWithAttendance]:
        sectionals = self.sectionals()
        return sectionals[-1] if sectionals else None

    def is_bonus_event(self, event: Event, attendance: Optional[Attendance]) -> bool:
        should_attend = attendance.should_attend if attendance is not None else False

        return (
            event.type in (EventType.VOLUNTEER_GIG, EventType.OMBUDS)
            or (event.type == EventType.OTHER and not should_attend)
            or (event.type == EventType.SECTIONAL and self.first_missed_sectional() is None)
        )

    def attended_volunteer_gig(self, event: Event, attendance: Optional[Attendance]) -> bool:
        return (
            attendance is not None
            and attendance.did_attend
            and not self.missed_rehearsal()
            and event.type == EventType.VOLUNTEER_GIG
            and event.gig_count
        )


def weeks_of_events(events_with_attendance: Iterable[EventWithAttendance]) -> Iterator[WeekOfEvents]:
    """Split a semester's events into weeks, skipping weeks with no events.

    Input does not need to be sorted; events are ordered by call time
    (stably, so ties keep their original order) before being grouped.
    """
    ordered = sorted(events_with_attendance, key=lambda pair: pair[0].call_time)
    if not ordered:
        return

    start = start_of_week(ordered[0][0].call_time)
    finish = ordered[-1][0].call_time
    index = 0

    while start <= finish:
        end = start + ONE_WEEK
        week = []
        while index < len(ordered) and ordered[index][0].call_time < end:
            week.append(ordered[index])
            index += 1

        if week:
            yield WeekOfEvents(start, week)

        start = end

# grease/core/grades/calculator.py
from datetime import datetime
from typing import Optional, Tuple

from grease.core.config import settings
from grease.core.grades.week import WeekOfEvents
from grease.schemas.attendance import Attendance
from grease.schemas.event import Event, EventType
from grease.schemas.grades import GradeChange

MIN_GRADE = 0.0
MAX_GRADE = 100.0

Outcome = Tuple[float, str]


def clamp_grade(grade: float) -> float:
    return max(MIN_GRADE, min(MAX_GRADE, grade))


def calculate_grade_change(
    event: Event,
    attendance: Optional[Attendance],
    week: WeekOfEvents,
    grade: float,
    as_of: datetime,
) -> GradeChange:
    """Work out how one event moves a member's grade.

    ``grade`` is the running score before this event and ``as_of`` stands in
    for "now" so results don't depend on the wall clock.
    """
    if attendance is None:
        return GradeChange(reason="No grades for inactive members", change=0.0,
                           partial_score=clamp_grade(grade))

    if event.call_time > as_of:
        change, reason = event_hasnt_happened_yet()
    elif attendance.did_attend:
        is_bonus_event = week.is_bonus_event(event, attendance)

        if week.missed_rehearsal() and event.is_gig():
            change, reason = missed_rehearsal(event)
        elif attendance.minutes_late > 0 and event.type != EventType.OMBUDS:
            change, reason = late_for_event(event, attendance, grade, is_bonus_event)
        elif is_bonus_event:
            change, reason = attended_bonus_event(event, grade)
        else:
            change, reason = attended_normal_event()
    elif attendance.should_attend:
        change, reason = should_have_attended(event, attendance, week, as_of)
    else:
        change, reason = didnt_need_to_attend()

    return GradeChange(reason=reason, change=change, partial_score=clamp_grade(grade + change))


def event_hasnt_happened_yet() -> Outcome:
    return 0.0, "Event hasn't happened yet"


def didnt_need_to_attend() -> Outcome:
    return 0.0, "Did not need to attend"


def attended_normal_event() -> Outcome:
    return 0.0, "No point change for attending required event"


def missed_rehearsal(event: Event) -> Outcome:
    # No bonus points or gig credit without this week's rehearsal
    if event.type == EventType.VOLUNTEER_GIG:
        return 0.0, f"{event.points}-point bonus denied because this week's rehearsal was missed"

    return -float(event.points), "Full deduction for unexcused absence from this week's rehearsal"


def attended_bonus_event(event: Event, grade: float) -> Outcome:
    if grade + event.points > MAX_GRADE:
        return MAX_GRADE - grade, f"Event grants {event.points}-point bonus, but grade is capped at 100%"

    return float(event.points), "Full bonus awarded for attending volunteer or extra event"


def event_duration_minutes(event: Event) -> float:
    if event.release_time is not None and event.release_time > event.call_time:
        return (event.release_time - event.call_time).total_seconds() / 60

    return float(settings.DEFAULT_EVENT_MINUTES)


def points_lost_for_lateness(event: Event, minutes_late: int) -> float:
    """Share of the event missed, times its point value. Not capped at the point value."""
    return (minutes_late / event_duration_minutes(event)) * event.points


def late_for_event(event: Event, attendance: Attendance, grade: float, is_bonus_event: bool) -> Outcome:
    late_penalty = points_lost_for_lateness(event, attendance.minutes_late)

    if is_bonus_event:
        # may go negative for very late arrivals
        bonus = event.points - late_penalty
        if grade + bonus > MAX_GRADE:
            return (
                MAX_GRADE - grade,
                f"Event would grant {event.points}-point bonus, "
                f"but {late_penalty:.2f} points deducted for lateness (capped at 100%)",
            )
        return (
            bonus,
            f"Event would grant {event.points}-point bonus, "
            f"but {late_penalty:.2f} points deducted for lateness",
        )

    if attendance.should_attend:
        return -late_penalty, f"{late_penalty:.2f} points deducted for lateness to required event"

    return attended_normal_event()


def should_have_attended(event: Event, attendance: Attendance, week: WeekOfEvents, as_of: datetime) -> Outcome:
    if event.type == EventType.OMBUDS:
        return 0.0, "You do not lose points for missing an ombuds event"

    if event.type == EventType.SECTIONAL:
        if week.attended_sectional():
            return 0.0, "No deduction because you attended a different sectional this week"

        excuse = excused_from_sectional_penalty(event, week, as_of)
        if excuse is not None:
            return excuse

    if attendance.approved_absence:
        return 0.0, "No deduction because an absence request was submitted and approved"

    return -float(event.points), "Full deduction for unexcused absence from event"


def excused_from_sectional_penalty(event: Event, week: WeekOfEvents, as_of: datetime) -> Optional[Outcome]:
    # Only one missed sectional per week costs points
    first_missed = week.first_missed_sectional()
    if first_missed is not None and first_missed[0].call_time < event.call_time:
        return 0.0, "No deduction because you already lost points for one sectional this week"

    last = week.last_sectional()
    if last is not None:
        last_call_time = last[0].call_time
        if last_call_time > event.call_time and last_call_time > as_of:
            return 0.0, "No deduction because not all sectionals occurred yet"

    return None

# grease/core/grades/session.py
import logging
from datetime import datetime
from typing import Iterable

from grease.core.grades.calculator import MAX_GRADE, calculate_grade_change
from grease.core.grades.week import EventWithAttendance, weeks_of_events
from grease.schemas.grades import EventWithGradeChange, Grades

logger = logging.getLogger(__name__)


def grades_for_member(
    member: str,
    semester: str,
    events_with_attendance: Iterable[EventWithAttendance],
    as_of: datetime,
) -> Grades:
    """Grade one member over one semester.

    Walks the semester week by week, feeding each event's resulting score
    into the next one, starting from a perfect 100.
    """
    grade = MAX_GRADE
    volunteer_gigs_attended = 0
    events_with_changes = []

    for week in weeks_of_events(events_with_attendance):
        for event, attendance in week:
            change = calculate_grade_change(event, attendance, week, grade, as_of)
            grade = change.partial_score

            if week.attended_volunteer_gig(event, attendance):
                volunteer_gigs_attended += 1
            events_with_changes.append(EventWithGradeChange(event=event, change=change))

    logger.debug(
        f"Graded {member} for {semester}: {grade:.2f} over {len(events_with_changes)} events, "
        f"{volunteer_gigs_attended} volunteer gigs"
    )
    return Grades(
        final_grade=grade,
        volunteer_gigs_attended=volunteer_gigs_attended,
        events_with_changes=events_with_changes,
    )

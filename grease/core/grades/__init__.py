# grease/core/grades/__init__.py
from grease.core.grades.calculator import calculate_grade_change
from grease.core.grades.session import grades_for_member
from grease.core.grades.week import WeekOfEvents, deny_credit, weeks_of_events

__all__ = ["calculate_grade_change", "grades_for_member", "WeekOfEvents", "deny_credit", "weeks_of_events"]

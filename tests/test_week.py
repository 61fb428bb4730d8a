"""
Test: splitting events into weeks and the per-week questions graders ask.
"""
from datetime import datetime, timedelta

from grease.core.grades.week import WeekOfEvents, deny_credit, start_of_week, weeks_of_events
from grease.schemas.event import EventType

SUNDAY = datetime(2026, 3, 15)


def week_of(*pairs):
    return WeekOfEvents(SUNDAY, list(pairs))


class TestStartOfWeek:
    def test_friday_goes_back_to_sunday_midnight(self):
        assert start_of_week(datetime(2026, 3, 20, 12, 30)) == SUNDAY

    def test_sunday_is_its_own_start(self):
        assert start_of_week(datetime(2026, 3, 15, 18, 0)) == SUNDAY

    def test_saturday_night_still_same_week(self):
        assert start_of_week(datetime(2026, 3, 21, 23, 59)) == SUNDAY


class TestWeeksOfEvents:
    def test_empty_input_has_no_weeks(self):
        assert list(weeks_of_events([])) == []

    def test_single_event(self, make_event):
        event = make_event()
        weeks = list(weeks_of_events([(event, None)]))
        assert len(weeks) == 1
        assert weeks[0].start == SUNDAY
        assert weeks[0].events_with_attendance == [(event, None)]

    def test_weeks_without_events_are_skipped(self, make_event):
        first = make_event(call_time=datetime(2026, 3, 3, 19, 0))
        second = make_event(call_time=datetime(2026, 3, 24, 19, 0))
        weeks = list(weeks_of_events([(first, None), (second, None)]))
        assert [week.start for week in weeks] == [datetime(2026, 3, 1), datetime(2026, 3, 22)]

    def test_next_sunday_midnight_starts_a_new_week(self, make_event):
        saturday = make_event(call_time=datetime(2026, 3, 21, 23, 59))
        sunday = make_event(call_time=datetime(2026, 3, 22, 0, 0))
        weeks = list(weeks_of_events([(saturday, None), (sunday, None)]))
        assert [len(week) for week in weeks] == [1, 1]
        assert weeks[1].start == datetime(2026, 3, 22)

    def test_unsorted_input_is_put_in_call_time_order(self, make_event):
        late = make_event(call_time=datetime(2026, 3, 19, 19, 0))
        early = make_event(call_time=datetime(2026, 3, 16, 19, 0))
        other_week = make_event(call_time=datetime(2026, 3, 2, 19, 0))
        weeks = list(weeks_of_events([(late, None), (other_week, None), (early, None)]))
        assert [[event.id for event, _ in week] for week in weeks] == [[other_week.id], [early.id, late.id]]

    def test_every_event_lands_in_exactly_one_week(self, make_event):
        events = [make_event(call_time=datetime(2026, 1, 6, 19, 0) + timedelta(days=3 * i)) for i in range(30)]
        weeks = list(weeks_of_events([(event, None) for event in events]))
        seen = [event.id for week in weeks for event, _ in week]
        assert seen == [event.id for event in events]
        for week in weeks:
            assert all(week.start <= event.call_time < week.end for event, _ in week)


class TestDenyCredit:
    def test_no_attendance_never_denies_credit(self):
        assert not deny_credit(None)

    def test_expected_and_absent(self, make_event, make_attendance):
        assert deny_credit(make_attendance(make_event()))

    def test_attended(self, make_event, make_attendance):
        assert not deny_credit(make_attendance(make_event(), did_attend=True))

    def test_not_expected(self, make_event, make_attendance):
        assert not deny_credit(make_attendance(make_event(), should_attend=False))

    def test_approved_absence(self, make_event, make_attendance):
        assert not deny_credit(make_attendance(make_event(), approved_absence=True))


class TestWeekQueries:
    def test_missed_rehearsal(self, make_event, make_attendance):
        rehearsal = make_event()
        assert week_of((rehearsal, make_attendance(rehearsal))).missed_rehearsal()
        assert not week_of((rehearsal, make_attendance(rehearsal, did_attend=True))).missed_rehearsal()

    def test_missed_sectional_is_not_a_missed_rehearsal(self, make_event, make_attendance):
        sectional = make_event(type=EventType.SECTIONAL)
        assert not week_of((sectional, make_attendance(sectional))).missed_rehearsal()

    def test_first_missed_sectional_is_earliest(self, make_event, make_attendance):
        attended = make_event(type=EventType.SECTIONAL, call_time=datetime(2026, 3, 15, 14, 0))
        first = make_event(type=EventType.SECTIONAL, call_time=datetime(2026, 3, 16, 19, 0))
        second = make_event(type=EventType.SECTIONAL, call_time=datetime(2026, 3, 18, 19, 0))
        week = week_of(
            (attended, make_attendance(attended, did_attend=True)),
            (first, make_attendance(first)),
            (second, make_attendance(second)),
        )
        assert week.first_missed_sectional()[0] == first

    def test_no_missed_sectional(self, make_event, make_attendance):
        sectional = make_event(type=EventType.SECTIONAL)
        assert week_of((sectional, make_attendance(sectional, did_attend=True))).first_missed_sectional() is None

    def test_attended_sectional_is_true_for_a_missed_sectional_only(self, make_event, make_attendance):
        # Pins current behaviour: the check looks for a sectional that
        # denies credit, so a week where the only sectional was skipped
        # counts as "attended a sectional".
        sectional = make_event(type=EventType.SECTIONAL)
        assert week_of((sectional, make_attendance(sectional))).attended_sectional()

    def test_attended_sectional_is_false_when_the_sectional_was_attended(self, make_event, make_attendance):
        sectional = make_event(type=EventType.SECTIONAL)
        assert not week_of((sectional, make_attendance(sectional, did_attend=True))).attended_sectional()

    def test_last_sectional(self, make_event, make_attendance):
        first = make_event(type=EventType.SECTIONAL, call_time=datetime(2026, 3, 16, 19, 0))
        rehearsal = make_event(call_time=datetime(2026, 3, 17, 19, 0))
        last = make_event(type=EventType.SECTIONAL, call_time=datetime(2026, 3, 18, 19, 0))
        week = week_of((first, None), (rehearsal, None), (last, None))
        assert [event for event, _ in week.sectionals()] == [first, last]
        assert week.last_sectional()[0] == last
        assert week_of((rehearsal, None)).last_sectional() is None


class TestIsBonusEvent:
    def test_volunteer_gig_and_ombuds(self, make_event, make_attendance):
        for event_type in (EventType.VOLUNTEER_GIG, EventType.OMBUDS):
            event = make_event(type=event_type)
            attendance = make_attendance(event, did_attend=True)
            assert week_of((event, attendance)).is_bonus_event(event, attendance)

    def test_other_only_when_not_expected(self, make_event, make_attendance):
        event = make_event(type=EventType.OTHER)
        optional = make_attendance(event, should_attend=False, did_attend=True)
        required = make_attendance(event, did_attend=True)
        assert week_of((event, optional)).is_bonus_event(event, optional)
        assert not week_of((event, required)).is_bonus_event(event, required)

    def test_sectional_unless_one_was_missed(self, make_event, make_attendance):
        missed = make_event(type=EventType.SECTIONAL, call_time=datetime(2026, 3, 16, 19, 0))
        extra = make_event(type=EventType.SECTIONAL, call_time=datetime(2026, 3, 18, 19, 0))
        extra_attendance = make_attendance(extra, did_attend=True)

        assert week_of((extra, extra_attendance)).is_bonus_event(extra, extra_attendance)
        assert not week_of(
            (missed, make_attendance(missed)), (extra, extra_attendance)
        ).is_bonus_event(extra, extra_attendance)

    def test_required_events_are_not_bonus(self, make_event, make_attendance):
        for event_type in (EventType.REHEARSAL, EventType.TUTTI_GIG):
            event = make_event(type=event_type)
            attendance = make_attendance(event, did_attend=True)
            assert not week_of((event, attendance)).is_bonus_event(event, attendance)


class TestAttendedVolunteerGig:
    def test_counts_attended_gig(self, make_event, make_attendance):
        gig = make_event(type=EventType.VOLUNTEER_GIG, gig_count=True)
        attendance = make_attendance(gig, did_attend=True)
        assert week_of((gig, attendance)).attended_volunteer_gig(gig, attendance)

    def test_gig_must_count(self, make_event, make_attendance):
        gig = make_event(type=EventType.VOLUNTEER_GIG, gig_count=False)
        attendance = make_attendance(gig, did_attend=True)
        assert not week_of((gig, attendance)).attended_volunteer_gig(gig, attendance)

    def test_not_counted_after_missed_rehearsal(self, make_event, make_attendance):
        rehearsal = make_event(call_time=datetime(2026, 3, 16, 19, 0))
        gig = make_event(type=EventType.VOLUNTEER_GIG, gig_count=True, call_time=datetime(2026, 3, 18, 19, 0))
        attendance = make_attendance(gig, did_attend=True)
        week = week_of((rehearsal, make_attendance(rehearsal)), (gig, attendance))
        assert not week.attended_volunteer_gig(gig, attendance)

    def test_no_attendance(self, make_event):
        gig = make_event(type=EventType.VOLUNTEER_GIG, gig_count=True)
        assert not week_of((gig, None)).attended_volunteer_gig(gig, None)

"""
Shared fixtures.

Engine tests build pydantic records straight from the factories below.
API tests run against an in-memory SQLite database with the clock pinned
to NOW (Friday 20 March 2026, noon) through the get_now dependency.
"""
import itertools
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from grease.api.deps import get_db, get_now
from grease.core.security import create_access_token, get_password_hash
from grease.db import ActiveSemester, Base, Member, Semester
from grease.main import app
from grease.schemas.attendance import Attendance
from grease.schemas.event import Event, EventType

NOW = datetime(2026, 3, 20, 12, 0)
SEMESTER = "Spring 2026"
MEMBER_EMAIL = "tenor@grease.test"


# ==========================
# Engine records
# ==========================

@pytest.fixture
def make_event():
    """Factory for Event records; defaults to a 10-point Tuesday rehearsal this week."""
    ids = itertools.count(1)

    def _make(type=EventType.REHEARSAL, call_time=datetime(2026, 3, 17, 19, 0), points=10, **fields):
        event_id = next(ids)
        fields.setdefault("name", f"{EventType.parse(type).value} #{event_id}")
        return Event(id=event_id, semester=SEMESTER, type=type, call_time=call_time, points=points, **fields)

    return _make


@pytest.fixture
def make_attendance():
    """Factory for Attendance records; defaults to expected but absent."""
    def _make(event, **fields):
        return Attendance(member=MEMBER_EMAIL, event=event.id, **fields)

    return _make


# ==========================
# Database + API
# ==========================

@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_now] = lambda: NOW
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def semester(db):
    row = Semester(
        name=SEMESTER,
        start_date=datetime(2026, 1, 5),
        end_date=datetime(2026, 5, 1),
        gig_requirement=5,
        current=True,
    )
    db.add(row)
    db.commit()
    return row


@pytest.fixture
def make_member(db):
    def _make(email, role="member", active_in=None):
        member = Member(
            email=email,
            first_name=email.split("@")[0].title(),
            last_name="Singer",
            hashed_password=get_password_hash("secret"),
            role=role,
        )
        db.add(member)
        if active_in:
            db.add(ActiveSemester(member=email, semester=active_in, enrollment="class"))
        db.commit()
        return member

    return _make


@pytest.fixture
def officer(make_member, semester):
    return make_member("president@grease.test", role="officer", active_in=semester.name)


@pytest.fixture
def member(make_member, semester):
    return make_member(MEMBER_EMAIL, active_in=semester.name)


def auth_headers(email):
    return {"Authorization": f"Bearer {create_access_token(email)}"}


@pytest.fixture
def headers_for():
    return auth_headers


@pytest.fixture
def officer_headers(officer):
    return auth_headers(officer.email)


@pytest.fixture
def member_headers(member):
    return auth_headers(member.email)

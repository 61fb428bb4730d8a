import logging
from datetime import datetime

from sqlalchemy.orm import Session
from grease.db.models.member import Member
from grease.db.models.semester import Semester, ActiveSemester
from grease.crud import attendance as crud_attendance

logger = logging.getLogger(__name__)


def get_semester(db: Session, name: str):
    return db.query(Semester).filter(Semester.name == name).first()


def get_current_semester(db: Session):
    return db.query(Semester).filter(Semester.current.is_(True)).first()


def get_all_semesters(db: Session):
    return db.query(Semester).order_by(Semester.start_date).all()


def create_semester(db: Session, semester_data):
    db_semester = Semester(**semester_data.model_dump(), current=False)
    db.add(db_semester)
    db.commit()
    db.refresh(db_semester)
    return db_semester


def set_current_semester(db: Session, semester: Semester):
    # only one semester may be current
    db.query(Semester).filter(Semester.name != semester.name).update({Semester.current: False})
    semester.current = True
    db.commit()
    db.refresh(semester)
    logger.info(f"Current semester is now {semester.name}")
    return semester


def get_active_semester(db: Session, member: str, semester: str):
    return db.query(ActiveSemester).filter(
        ActiveSemester.member == member,
        ActiveSemester.semester == semester,
    ).first()


def is_active(db: Session, member: str, semester: str) -> bool:
    return get_active_semester(db, member, semester) is not None


def get_active_members(db: Session, semester: str):
    return (
        db.query(Member)
        .join(ActiveSemester, ActiveSemester.member == Member.email)
        .filter(ActiveSemester.semester == semester)
        .order_by(Member.last_name, Member.first_name)
        .all()
    )


def mark_member_active(db: Session, member: str, semester: str, data, now: datetime):
    """Make a member active for a semester, or update their enrollment if they already are."""
    active = get_active_semester(db, member, semester)
    if active:
        active.enrollment = data.enrollment
        active.section = data.section
        db.commit()
        db.refresh(active)
        return active

    active = ActiveSemester(member=member, semester=semester,
                            enrollment=data.enrollment, section=data.section)
    db.add(active)
    crud_attendance.create_for_new_member(db, member, semester, now)
    db.commit()
    db.refresh(active)
    logger.info(f"{member} is now active for {semester} ({data.enrollment})")
    return active

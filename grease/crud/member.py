from sqlalchemy.orm import Session
from grease.db.models.member import Member
from grease.core.security import get_password_hash


def get_member_by_email(db: Session, email: str):
    return db.query(Member).filter(Member.email == email).first()


def get_all_members(db: Session):
    return db.query(Member).order_by(Member.last_name, Member.first_name).all()


def create_member(db: Session, member_data, role: str = "member"):
    db_member = Member(
        email=member_data.email,
        hashed_password=get_password_hash(member_data.password),
        first_name=member_data.first_name,
        last_name=member_data.last_name,
        role=role,
    )
    db.add(db_member)
    db.commit()
    db.refresh(db_member)
    return db_member

# grease/api/deps.py
from datetime import datetime
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from grease.core.security import decode_access_token
from grease.crud.member import get_member_by_email
from grease.crud.semester import get_current_semester, get_semester
from grease.db.models.member import Member
from grease.db.session import SessionLocal

bearer_scheme = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_now() -> datetime:
    # Single place the API reads the clock; tests override it
    return datetime.now()


def get_current_member(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Member:
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized
    try:
        email = decode_access_token(credentials.credentials)
    except JWTError:
        raise unauthorized

    member = get_member_by_email(db, email)
    if not member:
        raise unauthorized
    return member


def require_officer(current_member: Member = Depends(get_current_member)) -> Member:
    if current_member.role != "officer":
        raise HTTPException(status_code=403, detail="Officers only")
    return current_member


def semester_or_current(db: Session, name: Optional[str]):
    """The named semester, or the current one when no name is given."""
    semester = get_semester(db, name) if name else get_current_semester(db)
    if not semester:
        detail = f"No semester named {name}" if name else "No current semester set"
        raise HTTPException(status_code=404, detail=detail)
    return semester

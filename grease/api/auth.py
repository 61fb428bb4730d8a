from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from grease.api.deps import get_db, get_current_member
from grease.db.models.member import Member as MemberModel
from grease.schemas.member import MemberCreate, MemberLogin, Member, Token
from grease.crud import member as crud_member
from grease.core.security import verify_password, create_access_token

router = APIRouter()


@router.post("/register", response_model=Token)
def register(member_in: MemberCreate, db: Session = Depends(get_db)):
    if crud_member.get_member_by_email(db, member_in.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    member = crud_member.create_member(db, member_in)
    return {"access_token": create_access_token(member.email), "token_type": "bearer"}


@router.post("/login", response_model=Token)
def login(form: MemberLogin, db: Session = Depends(get_db)):
    member = crud_member.get_member_by_email(db, form.email)
    if not member or not verify_password(form.password, member.hashed_password):
        raise HTTPException(status_code=401, detail="Incorrect email or password")
    return {"access_token": create_access_token(member.email), "token_type": "bearer"}


@router.get("/me", response_model=Member)
def read_me(current_member: MemberModel = Depends(get_current_member)):
    return current_member

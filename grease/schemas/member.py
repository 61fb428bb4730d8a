from pydantic import BaseModel


class MemberCreate(BaseModel):
    email: str
    password: str
    first_name: str
    last_name: str


class MemberLogin(BaseModel):
    email: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str


class Member(BaseModel):
    email: str
    first_name: str
    last_name: str
    role: str  # "member" or "officer"

    class Config:
        from_attributes = True

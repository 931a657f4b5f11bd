from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    # Absent counts as too short, same message as any other failure here
    password: str = Field(default="", min_length=6, validate_default=True)


class TokenResponse(BaseModel):
    token: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    date: Optional[datetime] = None

    class Config:
        from_attributes = True

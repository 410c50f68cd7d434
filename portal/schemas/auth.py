from pydantic import BaseModel, EmailStr, ConfigDict, Field
from typing import Optional
from portal.models.user import UserRole
from datetime import datetime

class UserBase(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1)
    role: UserRole

class RegisterRequest(UserBase):
    # Accepted for form compatibility; passwords are never stored or checked.
    password: Optional[str] = None

class LoginRequest(BaseModel):
    email: EmailStr
    password: Optional[str] = None
    role: UserRole

class UserResponse(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse

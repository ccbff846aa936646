from typing import List, Optional

from pydantic import BaseModel, EmailStr

from .base import CamelModel

# ======================
# USER AUTHENTICATION SCHEMAS
# ======================


class SignupRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    mobile: Optional[str] = None
    password: Optional[str] = None


class SigninRequest(CamelModel):
    email: Optional[EmailStr] = None
    mobile: Optional[str] = None
    password: Optional[str] = None


class TokenData(BaseModel):
    user_id: Optional[int] = None


# ======================
# PROFILE SCHEMAS
# ======================


class ProfileUpdate(CamelModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    skills_to_teach: Optional[List[str]] = None
    skills_to_learn: Optional[List[str]] = None


class UserOut(CamelModel):
    id: int
    name: str
    email: Optional[str] = None
    mobile: Optional[str] = None
    bio: Optional[str] = None
    skills_to_teach: List[str] = []
    skills_to_learn: List[str] = []
    saved_skills: List[str] = []
    is_profile_complete: bool = False


class UserEnvelope(CamelModel):
    user: UserOut


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserOut


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserOut

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, TypeAdapter, ValidationError, field_validator

from brickly.Models.KycModel import KycStatus
from brickly.Models.UserModel import UserRole
from brickly.Schemas.base import CamelModel

SELF_SERVICE_ROLES = (UserRole.INVESTOR, UserRole.LISTER, UserRole.TENANT)

_EMAIL = TypeAdapter(EmailStr)


class RegisterIn(CamelModel):
    email: str
    password: str = Field(..., min_length=8)
    role: UserRole

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, email: str) -> str:
        # validated, but stored exactly as typed so login can match it
        try:
            _EMAIL.validate_python(email)
        except ValidationError:
            raise ValueError("value is not a valid email address")
        return email

    @field_validator("role")
    @classmethod
    def role_is_self_service(cls, role: UserRole) -> UserRole:
        if role not in SELF_SERVICE_ROLES:
            raise ValueError("role must be one of INVESTOR, LISTER, TENANT")
        return role


class LoginIn(CamelModel):
    email_or_phone: str = Field(..., min_length=3)
    password: str = Field(..., min_length=8)


class UserPublicOut(CamelModel):
    id: str
    email: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole


class UserAdminOut(UserPublicOut):
    created_at: datetime


class MeOut(UserAdminOut):
    email_verified: bool
    kyc_status: Optional[KycStatus] = None

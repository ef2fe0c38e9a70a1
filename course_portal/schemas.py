"""Request and response bodies. JSON keys are camelCase; ids are exposed as ``_id``."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from course_portal.auth.passwords import MAX_PASSWORD_BYTES

MIN_PASSWORD_LENGTH = 6


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _validate_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters.')
    if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValueError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes.')
    return value


class RegisterRequest(CamelModel):
    first_name: str
    last_name: str
    email: EmailStr
    password: str

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Name is required.')
        return normalized

    @field_validator('email', mode='before')
    @classmethod
    def validate_email(cls, value):
        return _normalize_email(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _validate_password(value)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str

    @field_validator('email', mode='before')
    @classmethod
    def validate_email(cls, value):
        return _normalize_email(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError('Password is required.')
        return value


class AccountUser(CamelModel):
    id: str = Field(alias='_id')
    first_name: str
    last_name: str
    is_admin: bool
    is_instructor: bool
    email: str
    email_verified: bool


class UserPublic(AccountUser):
    """Fields safe to hand back to the account owner (no password or refresh token)."""

    avatar: str | None = ''
    address: str | None = ''
    phone_number: str | None = ''
    region: str | None = ''


class AuthResponse(CamelModel):
    success: bool = True
    user: UserPublic
    access_token: str


class AccountResponse(CamelModel):
    success: bool = True
    user: AccountUser


class StudentSummary(CamelModel):
    id: str = Field(alias='_id')
    first_name: str
    last_name: str
    email: str
    is_instructor: bool
    avatar: str | None = ''
    position: str | None = ''
    is_banned: bool


class RosterResponse(CamelModel):
    success: bool = True
    students: list[StudentSummary]

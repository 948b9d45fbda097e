from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

# bcrypt ignores everything past this many bytes
MAX_PASSWORD_BYTES = 72


def _check_password_strength(value: str) -> str:
    if len(value) < 8:
        raise ValueError("Password must be at least 8 characters long")
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")
    if not any(c.isupper() for c in value):
        raise ValueError("Password must contain at least one uppercase letter")
    if not any(c.isdigit() for c in value):
        raise ValueError("Password must contain at least one digit")
    return value


def _check_username(value: str) -> str:
    if len(value) < 3 or len(value) > 30:
        raise ValueError("Username must be between 3 and 30 characters long")
    if not all(c.isalnum() or c in "-_" for c in value):
        raise ValueError("Username can only contain letters, numbers, hyphens, and underscores")
    return value


class UserBase(BaseModel):
    email: EmailStr
    username: str

class UserCreate(UserBase):
    password: str

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)


class UserUpdate(BaseModel):
    email: EmailStr | None = None
    username: str | None = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_username(value)


class PasswordChange(BaseModel):
    current_password: str
    new_password: str

    @field_validator("new_password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)


class UserResponse(UserBase):
    id: int
    created_at: datetime | None = None

    model_config= ConfigDict(from_attributes=True)

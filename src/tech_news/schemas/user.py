"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .post import PostSummary

PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 72
# bcrypt rejects input longer than 72 bytes once encoded.
PASSWORD_MAX_BYTES = 72


def check_password_bytes(password: str) -> str:
    """Reject passwords whose UTF-8 encoding is too long for bcrypt."""
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
    return password


class UserCreate(BaseModel):
    """Schema for signing up."""

    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Plaintext password; hashed before it is stored",
    )

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password_bytes(v)


class UserUpdate(BaseModel):
    """Schema for partial user updates. Only supplied fields change."""

    username: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(
        None,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str | None:
        return v if v is None else check_password_bytes(v)


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class UserResponse(BaseModel):
    """User as returned by the API; the password hash is never included."""

    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class PostTitle(BaseModel):
    """Just enough of a post to link to it."""

    id: int
    title: str

    model_config = ConfigDict(from_attributes=True)


class UserCommentSummary(BaseModel):
    """A user's comment together with the title of the post it was left on."""

    id: int
    comment_text: str
    created_at: datetime
    post: PostTitle

    model_config = ConfigDict(from_attributes=True)


class UserDetailResponse(UserResponse):
    """Single-user view including the user's activity."""

    posts: list[PostSummary] = Field(default_factory=list)
    comments: list[UserCommentSummary] = Field(default_factory=list)
    voted_posts: list[PostTitle] = Field(default_factory=list)


class LoginResponse(BaseModel):
    """Response returned after a successful login."""

    user: UserResponse
    message: str


__all__ = [
    "LoginRequest",
    "LoginResponse",
    "PostTitle",
    "UserCommentSummary",
    "UserCreate",
    "UserDetailResponse",
    "UserResponse",
    "UserUpdate",
]

# src/whycookin/schemas/user.py
"""User, authentication and profile Pydantic schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Credentials(BaseModel):
    """Username and password submitted to register or log in.

    Any other key (including ``role``) is ignored, so registration always
    creates a plain ``user``.
    """

    username: str | None = None
    password: str | None = None


class UserSummary(BaseModel):
    """Identity fields shared by auth and administration responses."""

    id: int
    username: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class RegisterResponse(BaseModel):
    """Token issued at registration together with the new account."""

    token: str
    user: UserSummary


class TokenResponse(BaseModel):
    """Token issued at login."""

    token: str


class UserResponse(BaseModel):
    """Full user record, without the password digest."""

    id: int
    username: str
    role: str
    first_name: str | None
    last_name: str | None
    gender: str | None
    nationalities: list[str]
    ethnicities: list[str]
    birthday: date | None
    country_home: str | None
    country_grew_up_in: str | None
    bio: str | None
    visible_to_others: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoleChangeRequest(BaseModel):
    """Requested role for the target user."""

    role: str | None = None


class RoleChangeResponse(BaseModel):
    """Acknowledgement of a role change."""

    success: bool = True
    updated_user: UserSummary = Field(..., alias="updatedUser")

    model_config = ConfigDict(populate_by_name=True)


class UserDeleted(BaseModel):
    """Response returned after soft-deleting a user."""

    success: bool = True
    deleted: UserSummary


class ProfileUpdateRequest(BaseModel):
    """Self-service profile update in the web client's camelCase shape.

    Every field replaces the stored value; omitted or empty values clear it.
    """

    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    gender: str | None = None
    nationalities: list[str] | None = None
    ethnicities: list[str] | None = None
    birthday: date | None = None
    country_home: str | None = Field(None, alias="countryHome")
    country_grew_up_in: str | None = Field(None, alias="countryGrewUpIn")
    bio: str | None = None
    visible_to_others: bool | None = Field(None, alias="visibleToOthers")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("birthday", mode="before")
    @classmethod
    def _blank_birthday(cls, value: object) -> object:
        if value == "":
            return None
        return value


class ProfileResponse(BaseModel):
    """Updated profile returned in snake_case."""

    id: int
    username: str
    first_name: str | None
    last_name: str | None
    gender: str | None
    nationalities: list[str]
    ethnicities: list[str]
    birthday: date | None
    country_home: str | None
    country_grew_up_in: str | None
    bio: str | None
    visible_to_others: bool

    model_config = ConfigDict(from_attributes=True)

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthRequestDTO(BaseModel):
    """Explicit parameters of an auth request, gathered from query, form and JSON body."""

    model_config = ConfigDict(extra="ignore")

    action: str = ""
    username: str = Field("", max_length=1024)
    password: str = Field("", repr=False)

    @field_validator("action", "username", "password", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class AuthResponseDTO(BaseModel):
    success: bool
    message: str


class WhoAmIResponseDTO(AuthResponseDTO):
    username: str | None = None

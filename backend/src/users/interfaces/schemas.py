from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from users.domain.entities import UserCandidate


class UserRequest(BaseModel):
    """Body of the create and edit endpoints.

    Every field is optional here; presence is checked by the validator so
    that a missing field yields ``ValidationError`` rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    username: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    password: str | None = None

    def to_candidate(self) -> UserCandidate:
        return UserCandidate(
            email=self.email,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            password=self.password,
        )


class SuccessResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str

from dataclasses import astuple, dataclass, field


@dataclass
class UserCandidate:
    """User fields as received from a client, before validation."""

    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    password: str | None = None

    def is_complete(self) -> bool:
        return all(astuple(self))


@dataclass
class User:
    email: str
    username: str
    first_name: str
    last_name: str
    password: str
    id: int | None = field(default=None)

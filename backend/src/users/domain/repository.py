from typing import Protocol

from users.domain.entities import User, UserCandidate


class UserRepository(Protocol):
    async def find_by_email_or_username(
        self, email: str, username: str, exclude_id: int | None = None
    ) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def create(self, candidate: UserCandidate) -> User | None: ...

    async def update(self, user_id: int, candidate: UserCandidate) -> User | None: ...

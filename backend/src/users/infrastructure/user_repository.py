from sqlalchemy import case, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from users.domain.entities import User, UserCandidate
from users.infrastructure.orm_models import UserModel


class DbUserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_email_or_username(
        self, email: str, username: str, exclude_id: int | None = None
    ) -> User | None:
        query = select(UserModel).where(
            or_(UserModel.email == email, UserModel.username == username)
        )
        if exclude_id is not None:
            query = query.where(UserModel.id != exclude_id)
        # an email match outranks a username match on a different row
        query = query.order_by(case((UserModel.email == email, 0), else_=1), UserModel.id)
        result = await self.session.execute(query.limit(1))
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def create(self, candidate: UserCandidate) -> User | None:
        result = await self.session.execute(
            insert(UserModel).values(_to_values(candidate)).returning(UserModel)
        )
        model = result.scalar_one_or_none()
        user = _to_entity(model) if model else None
        await self.session.commit()
        return user

    async def update(self, user_id: int, candidate: UserCandidate) -> User | None:
        result = await self.session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(_to_values(candidate))
            .returning(UserModel)
        )
        model = result.scalar_one_or_none()
        if model is None:
            await self.session.rollback()
            return None

        user = _to_entity(model)
        await self.session.commit()
        return user


def _to_values(candidate: UserCandidate) -> dict:
    return {
        UserModel.email: candidate.email,
        UserModel.username: candidate.username,
        UserModel.first_name: candidate.first_name,
        UserModel.last_name: candidate.last_name,
        UserModel.password: candidate.password,
    }


def _to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        email=model.email,
        username=model.username,
        first_name=model.first_name,
        last_name=model.last_name,
        password=model.password,
    )

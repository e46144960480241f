from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shared.infrastructure.database import Database
from users.infrastructure.user_repository import DbUserRepository


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_factory() as session:
        yield session


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> DbUserRepository:
    return DbUserRepository(db)

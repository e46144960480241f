from loguru import logger

from shared.exceptions import AppError, NotFoundError, ValidationError
from users.application.validation import validate_user
from users.domain.entities import User, UserCandidate
from users.domain.repository import UserRepository


def to_public(user: User) -> dict[str, str]:
    """Client-safe projection returned by create and update."""
    return {
        "email": user.email,
        "username": user.username,
        "firstName": user.first_name,
        "lastName": user.last_name,
    }


def to_record(user: User) -> dict[str, str | int | None]:
    """Full stored row, as returned by the email lookup."""
    return {
        "id": user.id,
        "email": user.email,
        "username": user.username,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "password": user.password,
    }


async def create_user(repo: UserRepository, candidate: UserCandidate) -> dict[str, str]:
    error = await validate_user(repo, candidate)
    if error is not None:
        raise AppError.from_kind(error)

    user = await repo.create(candidate)
    if user is None:
        raise NotFoundError()

    logger.bind(user_id=user.id).info("user.created")
    return to_public(user)


async def update_user(
    repo: UserRepository, user_id: int, candidate: UserCandidate
) -> dict[str, str]:
    # Full replace: every field is required, even when unchanged.
    error = await validate_user(repo, candidate, exclude_id=user_id)
    if error is not None:
        raise AppError.from_kind(error)

    user = await repo.update(user_id, candidate)
    if user is None:
        logger.bind(user_id=user_id).info("user.update.missing")
        raise NotFoundError()

    logger.bind(user_id=user.id).info("user.updated")
    return to_public(user)


async def get_user_by_email(
    repo: UserRepository, email: str | None
) -> dict[str, str | int | None]:
    if not email:
        raise ValidationError()

    user = await repo.get_by_email(email)
    if user is None:
        raise NotFoundError()
    return to_record(user)

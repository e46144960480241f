"""Required-field and uniqueness checks for incoming user records.

The checks return an ``ErrorKind`` instead of raising so that the caller
decides how the failure propagates. The uniqueness lookup is not
transactional: two concurrent requests can both pass it, in which case the
unique constraints on the ``users`` table reject the second write.

On update the row being replaced is left out of the lookup (``exclude_id``),
so resending a user's own email or username is not a conflict. Any other
matching row still is.
"""

from loguru import logger

from shared.exceptions import ErrorKind
from users.domain.entities import UserCandidate
from users.domain.repository import UserRepository


async def validate_user(
    repo: UserRepository,
    candidate: UserCandidate,
    exclude_id: int | None = None,
) -> ErrorKind | None:
    if not candidate.is_complete():
        logger.bind(reason="missing_fields").info("user.validation.rejected")
        return ErrorKind.VALIDATION_ERROR

    existing = await repo.find_by_email_or_username(
        candidate.email, candidate.username, exclude_id=exclude_id
    )
    if existing is None:
        return None

    # email wins when a single row matches both
    if existing.email == candidate.email:
        logger.bind(reason="email_taken").info("user.validation.rejected")
        return ErrorKind.EMAIL_CONFLICT
    if existing.username == candidate.username:
        logger.bind(reason="username_taken").info("user.validation.rejected")
        return ErrorKind.USERNAME_CONFLICT
    return None

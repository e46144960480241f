from fastapi import APIRouter, Depends

from shared.dependencies import get_user_repository
from users.application.services import create_user, get_user_by_email, update_user
from users.infrastructure.user_repository import DbUserRepository
from users.interfaces.schemas import ErrorResponse, SuccessResponse, UserRequest

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("/new", response_model=SuccessResponse)
async def create(
    body: UserRequest,
    repo: DbUserRepository = Depends(get_user_repository),
):
    data = await create_user(repo, body.to_candidate())
    return SuccessResponse(data=data)


@router.post("/edit/{user_id}", response_model=SuccessResponse)
async def edit(
    user_id: int,
    body: UserRequest,
    repo: DbUserRepository = Depends(get_user_repository),
):
    data = await update_user(repo, user_id, body.to_candidate())
    return SuccessResponse(data=data)


@router.get("", response_model=SuccessResponse)
async def lookup(
    email: str | None = None,
    repo: DbUserRepository = Depends(get_user_repository),
):
    data = await get_user_by_email(repo, email)
    return SuccessResponse(data=data)

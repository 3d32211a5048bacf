# blogapi/routes/user.py

"""User Routes: registration and lookup of blog owners."""

from typing import Annotated

from fastapi import APIRouter, Path, Query, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from blogapi.configs.settings import MAX_USERNAME_LENGTH, USERNAME_PATTERN
from blogapi.dependencies import UserServiceDep
from blogapi.managers import limiter, read_limit, write_limit
from blogapi.schemas import UserModel

router = APIRouter(prefix="/users", tags=["👤 Users"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserModel],
    summary="List all users",
    operation_id="users_get_all",
    name="users_get_all",
)
@limiter.limit(read_limit)
async def all_users(request: Request, service: UserServiceDep) -> list[UserModel]:
    return await service.list_users()


@router.get(
    "/{user_name}",
    response_class=ORJSONResponse,
    response_model=UserModel,
    summary="Get user by name",
    responses={
        404: {
            "description": "User not found",
            "content": {"text/plain": {"example": "Error: User was not found"}},
        },
    },
    operation_id="users_get_by_name",
    name="users_get_by_name",
)
@limiter.limit(read_limit)
async def user_by_name(
    request: Request,
    user_name: Annotated[str, Path(description="Username")],
    service: UserServiceDep,
) -> UserModel:
    return await service.get_user(user_name)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserModel,
    status_code=HTTP_201_CREATED,
    summary="Create user",
    responses={
        400: {
            "description": "Username taken",
            "content": {"text/plain": {"example": "Error: User name already exists"}},
        },
    },
    operation_id="users_create",
    name="users_create",
)
@limiter.limit(write_limit)
async def create_user(
    request: Request,
    response: Response,
    user_name: Annotated[
        str,
        Query(
            alias="userName",
            min_length=1,
            max_length=MAX_USERNAME_LENGTH,
            pattern=USERNAME_PATTERN,
        ),
    ],
    service: UserServiceDep,
) -> UserModel:
    """
    Register a username. The `Location` header points at `GET /users/{userName}`.

    Raises
    ------
    UserAlreadyExistsError
        If the username is taken (400).
    """
    user = await service.create_user(user_name)
    response.headers["Location"] = user.link("self")
    return user

# blogapi/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints and lookups for blogs owned by users.

Summary
-------
Endpoints include:
  - List all blogs
  - Find blogs by title
  - Find blogs by user
  - Get blog by id
  - Add blog to user
  - Rename blog
  - Delete blog from user

Errors
------
Routes never build error responses. `BlogService` raises typed errors
(`UserNotFoundError`, `BlogNotFoundError`, `BlogAlreadyExistsError`) which the
handlers registered in `blogapi.main` turn into plain-text 404/400 responses.

Rate Limiting
-------------
Read endpoints use `read_limit`, write endpoints `write_limit`; both are
higher when `X-API-Key` is present.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Query, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from blogapi.configs.settings import MAX_TITLE_LENGTH, MAX_USERNAME_LENGTH, USERNAME_PATTERN
from blogapi.dependencies import BlogServiceDep
from blogapi.managers import limiter, read_limit, write_limit
from blogapi.schemas import BlogCollectionModel, BlogModel, UserModel

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

UserNameQuery = Annotated[
    str,
    Query(
        alias="userName",
        min_length=1,
        max_length=MAX_USERNAME_LENGTH,
        pattern=USERNAME_PATTERN,
        description="Username of the blog's owner",
    ),
]
BlogTitleQuery = Annotated[
    str,
    Query(alias="blogTitle", min_length=1, max_length=MAX_TITLE_LENGTH, description="Blog title"),
]

NOT_FOUND_RESPONSE = {
    "description": "User or blog not found",
    "content": {"text/plain": {"example": "Error: User was not found"}},
}
ALREADY_EXISTS_RESPONSE = {
    "description": "Duplicate title for this user",
    "content": {"text/plain": {"example": "Error: User contains blog with the same name"}},
}
RATE_LIMIT_RESPONSE = {
    "description": "Rate limit exceeded",
    "content": {"text/plain": {"example": "Rate limit exceeded: 5 per 1 minute"}},
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=BlogCollectionModel,
    summary="List all blogs",
    description="Get info about every blog in the repository.",
    responses={429: RATE_LIMIT_RESPONSE},
    operation_id="blogs_get_all",
    name="blogs_get_all",
)
@limiter.limit(read_limit)
async def all_blogs_info(request: Request, service: BlogServiceDep) -> BlogCollectionModel:
    """
    List all blogs.

    Examples
    --------
    Request
        GET /blogs
    Response
        200 OK
        {"_embedded": {"blogs": [...]}, "_links": {"self": {"href": ".../blogs"}}}
    """
    return await service.list_blogs()


@router.get(
    "/title/{title}",
    response_class=ORJSONResponse,
    response_model=BlogCollectionModel,
    summary="Find blogs by title",
    description="Get every blog whose title is exactly `title`, across all users.",
    responses={429: RATE_LIMIT_RESPONSE},
    operation_id="blogs_get_by_title",
    name="blogs_get_by_title",
)
@limiter.limit(read_limit)
async def blogs_by_title(
    request: Request,
    title: Annotated[str, Path(description="Exact blog title")],
    service: BlogServiceDep,
) -> BlogCollectionModel:
    """Find blogs by title. An unknown title yields an empty collection."""
    return await service.find_by_title(title)


@router.get(
    "/user/{user_name}",
    response_class=ORJSONResponse,
    response_model=BlogCollectionModel,
    summary="Find blogs by user",
    description="Get all blogs owned by a user.",
    responses={404: NOT_FOUND_RESPONSE, 429: RATE_LIMIT_RESPONSE},
    operation_id="blogs_get_by_user",
    name="blogs_get_by_user",
)
@limiter.limit(read_limit)
async def blogs_by_user(
    request: Request,
    user_name: Annotated[str, Path(description="Username")],
    service: BlogServiceDep,
) -> BlogCollectionModel:
    """
    Find blogs by user.

    Raises
    ------
    UserNotFoundError
        If the username is unknown (404).
    """
    return await service.find_by_user(user_name)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogModel,
    summary="Get blog by ID",
    description="Retrieve a single blog by its numeric ID.",
    responses={404: NOT_FOUND_RESPONSE, 429: RATE_LIMIT_RESPONSE},
    operation_id="blogs_get_by_id",
    name="blogs_get_by_id",
)
@limiter.limit(read_limit)
async def blog_by_id(
    request: Request,
    blog_id: Annotated[int, Path(description="Blog ID")],
    service: BlogServiceDep,
) -> BlogModel:
    """
    Get blog by ID.

    Raises
    ------
    BlogNotFoundError
        If no blog has this ID (404).
    """
    return await service.get_blog(blog_id)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogModel,
    status_code=HTTP_201_CREATED,
    summary="Add blog to user",
    description="Create a blog titled `blogTitle` owned by `userName`.",
    responses={
        400: ALREADY_EXISTS_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_add",
    name="blogs_add",
)
@limiter.limit(write_limit)
async def add_blog_to_user(
    request: Request,
    response: Response,
    user_name: UserNameQuery,
    blog_title: BlogTitleQuery,
    service: BlogServiceDep,
) -> BlogModel:
    """
    Add a blog to a user.

    The `Location` header points at the new blog's `GET /blogs/{id}` URL.

    Examples
    --------
    Request
        POST /blogs?userName=alice&blogTitle=Travel
    Response
        201 Created
        Location: http://testserver/blogs/1
    """
    blog = await service.add_blog(user_name, blog_title)
    response.headers["Location"] = blog.link("self")
    return blog


@router.put(
    "",
    response_class=ORJSONResponse,
    response_model=BlogModel,
    summary="Rename blog",
    description="Rename the blog `oldName` owned by `userName` to `newName`.",
    responses={
        400: ALREADY_EXISTS_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_rename",
    name="blogs_rename",
)
@limiter.limit(write_limit)
async def rename_blog(
    request: Request,
    user_name: UserNameQuery,
    old_name: Annotated[
        str,
        Query(alias="oldName", min_length=1, max_length=MAX_TITLE_LENGTH),
    ],
    new_name: Annotated[
        str,
        Query(alias="newName", min_length=1, max_length=MAX_TITLE_LENGTH),
    ],
    service: BlogServiceDep,
) -> BlogModel:
    """Rename a blog; its ID does not change."""
    return await service.rename_blog(user_name, old_name, new_name)


@router.delete(
    "",
    response_class=ORJSONResponse,
    response_model=UserModel,
    summary="Delete blog from user",
    description="Delete the blog `blogTitle` owned by `userName`; returns the updated user.",
    responses={404: NOT_FOUND_RESPONSE, 429: RATE_LIMIT_RESPONSE},
    operation_id="blogs_delete",
    name="blogs_delete",
)
@limiter.limit(write_limit)
async def delete_blog_from_user(
    request: Request,
    user_name: UserNameQuery,
    blog_title: BlogTitleQuery,
    service: BlogServiceDep,
) -> UserModel:
    """Delete a blog and return its owner's model."""
    return await service.delete_blog(user_name, blog_title)

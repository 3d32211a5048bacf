"""User resource models."""

from pydantic import ConfigDict, Field

from blogapi.schemas.links import LinkedModel


class UserModel(LinkedModel):
    """User projection listing the titles of the blogs the user owns."""

    id: int = Field(description="User ID")
    username: str = Field(alias="userName", description="Username", examples=["alice"])
    blogs: list[str] = Field(default_factory=list, description="Titles of the user's blogs")
    created_at: str = Field(alias="createdAt", description="Creation timestamp")
    updated_at: str = Field(alias="updatedAt", description="Last update timestamp")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "userName": "alice",
                "blogs": ["Travel"],
                "createdAt": "2025-01-01 10:00:00",
                "updatedAt": "2025-01-01 10:05:00",
                "_links": {
                    "self": {"href": "http://localhost:8000/users/alice"},
                    "blogs": {"href": "http://localhost:8000/blogs/user/alice"},
                    "users": {"href": "http://localhost:8000/users"},
                },
            },
        },
    )

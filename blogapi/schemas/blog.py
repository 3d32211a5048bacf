"""
Blog resource models.

`BlogModel` is the transport projection of a `BlogDB` row; collections are
wrapped HAL-style under `_embedded.blogs`.
"""

from pydantic import BaseModel, ConfigDict, Field

from blogapi.schemas.links import LinkedModel, Links


class BlogModel(LinkedModel):
    """Blog projection with navigation links."""

    id: int = Field(description="Blog ID")
    title: str = Field(description="Blog title", examples=["Travel"])
    creator: str = Field(description="Username of the blog's creator", examples=["alice"])
    created_at: str = Field(alias="createdAt", description="Creation timestamp")
    updated_at: str = Field(alias="updatedAt", description="Last update timestamp")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Travel",
                "creator": "alice",
                "createdAt": "2025-01-01 10:00:00",
                "updatedAt": "No updates",
                "_links": {
                    "self": {"href": "http://localhost:8000/blogs/1"},
                    "blogs": {"href": "http://localhost:8000/blogs"},
                    "creator": {"href": "http://localhost:8000/users/alice"},
                    "creatorBlogs": {"href": "http://localhost:8000/blogs/user/alice"},
                },
            },
        },
    )


class BlogEmbedded(BaseModel):
    blogs: list[BlogModel] = Field(default_factory=list)


class BlogCollectionModel(BaseModel):
    """Collection of blog models with a `self` link."""

    model_config = ConfigDict(populate_by_name=True)

    embedded: BlogEmbedded = Field(default_factory=BlogEmbedded, alias="_embedded")
    links: Links = Field(default_factory=dict, alias="_links")

    @property
    def blogs(self) -> list[BlogModel]:
        return self.embedded.blogs

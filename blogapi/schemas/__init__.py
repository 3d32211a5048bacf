from blogapi.schemas.blog import BlogCollectionModel, BlogEmbedded, BlogModel
from blogapi.schemas.factory import BlogModelFactory, UserModelFactory
from blogapi.schemas.health import HealthCheckResponse
from blogapi.schemas.links import Link, LinkedModel
from blogapi.schemas.user import UserModel

__all__ = [
    "BlogCollectionModel",
    "BlogEmbedded",
    "BlogModel",
    "BlogModelFactory",
    "HealthCheckResponse",
    "Link",
    "LinkedModel",
    "UserModel",
    "UserModelFactory",
]

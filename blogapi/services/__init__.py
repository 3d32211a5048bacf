from blogapi.services.blog import BlogService
from blogapi.services.user import UserLookup, UserService

__all__ = ["BlogService", "UserLookup", "UserService"]

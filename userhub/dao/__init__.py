from userhub.dao.base import get_table
from userhub.dao.user_dao import UserDAO

__all__ = [
    "UserDAO",
    "get_table",
]

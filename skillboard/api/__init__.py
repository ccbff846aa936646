# skillboard/api/__init__.py

from . import auth
from . import skill
from . import users

__all__ = ["auth", "users", "skill"]

from .user_schemas import User, UserBase, UserCreate

__all__ = ["User", "UserBase", "UserCreate"]

from users_api.models.user import (
    ErrorMessage,
    Message,
    User,
    UserBase,
    UserCreate,
    UserRead,
)

__all__ = [
    "ErrorMessage",
    "Message",
    "User",
    "UserBase",
    "UserCreate",
    "UserRead",
]

from .base import BaseModel, is_valid_id, new_id
from .user import User, hash_token
from .video import Video

__all__ = [
    "BaseModel",
    "User",
    "Video",
    "hash_token",
    "is_valid_id",
    "new_id",
]

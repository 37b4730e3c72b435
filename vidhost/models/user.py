"""
User model
"""

import hashlib

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from vidhost.models.base import BaseModel


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class User(BaseModel):
    __tablename__ = "users"

    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    avatar = Column(String)
    is_active = Column(Boolean, default=True)

    # Only the digest of the API access token is stored
    token_hash = Column(String(64), unique=True, index=True)

    videos = relationship("Video", back_populates="owner")

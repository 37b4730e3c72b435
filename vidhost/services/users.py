"""
User provisioning for the management script
"""

import logging
import secrets
from typing import Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from vidhost.core.errors import ValidationError
from vidhost.models import User, hash_token

logger = logging.getLogger(__name__)


def issue_token() -> str:
    return secrets.token_urlsafe(32)


def create_user(
    db: Session,
    username: str,
    email: str,
    full_name: str,
    avatar: Optional[str] = None,
) -> Tuple[User, str]:
    """Create a user and return it with its plaintext access token (shown once)"""
    username, email = username.lower(), email.lower()
    existing = db.query(User).filter(or_(User.username == username, User.email == email)).first()
    if existing:
        raise ValidationError(f"User with username {username} or email {email} already exists")

    token = issue_token()
    user = User(
        username=username,
        email=email,
        full_name=full_name,
        avatar=avatar,
        token_hash=hash_token(token),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Created user {user.username} ({user.id})")
    return user, token


def rotate_token(db: Session, user: User) -> str:
    token = issue_token()
    user.token_hash = hash_token(token)
    db.commit()
    return token

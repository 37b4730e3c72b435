"""
Shared FastAPI dependencies
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from vidhost.core.config import settings
from vidhost.core.database import get_db
from vidhost.core.errors import AuthenticationError
from vidhost.models import User, hash_token
from vidhost.services.uploader import MediaStorageService, get_media_storage
from vidhost.services.video_service import VideoService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the requesting user from a bearer token or the accessToken cookie"""
    token = credentials.credentials if credentials else request.cookies.get("accessToken")
    if not token:
        raise AuthenticationError("Unauthorized request")

    user = db.query(User).filter(User.token_hash == hash_token(token)).first()
    if user is None or not user.is_active:
        logger.warning(f"Rejected access token on {request.method} {request.url.path}")
        raise AuthenticationError("Invalid access token")
    return user


def get_video_service(
    db: Session = Depends(get_db),
    storage: MediaStorageService = Depends(get_media_storage),
) -> VideoService:
    return VideoService(
        db,
        storage,
        cleanup_strict=settings.media_cleanup_strict,
        max_page_size=settings.max_page_size,
    )

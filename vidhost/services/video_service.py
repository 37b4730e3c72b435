"""
Video catalog use cases: list, publish, fetch, update, delete, toggle publish.
"""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import asc, desc, or_
from sqlalchemy.orm import Session, joinedload

from vidhost.core.errors import AuthorizationError, NotFoundError, UploadError, ValidationError
from vidhost.models import User, Video, is_valid_id
from vidhost.services.pagination import Page, paginate
from vidhost.services.uploader import MediaStorageService

logger = logging.getLogger(__name__)

# Public sort keys -> columns
SORT_FIELDS = {
    "createdAt": Video.created_at,
    "updatedAt": Video.updated_at,
    "title": Video.title,
    "duration": Video.duration,
}
DEFAULT_SORT_FIELD = "createdAt"


def is_owner(video: Video, requester_id: str) -> bool:
    """Only the user who published a video may change or remove it"""
    return requester_id is not None and video.owner_id == requester_id


def escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class VideoService:
    """Application service for the video catalog"""

    def __init__(self, db: Session, storage: MediaStorageService,
                 cleanup_strict: bool = True, max_page_size: int = 100):
        self.db = db
        self.storage = storage
        self.cleanup_strict = cleanup_strict
        self.max_page_size = max_page_size

    def list_videos(
        self,
        page: int = 1,
        limit: int = 10,
        query: Optional[str] = None,
        sort_by: str = DEFAULT_SORT_FIELD,
        sort_type: str = "asc",
        user_id: Optional[str] = None,
    ) -> Page:
        """
        Published videos, optionally searched and filtered by owner.

        A malformed user_id or an unknown sort_by is ignored rather than rejected.
        """
        filtered = self.db.query(Video).filter(Video.is_published.is_(True))

        if query:
            pattern = f"%{escape_like(query)}%"
            filtered = filtered.filter(or_(
                Video.title.ilike(pattern, escape="\\"),
                Video.description.ilike(pattern, escape="\\"),
            ))

        if user_id and is_valid_id(user_id):
            filtered = filtered.filter(Video.owner_id == user_id)

        column = SORT_FIELDS.get(sort_by, SORT_FIELDS[DEFAULT_SORT_FIELD])
        direction = asc if sort_type == "asc" else desc

        items = (
            filtered.options(joinedload(Video.owner))
            .order_by(direction(column), direction(Video.id))
        )
        return paginate(filtered, items, page, min(limit, self.max_page_size))

    def publish(
        self,
        requester: User,
        title: Optional[str],
        description: Optional[str],
        video_path: Optional[Path],
        thumbnail_path: Optional[Path],
    ) -> Video:
        title, description = _clean(title), _clean(description)
        if not title or not description:
            raise ValidationError("Title and description are required")
        if video_path is None:
            raise ValidationError("Video file is required")
        if thumbnail_path is None:
            raise ValidationError("Thumbnail is required")

        video_file = self.storage.upload(video_path)
        thumbnail = self.storage.upload(thumbnail_path)

        if not video_file or not video_file.url:
            raise UploadError("Video file upload failed")
        if not thumbnail or not thumbnail.url:
            raise UploadError("Thumbnail upload failed")

        video = Video(
            title=title,
            description=description,
            video_file=video_file.url,
            thumbnail=thumbnail.url,
            duration=video_file.duration,
            is_published=True,
            owner_id=requester.id,
        )
        self.db.add(video)
        self.db.commit()
        self.db.refresh(video)

        logger.info(f"User {requester.id} published video {video.id}")
        return video

    def get_video(self, video_id: Optional[str]) -> Video:
        self._check_id(video_id)
        video = (
            self.db.query(Video)
            .options(joinedload(Video.owner))
            .filter(Video.id == video_id)
            .first()
        )
        if not video:
            raise NotFoundError("Video not found")
        return video

    def update_video(
        self,
        requester: User,
        video_id: Optional[str],
        title: Optional[str] = None,
        description: Optional[str] = None,
        thumbnail_path: Optional[Path] = None,
    ) -> Video:
        video = self._get_owned(video_id, requester, "update")

        title, description = _clean(title), _clean(description)
        if not title and not description and thumbnail_path is None:
            raise ValidationError("No fields to update")

        if thumbnail_path is not None:
            thumbnail = self.storage.upload(thumbnail_path)
            if not thumbnail or not thumbnail.url:
                raise UploadError("Error while uploading thumbnail")

            old_thumbnail = video.thumbnail
            if old_thumbnail and not self.storage.delete(old_thumbnail):
                if self.cleanup_strict:
                    raise UploadError("Error while deleting old thumbnail")
                logger.warning(f"Old thumbnail {old_thumbnail} of video {video.id} left in media storage")
            video.thumbnail = thumbnail.url

        if title:
            video.title = title
        if description:
            video.description = description

        self.db.commit()
        self.db.refresh(video)
        return video

    def delete_video(self, requester: User, video_id: Optional[str]) -> None:
        video = self._get_owned(video_id, requester, "delete")

        # Both removals are attempted before either result is acted on
        video_file_deleted = self.storage.delete(video.video_file)
        thumbnail_deleted = self.storage.delete(video.thumbnail)

        if not video_file_deleted:
            raise UploadError("Error deleting video file from media storage")
        if not thumbnail_deleted:
            raise UploadError("Error deleting thumbnail from media storage")

        self.db.delete(video)
        self.db.commit()
        logger.info(f"User {requester.id} deleted video {video_id}")

    def toggle_publish_status(self, requester: User, video_id: Optional[str]) -> Video:
        video = self._get_owned(video_id, requester, "change publish status of")

        video.is_published = not video.is_published
        self.db.commit()
        self.db.refresh(video)

        logger.info(f"Video {video.id} is_published={video.is_published}")
        return video

    def _check_id(self, video_id: Optional[str]) -> None:
        if not video_id:
            raise ValidationError("Video ID is required")
        if not is_valid_id(video_id):
            raise ValidationError("Invalid video id")

    def _get_owned(self, video_id: Optional[str], requester: User, action: str) -> Video:
        self._check_id(video_id)
        video = self.db.get(Video, video_id)
        if not video:
            raise NotFoundError("Video not found")
        if not is_owner(video, requester.id):
            raise AuthorizationError(f"Unauthorized to {action} this video")
        return video

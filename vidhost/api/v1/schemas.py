"""
Request/response schemas for the v1 API
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vidhost.models import User, Video
from vidhost.services.pagination import Page


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OwnerProfile(CamelModel):
    id: str = Field(..., alias="_id")
    full_name: str
    username: str
    avatar: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "OwnerProfile":
        return cls(id=user.id, full_name=user.full_name, username=user.username, avatar=user.avatar)


class VideoResponse(CamelModel):
    id: str = Field(..., alias="_id")
    title: str
    description: str
    video_file: str
    thumbnail: str
    duration: float
    is_published: bool
    # Profile when the owner was joined in, bare id otherwise
    owner: Union[OwnerProfile, str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_video(cls, video: Video, with_owner: bool = False) -> "VideoResponse":
        owner = OwnerProfile.from_user(video.owner) if with_owner and video.owner else video.owner_id
        return cls(
            id=video.id,
            title=video.title,
            description=video.description,
            video_file=video.video_file,
            thumbnail=video.thumbnail,
            duration=video.duration,
            is_published=video.is_published,
            owner=owner,
            created_at=video.created_at,
            updated_at=video.updated_at,
        )


class VideoPageResponse(CamelModel):
    docs: List[VideoResponse]
    total_docs: int
    limit: int
    page: int
    total_pages: int
    paging_counter: int
    has_prev_page: bool
    has_next_page: bool
    prev_page: Optional[int] = None
    next_page: Optional[int] = None

    @classmethod
    def from_page(cls, page: Page) -> "VideoPageResponse":
        return cls(
            docs=[VideoResponse.from_video(video, with_owner=True) for video in page.items],
            total_docs=page.total,
            limit=page.limit,
            page=page.page,
            total_pages=page.total_pages,
            paging_counter=page.paging_counter,
            has_prev_page=page.has_prev_page,
            has_next_page=page.has_next_page,
            prev_page=page.prev_page,
            next_page=page.next_page,
        )

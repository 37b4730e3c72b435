"""
Video catalog endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from vidhost.api.deps import get_current_user, get_video_service
from vidhost.api.v1.schemas import VideoPageResponse, VideoResponse
from vidhost.core.responses import api_response
from vidhost.models import User
from vidhost.services.video_service import DEFAULT_SORT_FIELD, VideoService

router = APIRouter(dependencies=[Depends(get_current_user)])

# Keeps the computed offset inside a 64-bit database integer
MAX_PAGE = 1_000_000


@router.get("")
def list_videos(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1),
    query: Optional[str] = Query(None, description="Case-insensitive match on title or description"),
    sort_by: str = Query(DEFAULT_SORT_FIELD, alias="sortBy"),
    sort_type: str = Query("asc", alias="sortType"),
    user_id: Optional[str] = Query(None, alias="userId", description="Only videos by this owner"),
    service: VideoService = Depends(get_video_service),
):
    """List published videos, paginated"""
    result = service.list_videos(
        page=page,
        limit=limit,
        query=query,
        sort_by=sort_by,
        sort_type=sort_type,
        user_id=user_id,
    )
    return api_response(VideoPageResponse.from_page(result), "All videos fetched")


@router.post("/publish")
def publish_video(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    video_file: Optional[UploadFile] = File(None, alias="videoFile"),
    thumbnail: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
):
    """
    Upload a video and its thumbnail to media storage and publish it.

    Both files are staged on local disk first; staged copies that never
    reach the media host are discarded once the request finishes.
    """
    storage = service.storage
    video_path = storage.stage(video_file)
    thumbnail_path = storage.stage(thumbnail)
    try:
        video = service.publish(current_user, title, description, video_path, thumbnail_path)
    finally:
        storage.discard(video_path, thumbnail_path)

    return api_response(VideoResponse.from_video(video), "Video uploaded successfully", status_code=201)


@router.get("/{video_id}")
def get_video(video_id: str, service: VideoService = Depends(get_video_service)):
    video = service.get_video(video_id)
    return api_response(VideoResponse.from_video(video, with_owner=True), "Video fetched successfully")


@router.patch("/{video_id}")
def update_video(
    video_id: str,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
):
    """Update title, description and/or thumbnail of an owned video"""
    storage = service.storage
    thumbnail_path = storage.stage(thumbnail)
    try:
        video = service.update_video(current_user, video_id, title, description, thumbnail_path)
    finally:
        storage.discard(thumbnail_path)

    return api_response(VideoResponse.from_video(video), "Video details updated successfully")


@router.delete("/{video_id}")
def delete_video(
    video_id: str,
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
):
    service.delete_video(current_user, video_id)
    return api_response({}, "Video deleted successfully")


@router.patch("/{video_id}/toggle-publish")
def toggle_publish_status(
    video_id: str,
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
):
    video = service.toggle_publish_status(current_user, video_id)
    return api_response(VideoResponse.from_video(video), "Video publish status changed successfully")

"""
Uploader Service Package

Moves media files from the local upload intake to the media host and
removes them again.

Key Components:
- MediaUploader: Abstract base class for media host implementations
- UploadStager: Abstract base class for upload intake
- R2Uploader: Cloudflare R2 implementation
- LocalUploadStager: Stages multipart uploads on local disk
- MediaStorageService: Main orchestration service
- UploadServiceBuilder: Dependency injection helper
"""

from .interfaces import MediaUploader, UploadedMedia, UploadStager
from .r2_uploader import R2Config, R2Uploader, UploadServiceBuilder, get_media_storage
from .staging import LocalUploadStager
from .upload_service import MediaStorageService

__all__ = [
    # Interfaces
    'MediaUploader',
    'UploadStager',
    'UploadedMedia',

    # Implementations
    'R2Config',
    'R2Uploader',
    'LocalUploadStager',

    # Services
    'MediaStorageService',
    'UploadServiceBuilder',
    'get_media_storage',
]

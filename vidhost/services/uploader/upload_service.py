import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from vidhost.services.uploader.interfaces import MediaUploader, UploadedMedia, UploadStager

logger = logging.getLogger(__name__)


class MediaStorageService:
    """Orchestrates staging, upload and deletion with dependency injection"""

    def __init__(self,
                 stager: UploadStager,
                 uploader: MediaUploader,
                 object_prefix: str = ""):
        self.stager = stager
        self.uploader = uploader
        self.object_prefix = object_prefix

    def stage(self, upload) -> Optional[Path]:
        return self.stager.stage(upload)

    def discard(self, *paths: Optional[Path]) -> None:
        self.stager.discard(*paths)

    def upload(self, local_path: Optional[Path]) -> Optional[UploadedMedia]:
        """Push a staged file to the media host; the local copy is removed either way"""
        if local_path is None:
            return None
        if not os.path.exists(local_path):
            logger.warning(f"Skipping missing file: {local_path}")
            return None

        object_key = f"{self.object_prefix}{uuid.uuid4().hex}{Path(local_path).suffix}"
        try:
            return self.uploader.upload(str(local_path), object_key)
        finally:
            self.stager.discard(Path(local_path))

    def delete(self, url: str) -> bool:
        """Delete the object behind a public URL"""
        return self.uploader.delete_object(self.uploader.key_for_url(url))

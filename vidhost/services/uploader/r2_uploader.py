import logging
import mimetypes
import os
from functools import lru_cache
from typing import Optional
from urllib.parse import urlparse

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from vidhost.core.config import settings
from vidhost.services.uploader.interfaces import MediaUploader, UploadedMedia
from vidhost.services.uploader.probe import probe_duration
from vidhost.services.uploader.staging import LocalUploadStager
from vidhost.services.uploader.upload_service import MediaStorageService

logger = logging.getLogger(__name__)


class R2Uploader(MediaUploader):
    """R2 Bucket upload implementation"""
    def __init__(self, bucket_name: str, endpoint_url: str, access_key: str, secret_key: str,
                 public_url: str):
        self.bucket_name = bucket_name
        self.endpoint_url = endpoint_url
        self.public_url = public_url.rstrip("/")
        self.boto_client = boto3.client(
                's3',
                endpoint_url=self.endpoint_url or None,
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
                config=Config(
                    region_name='auto',
                    signature_version='s3v4'
                )
            )

    def upload(self, local_path: str, object_key: str) -> Optional[UploadedMedia]:
        content_type = mimetypes.guess_type(local_path)[0] or "application/octet-stream"
        try:
            size_bytes = os.path.getsize(local_path)
            duration = probe_duration(local_path) if content_type.startswith("video/") else 0.0
            self.boto_client.upload_file(
                local_path, self.bucket_name, object_key,
                ExtraArgs={"ContentType": content_type}
            )
        except (S3UploadFailedError, BotoCoreError, ClientError, OSError) as e:
            logger.error(f"Upload failed for {object_key}: {e}")
            return None

        logger.info(f"Uploaded {os.path.basename(local_path)} to {object_key}")
        return UploadedMedia(
            url=self.url_for_key(object_key),
            object_key=object_key,
            size_bytes=size_bytes,
            content_type=content_type,
            duration=duration,
        )

    def delete_object(self, object_key: str) -> bool:
        try:
            self.boto_client.delete_object(
                Bucket=self.bucket_name,
                Key=object_key
            )
            logger.info(f"Deleted {object_key}")
            return True
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to delete {object_key}: {e}")
            return False

    def url_for_key(self, object_key: str) -> str:
        if self.public_url:
            return f"{self.public_url}/{object_key}"
        return f"{self.endpoint_url.rstrip('/')}/{self.bucket_name}/{object_key}"

    def key_for_url(self, url: str) -> str:
        """Inverse of url_for_key"""
        for base in (self.public_url, f"{self.endpoint_url.rstrip('/')}/{self.bucket_name}"):
            if base and url.startswith(base + "/"):
                return url[len(base) + 1:]
        return urlparse(url).path.lstrip("/")


class R2Config:
    """Immutable configuration object"""
    def __init__(self, bucket: str, endpoint: str, access_key: str, secret_key: str,
                 public_url: str = ""):
        self.bucket = bucket
        self.endpoint = endpoint
        self.access_key = access_key
        self.secret_key = secret_key
        self.public_url = public_url


class UploadServiceBuilder:
    """Constructs service with dependencies"""
    @staticmethod
    def build(object_prefix: Optional[str] = None) -> MediaStorageService:
        config = R2Config(
            bucket=settings.R2_BUCKET,
            endpoint=settings.R2_ENDPOINT,
            access_key=settings.R2_ACCESS_KEY,
            secret_key=settings.R2_SECRET_KEY,
            public_url=settings.R2_PUBLIC_URL
        )
        uploader = R2Uploader(
            bucket_name=config.bucket,
            endpoint_url=config.endpoint,
            access_key=config.access_key,
            secret_key=config.secret_key,
            public_url=config.public_url
        )
        stager = LocalUploadStager(settings.upload_temp_dir)
        if object_prefix is None:
            object_prefix = settings.media_object_prefix
        return MediaStorageService(stager, uploader, object_prefix)


@lru_cache
def get_media_storage() -> MediaStorageService:
    """Dependency returning the process-wide media storage service"""
    return UploadServiceBuilder.build()

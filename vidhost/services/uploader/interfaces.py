from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class UploadedMedia:
    """What the media host reports back for a stored file"""
    url: str
    object_key: str
    size_bytes: int
    content_type: str
    duration: float = 0.0


class MediaUploader(ABC):
    """Abstract media host interface"""
    @abstractmethod
    def upload(self, local_path: str, object_key: str) -> Optional[UploadedMedia]:
        pass

    @abstractmethod
    def delete_object(self, object_key: str) -> bool:
        pass

    @abstractmethod
    def key_for_url(self, url: str) -> str:
        pass


class UploadStager(ABC):
    """Abstract upload intake: puts incoming files on local disk"""
    @abstractmethod
    def stage(self, upload) -> Optional[Path]:
        pass

    @abstractmethod
    def discard(self, *paths: Optional[Path]) -> None:
        pass

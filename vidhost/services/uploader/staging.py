import logging
import shutil
import uuid
from pathlib import Path
from typing import Optional

from vidhost.services.uploader.interfaces import UploadStager

logger = logging.getLogger(__name__)


class LocalUploadStager(UploadStager):
    """Copies multipart uploads into a temp directory on local disk"""

    def __init__(self, temp_dir: str):
        self.temp_dir = Path(temp_dir)

    def stage(self, upload) -> Optional[Path]:
        # Form fields sent without a file arrive as "" rather than an UploadFile
        if upload is None or isinstance(upload, str) or not upload.filename:
            return None

        self.temp_dir.mkdir(parents=True, exist_ok=True)
        target = self.temp_dir / f"{uuid.uuid4().hex}{Path(upload.filename).suffix.lower()}"
        with open(target, "wb") as out:
            shutil.copyfileobj(upload.file, out)

        if target.stat().st_size == 0:
            logger.info(f"Discarding empty upload {upload.filename}")
            target.unlink()
            return None
        return target

    def discard(self, *paths: Optional[Path]) -> None:
        for path in paths:
            if path is not None:
                path.unlink(missing_ok=True)

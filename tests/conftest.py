"""
Pytest configuration for Vidhost tests
"""

import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_TEMP_DIR", tempfile.mkdtemp(prefix="vidhost_uploads_"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vidhost.core.database import Base, get_db
from vidhost.models import User, Video
from vidhost.services.uploader import (
    LocalUploadStager,
    MediaStorageService,
    MediaUploader,
    UploadedMedia,
    get_media_storage,
)
from vidhost.services.users import create_user

MEDIA_BASE = "https://media.test"


class FakeUploader(MediaUploader):
    """Records every call instead of talking to a bucket"""

    def __init__(self):
        self.uploaded: List[str] = []
        self.uploaded_content: List[bytes] = []
        self.deleted: List[str] = []
        self.fail_uploads = False
        self.fail_deletes = set()
        self.video_duration = 12.5

    def upload(self, local_path: str, object_key: str) -> Optional[UploadedMedia]:
        self.uploaded.append(object_key)
        self.uploaded_content.append(Path(local_path).read_bytes())
        if self.fail_uploads:
            return None
        is_video = object_key.endswith(".mp4")
        return UploadedMedia(
            url=f"{MEDIA_BASE}/{object_key}",
            object_key=object_key,
            size_bytes=os.path.getsize(local_path),
            content_type="video/mp4" if is_video else "image/jpeg",
            duration=self.video_duration if is_video else 0.0,
        )

    def delete_object(self, object_key: str) -> bool:
        self.deleted.append(object_key)
        return object_key not in self.fail_deletes

    def key_for_url(self, url: str) -> str:
        return url[len(MEDIA_BASE) + 1:]


@pytest.fixture
def temp_dir():
    """Temporary directory for test outputs"""
    with tempfile.TemporaryDirectory() as tmpdirname:
        yield Path(tmpdirname)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def storage(uploader, temp_dir):
    return MediaStorageService(LocalUploadStager(str(temp_dir / "staging")), uploader, "videos/")


@pytest.fixture
def alice(db_session):
    user, token = create_user(db_session, "alice", "alice@example.com", "Alice Liddell")
    user.token = token
    return user


@pytest.fixture
def bob(db_session):
    user, token = create_user(db_session, "bob", "bob@example.com", "Bob Builder",
                              avatar="https://cdn.example.com/bob.png")
    user.token = token
    return user


def auth(user: User) -> dict:
    return {"Authorization": f"Bearer {user.token}"}


@pytest.fixture
def make_video(db_session):
    """Insert a video row directly"""
    counter = {"n": 0}

    def _make(owner: User, title: str = "A video", description: str = "Some description",
              is_published: bool = True, duration: float = 10.0,
              created_at: Optional[datetime] = None) -> Video:
        counter["n"] += 1
        n = counter["n"]
        video = Video(
            title=title,
            description=description,
            video_file=f"{MEDIA_BASE}/videos/file{n}.mp4",
            thumbnail=f"{MEDIA_BASE}/videos/thumb{n}.jpg",
            duration=duration,
            is_published=is_published,
            owner_id=owner.id,
            created_at=created_at or datetime(2024, 1, 1) + timedelta(minutes=n),
        )
        db_session.add(video)
        db_session.commit()
        db_session.refresh(video)
        return video

    return _make


@pytest.fixture
def client(session_factory, storage):
    """Test client with the database and media storage swapped out"""
    from vidhost.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()

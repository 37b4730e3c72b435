"""
Base model classes
"""

import re
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String

from vidhost.core.database import Base

_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value) -> bool:
    """True for identifiers shaped like the ones new_id() hands out"""
    return isinstance(value, str) and bool(_ID_PATTERN.match(value))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    __abstract__ = True

    id = Column(String(32), primary_key=True, default=new_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

"""
Video model
"""

from sqlalchemy import Boolean, Column, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from vidhost.models.base import BaseModel


class Video(BaseModel):
    __tablename__ = "videos"

    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    video_file = Column(String, nullable=False)
    thumbnail = Column(String, nullable=False)
    duration = Column(Float, nullable=False, default=0.0)
    is_published = Column(Boolean, nullable=False, default=True, index=True)
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)

    owner = relationship("User", back_populates="videos")

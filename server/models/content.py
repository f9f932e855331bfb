# server/models/content.py

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship
from . import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Content(Base):
    """
    A saved item in a user's brain. `filename` and `mime` are set when the
    item points at a file stored through the upload endpoint.
    """
    __tablename__ = "contents"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    link = Column(String, nullable=True)
    type = Column(String, nullable=False, default="youtube")
    body = Column(Text, nullable=True)
    filename = Column(String, nullable=True)
    mime = Column(String, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow)

    owner = relationship("User", back_populates="contents")

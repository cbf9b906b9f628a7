import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, Text, Uuid, func
from sqlalchemy.orm import relationship

from app.models.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Snippet(Base):
    __tablename__ = "snippets"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(Text, nullable=False)
    code = Column(Text, nullable=False)
    language = Column(Text, nullable=False)
    max_reviews = Column(Integer, nullable=False, default=3)
    review_count = Column(Integer, nullable=False, default=0)
    is_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    # Accepted reviews; a row per (snippet, reviewer) is the reviewedBy set.
    # Loaded on access only; listings ask for it with selectinload.
    reviews = relationship("Review", back_populates="snippet")

    @property
    def reviewed_by(self) -> list[str]:
        return [review.reviewer_email for review in self.reviews]

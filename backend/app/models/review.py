import uuid

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Text, UniqueConstraint, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.models.base import Base
from app.models.snippet import utcnow

LINE_REVIEW_CATEGORIES = (
    "Bug/Error",
    "Performance",
    "Code Style",
    "Best Practices",
    "Security",
    "Functionality",
    "Other",
)


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("snippet_id", "reviewer_email", name="uq_reviews_snippet_reviewer"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    snippet_id = Column(Uuid(as_uuid=True), ForeignKey("snippets.id"), nullable=False, index=True)
    reviewer_email = Column(Text, nullable=False)
    reviewer_name = Column(Text, nullable=False)
    years_of_experience = Column(Integer, nullable=False)
    position = Column(Text, nullable=False)
    general_comment = Column(Text, nullable=True)
    # [{"lineNumber": int, "comment": str, "category": str}, ...] in submitted order
    line_reviews = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    snippet = relationship("Snippet", back_populates="reviews")

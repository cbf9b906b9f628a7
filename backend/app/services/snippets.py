import logging
import random
import uuid
from typing import Any

from pydantic import ValidationError as SchemaError
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.core.config import settings
from app.core.errors import NotFoundError, ValidationError
from app.models.review import Review
from app.models.snippet import Snippet
from app.schemas import SnippetInput

logger = logging.getLogger(__name__)


def normalize_email(value: str | None) -> str:
    return (value or "").strip().lower()


def parse_snippet_id(raw: Any) -> uuid.UUID | None:
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None


def find_snippet(db: Session, raw_id: Any) -> Snippet | None:
    snippet_id = parse_snippet_id(raw_id)
    if snippet_id is None:
        return None
    return db.get(Snippet, snippet_id)


def get_snippet(db: Session, raw_id: Any) -> Snippet:
    snippet = find_snippet(db, raw_id)
    if snippet is None:
        raise NotFoundError("Code not found", "snippet_not_found")
    return snippet


def has_reviewed(db: Session, snippet_id: uuid.UUID, email: str) -> bool:
    stmt = select(Review.id).where(Review.snippet_id == snippet_id, Review.reviewer_email == email)
    return db.scalar(stmt) is not None


def _require_email(email: str | None) -> str:
    normalized = normalize_email(email)
    if not normalized:
        raise ValidationError("Email is required", "missing_field")
    return normalized


def select_for_review(db: Session, participant_email: str | None) -> Snippet:
    """Pick a random snippet that is still open and not yet reviewed by the participant."""
    email = _require_email(participant_email)
    already_reviewed = (
        select(Review.id)
        .where(Review.snippet_id == Snippet.id, Review.reviewer_email == email)
        .exists()
    )
    stmt = select(Snippet).where(Snippet.is_completed.is_(False), ~already_reviewed)
    eligible = db.scalars(stmt).all()
    if not eligible:
        raise NotFoundError("No codes available for review", "not_available")
    return random.choice(eligible)


def can_review(db: Session, raw_id: Any, participant_email: str | None) -> dict[str, Any]:
    email = _require_email(participant_email)
    snippet = get_snippet(db, raw_id)
    already_reviewed = has_reviewed(db, snippet.id, email)
    return {
        "canReview": not snippet.is_completed and not already_reviewed,
        "isCompleted": snippet.is_completed,
        "alreadyReviewed": already_reviewed,
        "reviewCount": snippet.review_count,
        "maxReviews": snippet.max_reviews,
    }


def list_snippets(db: Session) -> list[Snippet]:
    stmt = select(Snippet).options(selectinload(Snippet.reviews)).order_by(Snippet.created_at.desc())
    return list(db.scalars(stmt).all())


def _is_blank(value: str | None) -> bool:
    return not (value and value.strip())


def _build_snippet(data: SnippetInput) -> Snippet:
    return Snippet(
        title=data.title,
        code=data.code,
        language=data.language,
        max_reviews=data.max_reviews or settings.default_max_reviews,
    )


def add_snippet(db: Session, data: SnippetInput) -> Snippet:
    if _is_blank(data.title) or _is_blank(data.code) or _is_blank(data.language):
        raise ValidationError("Title, code, and language are required", "missing_field")
    if data.max_reviews is not None and data.max_reviews < 0:
        raise ValidationError("maxReviews must be a positive integer")

    snippet = _build_snippet(data)
    db.add(snippet)
    db.commit()
    db.refresh(snippet)
    logger.info("Snippet added snippet_id=%s max_reviews=%s", snippet.id, snippet.max_reviews)
    return snippet


def _valid_entry(item: Any) -> SnippetInput | None:
    if not isinstance(item, dict):
        return None
    try:
        data = SnippetInput.model_validate(item)
    except SchemaError:
        return None
    if _is_blank(data.title) or _is_blank(data.code) or _is_blank(data.language):
        return None
    if data.max_reviews is not None and data.max_reviews < 0:
        return None
    return data


def add_snippets_bulk(db: Session, items: Any) -> dict[str, int]:
    if not isinstance(items, list) or not items:
        raise ValidationError("Codes array is required")

    valid = [data for data in (_valid_entry(item) for item in items) if data is not None]
    if not valid:
        raise ValidationError("No valid codes found", "no_valid_items")

    db.add_all([_build_snippet(data) for data in valid])
    db.commit()
    logger.info("Bulk snippet import added=%d provided=%d", len(valid), len(items))
    return {"addedCount": len(valid), "totalProvided": len(items)}

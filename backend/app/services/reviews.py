import logging
import re
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.core.errors import ConflictError, NotFoundError, StoreError, ValidationError
from app.models.review import LINE_REVIEW_CATEGORIES, Review
from app.models.snippet import Snippet
from app.schemas import LineReviewInput, ReviewSubmission
from app.services.snippets import find_snippet, has_reviewed, normalize_email

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_COMMENT_LENGTH = 10


def _duplicate_review() -> ConflictError:
    return ConflictError("You have already reviewed this code", "duplicate_review")


def _quota_exceeded() -> ConflictError:
    return ConflictError("This code has already been reviewed maximum times", "quota_exceeded")


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_int(value: Any) -> int | None:
    """Integers, or strings and floats holding a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _check_required(submission: ReviewSubmission) -> None:
    if submission.snippet_id is None or not str(submission.snippet_id).strip():
        raise ValidationError("snippetId is required", "missing_field")
    for field, label in (("reviewer_email", "reviewerEmail"), ("reviewer_name", "reviewerName")):
        if not _text(getattr(submission, field)):
            raise ValidationError(f"{label} is required", "missing_field")
    years = _as_int(submission.years_of_experience)
    if years is None or years < 0:
        raise ValidationError("yearsOfExperience must be a non-negative integer", "missing_field")
    if not _text(submission.position):
        raise ValidationError("position is required", "missing_field")
    if not isinstance(submission.line_reviews, list) or not submission.line_reviews:
        raise ValidationError("At least one line review is required", "missing_field")


def _check_line_reviews(line_reviews: list[Any]) -> list[dict[str, Any]]:
    checked = []
    for index, raw in enumerate(line_reviews, start=1):
        item = LineReviewInput.model_validate(raw) if isinstance(raw, dict) else LineReviewInput()
        line_number = _as_int(item.line_number)
        if line_number is None or line_number < 1:
            raise ValidationError(
                f"Line review #{index}: a positive line number is required", "invalid_line_review"
            )
        comment = item.comment if isinstance(item.comment, str) else ""
        if len(comment) < MIN_COMMENT_LENGTH:
            raise ValidationError(
                f"Line {line_number}: comment must be at least {MIN_COMMENT_LENGTH} characters",
                "invalid_line_review",
            )
        if item.category not in LINE_REVIEW_CATEGORIES:
            raise ValidationError(
                f"Line {line_number}: category must be one of {', '.join(LINE_REVIEW_CATEGORIES)}",
                "invalid_line_review",
            )
        checked.append({"lineNumber": line_number, "comment": comment, "category": item.category})
    return checked


def submit_review(db: Session, submission: ReviewSubmission) -> dict[str, Any]:
    """Validate and record a review, then bump the snippet's counters.

    The review row and the counter update commit together. A uniqueness
    violation on (snippet_id, reviewer_email) while writing is reported exactly
    like the duplicate pre-check.
    """
    _check_required(submission)

    email = normalize_email(submission.reviewer_email)
    if not EMAIL_RE.match(email):
        raise ValidationError("Invalid email address", "invalid_email")

    snippet = find_snippet(db, submission.snippet_id)
    if snippet is None:
        raise NotFoundError("Code not found", "snippet_not_found")
    snippet_id = snippet.id
    # A participant who already reviewed a full snippet is told about the duplicate.
    if has_reviewed(db, snippet_id, email):
        raise _duplicate_review()
    if snippet.is_completed:
        raise _quota_exceeded()

    line_reviews = _check_line_reviews(submission.line_reviews)

    general_comment = _text(submission.general_comment) or None
    review = Review(
        snippet_id=snippet_id,
        reviewer_email=email,
        reviewer_name=_text(submission.reviewer_name),
        years_of_experience=_as_int(submission.years_of_experience),
        position=_text(submission.position),
        general_comment=general_comment,
        line_reviews=line_reviews,
    )
    db.add(review)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        logger.info("Duplicate review rejected on write snippet_id=%s", snippet_id)
        raise _duplicate_review() from None
    review_id = review.id

    stmt = (
        update(Snippet)
        .where(Snippet.id == snippet_id, Snippet.is_completed.is_(False))
        .values(
            review_count=Snippet.review_count + 1,
            is_completed=Snippet.review_count + 1 >= Snippet.max_reviews,
        )
        .returning(Snippet.review_count, Snippet.max_reviews, Snippet.is_completed)
        .execution_options(synchronize_session=False)
    )
    counters = db.execute(stmt).one_or_none()
    if counters is None:
        # Completed by a concurrent submission after the pre-check.
        db.rollback()
        raise _quota_exceeded()

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(
            "Commit failed, review and counters rolled back snippet_id=%s review_id=%s",
            snippet_id,
            review_id,
        )
        raise StoreError("Failed to submit review") from exc

    review_count, max_reviews, is_completed = counters
    logger.info(
        "Review accepted review_id=%s snippet_id=%s review_count=%s completed=%s",
        review_id,
        snippet_id,
        review_count,
        is_completed,
    )
    return {
        "id": review_id,
        "reviewCount": review_count,
        "maxReviews": max_reviews,
        "isCompleted": bool(is_completed),
    }


def list_reviews(db: Session) -> list[Review]:
    stmt = select(Review).options(joinedload(Review.snippet)).order_by(Review.created_at.desc())
    return list(db.scalars(stmt).all())

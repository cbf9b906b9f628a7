from sqlalchemy import distinct, func, select
from sqlalchemy.orm import Session

from app.models.review import Review
from app.models.snippet import Snippet


def get_stats(db: Session) -> dict[str, int]:
    total_snippets = db.scalar(select(func.count()).select_from(Snippet))
    completed = db.scalar(
        select(func.count()).select_from(Snippet).where(Snippet.is_completed.is_(True))
    )
    total_reviews = db.scalar(select(func.count()).select_from(Review))
    unique_reviewers = db.scalar(select(func.count(distinct(Review.reviewer_email))))
    return {
        "totalSnippets": total_snippets,
        "completedSnippets": completed,
        "pendingSnippets": total_snippets - completed,
        "totalReviews": total_reviews,
        "uniqueReviewers": unique_reviewers,
    }

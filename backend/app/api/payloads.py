from typing import Any

from app.models.review import Review
from app.models.snippet import Snippet


def snippet_payload(snippet: Snippet) -> dict[str, Any]:
    return {
        "id": str(snippet.id),
        "title": snippet.title,
        "code": snippet.code,
        "language": snippet.language,
        "maxReviews": snippet.max_reviews,
        "reviewCount": snippet.review_count,
        "isCompleted": snippet.is_completed,
        "reviewedBy": snippet.reviewed_by,
        "createdAt": snippet.created_at,
    }


def review_payload(review: Review) -> dict[str, Any]:
    snippet = review.snippet
    return {
        "id": str(review.id),
        "snippetId": str(review.snippet_id),
        "snippet": {
            "id": str(snippet.id),
            "title": snippet.title,
            "language": snippet.language,
        }
        if snippet
        else None,
        "reviewerEmail": review.reviewer_email,
        "reviewerName": review.reviewer_name,
        "yearsOfExperience": review.years_of_experience,
        "position": review.position,
        "generalComment": review.general_comment,
        "lineReviews": review.line_reviews or [],
        "createdAt": review.created_at,
    }

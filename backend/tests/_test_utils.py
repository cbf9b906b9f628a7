import uuid
from datetime import datetime, timezone

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import get_db
from app.main import app
from app.models.base import Base
from app.models.review import Review
from app.models.snippet import Snippet


def make_session_factory():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_client(session_factory) -> TestClient:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


def reset_overrides():
    app.dependency_overrides.clear()


def create_snippet(session_factory, **fields) -> str:
    values = {"title": "Sample", "code": "print('hi')", "language": "Python", "max_reviews": 3}
    values.update(fields)
    with session_factory() as db:
        snippet = Snippet(**values)
        db.add(snippet)
        db.commit()
        return str(snippet.id)


def create_review(session_factory, snippet_id: str, email: str, line_reviews=None, **fields) -> str:
    values = {
        "snippet_id": uuid.UUID(snippet_id),
        "reviewer_email": email,
        "reviewer_name": "Reviewer",
        "years_of_experience": 2,
        "position": "Engineer",
        "line_reviews": line_reviews if line_reviews is not None else [],
        "created_at": datetime.now(timezone.utc),
    }
    values.update(fields)
    with session_factory() as db:
        review = Review(**values)
        db.add(review)
        db.commit()
        return str(review.id)


def review_body(snippet_id: str, email: str, **overrides) -> dict:
    body = {
        "snippetId": snippet_id,
        "reviewerEmail": email,
        "reviewerName": "Ada Lovelace",
        "yearsOfExperience": 5,
        "position": "Senior Developer",
        "generalComment": "Readable overall.",
        "lineReviews": [
            {"lineNumber": 3, "comment": "Loop bound is off by one here.", "category": "Bug/Error"}
        ],
    }
    body.update(overrides)
    return body

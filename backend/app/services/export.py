"""Flatten reviews and their line comments into a CSV sheet."""

import csv
import io
import re
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from app.models.review import Review
from app.services.reviews import list_reviews

CSV_FILENAME = "code_reviews.csv"
CSV_COLUMNS = [
    "Code Title",
    "Code Language",
    "Code Content",
    "Reviewer Name",
    "Reviewer Email",
    "Years of Experience",
    "Position",
    "General Comment",
    "Line Number",
    "Line Comment",
    "Line Category",
    "Review Date",
]

_NEWLINES = re.compile(r"\r\n|\r|\n")


def single_line(value: Any) -> str:
    if value is None:
        return ""
    return _NEWLINES.sub(" ", str(value))


def isoformat_utc(value: datetime) -> str:
    # SQLite hands back naive datetimes; they are stored as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def review_rows(review: Review) -> list[list[str]]:
    snippet = review.snippet
    base = [
        snippet.title,
        snippet.language,
        snippet.code,
        review.reviewer_name,
        review.reviewer_email,
        review.years_of_experience,
        review.position,
        review.general_comment,
    ]
    created = isoformat_utc(review.created_at)
    line_reviews = review.line_reviews or []
    if not line_reviews:
        return [[single_line(v) for v in base + [None, None, None, created]]]
    return [
        [
            single_line(v)
            for v in base + [line.get("lineNumber"), line.get("comment"), line.get("category"), created]
        ]
        for line in line_reviews
    ]


def build_csv(reviews: list[Review]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for review in reviews:
        writer.writerows(review_rows(review))
    return buffer.getvalue()


def export_reviews_csv(db: Session) -> bytes:
    return build_csv(list_reviews(db)).encode("utf-8")

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LineReviewInput(_CamelModel):
    line_number: Any = Field(default=None, alias="lineNumber")
    comment: Any = None
    category: Any = None


class ReviewSubmission(_CamelModel):
    """Body of POST /api/reviews.

    Fields are untyped on purpose: the submission service checks presence and
    shape in a fixed order so that clients get the first failing rule, which a
    type error raised here would hide.
    """

    snippet_id: Any = Field(default=None, alias="snippetId")
    reviewer_email: Any = Field(default=None, alias="reviewerEmail")
    reviewer_name: Any = Field(default=None, alias="reviewerName")
    years_of_experience: Any = Field(default=None, alias="yearsOfExperience")
    position: Any = None
    general_comment: Any = Field(default=None, alias="generalComment")
    line_reviews: Any = Field(default=None, alias="lineReviews")


class SnippetInput(_CamelModel):
    title: str | None = None
    code: str | None = None
    language: str | None = None
    max_reviews: int | None = Field(default=None, alias="maxReviews")


class BulkSnippetRequest(BaseModel):
    # Items stay raw so that malformed entries are dropped instead of failing the batch.
    codes: Any = None

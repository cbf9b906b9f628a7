from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.payloads import review_payload
from app.db.session import get_db
from app.schemas import ReviewSubmission
from app.services import reviews
from app.services.export import CSV_FILENAME, export_reviews_csv

router = APIRouter()


@router.post("/reviews", status_code=status.HTTP_201_CREATED)
def submit_review(payload: ReviewSubmission, db: Session = Depends(get_db)):
    result = reviews.submit_review(db, payload)
    return {
        "message": "Review submitted successfully",
        "review": {**result, "id": str(result["id"])},
    }


@router.get("/reviews")
def list_reviews(db: Session = Depends(get_db)):
    return [review_payload(review) for review in reviews.list_reviews(db)]


@router.get("/reviews/export")
def export_reviews(db: Session = Depends(get_db)):
    return Response(
        content=export_reviews_csv(db),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.stats import get_stats

router = APIRouter()


@router.get("/stats")
def stats(db: Session = Depends(get_db)):
    return get_stats(db)

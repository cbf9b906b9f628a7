from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.export import isoformat_utc

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "OK", "timestamp": isoformat_utc(datetime.now(timezone.utc))}


@router.get("/health/ready")
def health_ready(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"status": "ready"}

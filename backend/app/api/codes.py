from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.payloads import snippet_payload
from app.db.session import get_db
from app.schemas import BulkSnippetRequest, SnippetInput
from app.services import snippets

router = APIRouter()


@router.get("/codes/random")
def random_code(email: str | None = None, db: Session = Depends(get_db)):
    return snippet_payload(snippets.select_for_review(db, email))


@router.get("/codes/{code_id}/can-review")
def can_review(code_id: str, email: str | None = None, db: Session = Depends(get_db)):
    return snippets.can_review(db, code_id, email)


@router.post("/codes", status_code=status.HTTP_201_CREATED)
def add_code(payload: SnippetInput, db: Session = Depends(get_db)):
    snippet = snippets.add_snippet(db, payload)
    return {"message": "Code added successfully", "code": snippet_payload(snippet)}


@router.post("/codes/bulk", status_code=status.HTTP_201_CREATED)
def add_codes_bulk(payload: BulkSnippetRequest, db: Session = Depends(get_db)):
    result = snippets.add_snippets_bulk(db, payload.codes)
    return {"message": f"{result['addedCount']} codes added successfully", **result}


@router.get("/codes")
def list_codes(db: Session = Depends(get_db)):
    return [snippet_payload(snippet) for snippet in snippets.list_snippets(db)]

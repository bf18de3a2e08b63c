# jobboard/api/v1/legal.py
from fastapi import APIRouter, HTTPException

from jobboard.models.content import LegalDocument, LegalDocumentId
from jobboard.repositories.legal import get_legal_document

router = APIRouter()


@router.get("/legal/{doc_id}", response_model=LegalDocument)
async def get_legal_route(doc_id: LegalDocumentId):
    doc = await get_legal_document(doc_id)
    if not doc:
        raise HTTPException(status_code=404, detail="Document not found")
    return doc

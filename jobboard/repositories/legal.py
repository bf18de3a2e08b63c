# jobboard/repositories/legal.py
from typing import Optional

from jobboard.db.mongo import get_db, LEGAL_CONTENT
from jobboard.models.content import LegalDocument
from jobboard.repositories.common import now, to_id


async def get_legal_document(doc_id: str) -> Optional[LegalDocument]:
    db = get_db()
    doc = await db[LEGAL_CONTENT].find_one({"_id": doc_id})
    doc = to_id(doc)
    return LegalDocument.model_validate(doc) if doc else None


async def save_legal_document(doc_id: str, content: str) -> LegalDocument:
    db = get_db()
    payload = {"content": content, "last_updated": now()}
    await db[LEGAL_CONTENT].update_one({"_id": doc_id}, {"$set": payload}, upsert=True)
    return LegalDocument(id=doc_id, **payload)

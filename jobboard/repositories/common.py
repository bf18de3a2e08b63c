# jobboard/repositories/common.py
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Sequence
import uuid

from jobboard.core.config import settings


def now() -> datetime:
    # Mongo hands back naive UTC datetimes; keep everything we write the same
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    return uuid.uuid4().hex


def to_id(doc: Optional[Dict[str, Any]], id_field: str = "id") -> Optional[Dict[str, Any]]:
    # expose Mongo's _id under the public id field
    if not doc:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc[id_field] = str(doc.pop("_id"))
    return doc


def chunked(ids: Sequence[str], size: Optional[int] = None) -> Iterator[List[str]]:
    """Split ids for "$in" queries, which the database caps per query."""
    size = size or settings.QUERY_BATCH_SIZE
    for i in range(0, len(ids), size):
        batch = list(ids[i:i + size])
        if batch:
            yield batch

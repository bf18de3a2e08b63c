# jobboard/services/table.py
"""
Search, sort and pagination for the admin listing tables.
"""
from datetime import datetime
import math
from typing import Any, List, Literal, Optional, Sequence

from pydantic import BaseModel

from jobboard.core.config import settings

SortDirection = Literal["asc", "desc"]


class SortConfig(BaseModel):
    key: Optional[str] = "created_at"
    direction: SortDirection = "desc"


class TableQuery(BaseModel):
    search: str = ""
    sort_key: Optional[str] = "created_at"
    sort_dir: SortDirection = "desc"
    page: int = 1


class Page(BaseModel):
    items: List[Any]
    total: int
    page: int
    page_size: int
    total_pages: int


def request_sort(config: SortConfig, key: str) -> SortConfig:
    """Clicking the ascending column again flips it; any other click sorts ascending."""
    direction: SortDirection = "asc"
    if config.key == key and config.direction == "asc":
        direction = "desc"
    return SortConfig(key=key, direction=direction)


def get_sortable_value(item: Any, key: Optional[str]) -> Any:
    if not key:
        return None
    value = item.get(key) if isinstance(item, dict) else getattr(item, key, None)
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    if isinstance(value, str):
        return value.lower()
    return value


def search_items(items: Sequence[Any], term: str, fields: Sequence[str]) -> List[Any]:
    if not term:
        return list(items)
    needle = term.lower()
    out = []
    for item in items:
        for field in fields:
            value = item.get(field) if isinstance(item, dict) else getattr(item, field, None)
            if isinstance(value, str) and needle in value.lower():
                out.append(item)
                break
    return out


def sort_items(items: Sequence[Any], config: SortConfig) -> List[Any]:
    """Stable sort on config.key; items without a value always go last."""
    if config.key is None:
        return list(items)
    present = [i for i in items if get_sortable_value(i, config.key) is not None]
    missing = [i for i in items if get_sortable_value(i, config.key) is None]
    present.sort(key=lambda i: get_sortable_value(i, config.key), reverse=config.direction == "desc")
    return present + missing


def paginate(items: Sequence[Any], page: int = 1, page_size: Optional[int] = None) -> Page:
    page_size = page_size or settings.ADMIN_PAGE_SIZE
    total = len(items)
    total_pages = math.ceil(total / page_size)
    page = max(page, 1)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )


def build_table(items: Sequence[Any], query: TableQuery, fields: Sequence[str], page_size: Optional[int] = None) -> Page:
    filtered = search_items(items, query.search, fields)
    ordered = sort_items(filtered, SortConfig(key=query.sort_key, direction=query.sort_dir))
    return paginate(ordered, query.page, page_size)

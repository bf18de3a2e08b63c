# tests/test_table.py
from datetime import datetime

from jobboard.models.company import Company
from jobboard.services.table import (
    SortConfig,
    TableQuery,
    build_table,
    get_sortable_value,
    paginate,
    request_sort,
    search_items,
    sort_items,
)


def _companies():
    return [
        Company(id="1", name="beta", status="approved", created_at=datetime(2024, 1, 3)),
        Company(id="2", name="Alpha", status="pending", created_at=datetime(2024, 1, 1)),
        Company(id="3", name="gamma", status="approved", created_at=None, website_url="https://gamma.io"),
        Company(id="4", name="Delta", status="approved", created_at=datetime(2024, 1, 2)),
    ]


def test_request_sort_toggles_only_on_the_ascending_column():
    cfg = SortConfig(key="name", direction="asc")
    cfg = request_sort(cfg, "name")
    assert cfg == SortConfig(key="name", direction="desc")
    cfg = request_sort(cfg, "name")
    assert cfg.direction == "asc"
    assert request_sort(SortConfig(key="name", direction="asc"), "status") == SortConfig(key="status", direction="asc")


def test_sortable_value_normalises_strings_and_datetimes():
    c = _companies()[0]
    assert get_sortable_value(c, "name") == "beta"
    assert get_sortable_value(c, "created_at") == int(datetime(2024, 1, 3).timestamp() * 1000)
    assert get_sortable_value(c, None) is None


def test_sort_is_case_insensitive_and_stable():
    items = _companies()
    by_name = sort_items(items, SortConfig(key="name", direction="asc"))
    assert [c.id for c in by_name] == ["2", "1", "4", "3"]
    # equal keys keep their input order in both directions
    by_status = sort_items(items, SortConfig(key="status", direction="asc"))
    assert [c.id for c in by_status] == ["1", "3", "4", "2"]
    by_status_desc = sort_items(items, SortConfig(key="status", direction="desc"))
    assert [c.id for c in by_status_desc] == ["2", "1", "3", "4"]


def test_missing_values_sort_last_in_both_directions():
    items = _companies()
    asc = sort_items(items, SortConfig(key="created_at", direction="asc"))
    desc = sort_items(items, SortConfig(key="created_at", direction="desc"))
    assert [c.id for c in asc] == ["2", "4", "1", "3"]
    assert [c.id for c in desc] == ["1", "4", "2", "3"]


def test_search_checks_each_configured_field():
    items = _companies()
    assert [c.id for c in search_items(items, "GAMMA.IO", ["name", "website_url"])] == ["3"]
    assert [c.id for c in search_items(items, "ta", ["name"])] == ["1", "4"]
    assert search_items(items, "", ["name"]) == items


def test_paginate_fixed_pages():
    page = paginate(list(range(23)), page=3, page_size=10)
    assert page.items == [20, 21, 22]
    assert page.total == 23
    assert page.total_pages == 3
    assert paginate([], page=1, page_size=10).total_pages == 0


def test_build_table_composes_search_sort_and_page():
    query = TableQuery(search="a", sort_key="name", sort_dir="desc", page=1)
    page = build_table(_companies(), query, ["name"], page_size=2)
    assert [c.id for c in page.items] == ["3", "4"]
    assert page.total == 4
    assert page.total_pages == 2

# tests/conftest.py
import pytest
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from jobboard.core.config import settings
from jobboard.core.security import create_access_token
from jobboard.db import mongo
from jobboard.repositories.common import new_id, now


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Deterministic adapter, no Redis, small batches so chunking is exercised."""
    monkeypatch.setattr(settings, "LLM_ADAPTER", "mock")
    monkeypatch.setattr(settings, "LLM_ALLOW_FALLBACK", False)
    monkeypatch.setattr(settings, "LLM_RETRIES", 0)
    monkeypatch.setattr(settings, "AI_CACHE_ENABLED", False)
    monkeypatch.setattr(settings, "QUERY_BATCH_SIZE", 2)
    return settings


@pytest.fixture(autouse=True)
def test_db(monkeypatch):
    # every test gets a fresh in-memory database
    monkeypatch.setattr(mongo, "_mongo_client", AsyncMongoMockClient())
    return mongo.get_db()


@pytest.fixture
async def client():
    from jobboard.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


def _auth_headers(uid: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(uid)}"}


@pytest.fixture
def auth_headers():
    return _auth_headers


@pytest.fixture
def make_user(test_db):
    async def _make(role: str = "jobSeeker", uid: str = None, **fields) -> dict:
        doc = {
            "_id": uid or new_id(),
            "role": role,
            "email": fields.pop("email", f"{role.lower()}-{new_id()[:6]}@example.com"),
            "name": fields.pop("name", "Test User"),
            "status": "active",
            "created_at": now(),
            "updated_at": now(),
            **fields,
        }
        await test_db["users"].insert_one(doc)
        return doc
    return _make


@pytest.fixture
def make_company(test_db):
    async def _make(name: str = "Acme", status: str = "approved", admin_uids=None, **fields) -> dict:
        admins = list(admin_uids or [])
        doc = {
            "_id": new_id(),
            "name": name,
            "status": status,
            "admin_uids": admins,
            "recruiter_uids": admins,
            "created_at": now(),
            "updated_at": now(),
            **fields,
        }
        await test_db["companies"].insert_one(doc)
        return doc
    return _make


@pytest.fixture
def make_job(test_db):
    async def _make(title: str = "Backend Engineer", status: str = "approved", **fields) -> dict:
        doc = {
            "_id": new_id(),
            "title": title,
            "company": "Acme",
            "location": "Bengaluru",
            "type": "Full-time",
            "is_remote": False,
            "skills": ["Python"],
            "industry": "Software",
            "department": "Engineering",
            "experience_level": "Mid-Level",
            "status": status,
            "posted_date": now(),
            "created_at": now(),
            "updated_at": now(),
            **fields,
        }
        await test_db["jobs"].insert_one(doc)
        return doc
    return _make


@pytest.fixture
async def employer(make_user, make_company):
    """An employer who administers an approved company."""
    uid = new_id()
    company = await make_company(admin_uids=[uid])
    user = await make_user("employer", uid=uid, name="Erin Employer", company_id=company["_id"], is_company_admin=True)
    return {"user": user, "company": company, "headers": _auth_headers(uid)}

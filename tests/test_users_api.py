# tests/test_users_api.py
import pytest


@pytest.mark.asyncio
async def test_create_profile_once(client, auth_headers):
    headers = auth_headers("new-uid")
    resp = await client.post("/api/v1/users/me", json={"email": "new@example.com"}, headers=headers)
    assert resp.status_code == 201
    assert resp.json()["uid"] == "new-uid"
    assert resp.json()["name"] == "New User"

    resp = await client.post("/api/v1/users/me", json={"email": "new@example.com"}, headers=headers)
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_staff_roles_cannot_be_self_assigned(client, auth_headers):
    resp = await client.post(
        "/api/v1/users/me", json={"email": "x@example.com", "role": "superAdmin"}, headers=auth_headers("sneaky")
    )
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_employer_signup_registers_company(client, auth_headers, test_db):
    resp = await client.post(
        "/api/v1/users/me",
        json={"email": "owner@startup.io", "role": "employer", "company_name": "Startup"},
        headers=auth_headers("owner"),
    )
    assert resp.status_code == 201
    company = await test_db["companies"].find_one({"_id": resp.json()["company_id"]})
    assert company["name"] == "Startup"
    assert company["status"] == "pending"
    assert company["moderation_reason"] is None


@pytest.mark.asyncio
async def test_patch_profile_only_touches_sent_fields(client, make_user, auth_headers):
    await make_user(uid="u1", name="Asha", headline="Old headline", skills=["Go"])
    resp = await client.patch(
        "/api/v1/users/me",
        json={"headline": "Platform engineer", "notice_period": "1 Month"},
        headers=auth_headers("u1"),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["headline"] == "Platform engineer"
    assert body["notice_period"] == "1 Month"
    assert body["name"] == "Asha"
    assert body["skills"] == ["Go"]

    resp = await client.patch("/api/v1/users/me", json={"notice_period": "someday"}, headers=auth_headers("u1"))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_me_touches_last_active(client, make_user, auth_headers, test_db):
    await make_user(uid="u1")
    resp = await client.get("/api/v1/users/me", headers=auth_headers("u1"))
    assert resp.status_code == 200
    assert (await test_db["users"].find_one({"_id": "u1"}))["last_active"] is not None


@pytest.mark.asyncio
async def test_saved_jobs(client, make_user, make_job, auth_headers, test_db):
    await make_user(uid="u1")
    job = await make_job()
    headers = auth_headers("u1")

    assert (await client.put("/api/v1/users/me/saved-jobs/missing", headers=headers)).status_code == 404
    assert (await client.put(f"/api/v1/users/me/saved-jobs/{job['_id']}", headers=headers)).status_code == 204
    assert (await client.put(f"/api/v1/users/me/saved-jobs/{job['_id']}", headers=headers)).status_code == 204
    assert (await test_db["users"].find_one({"_id": "u1"}))["saved_job_ids"] == [job["_id"]]

    assert (await client.delete(f"/api/v1/users/me/saved-jobs/{job['_id']}", headers=headers)).status_code == 204
    assert (await test_db["users"].find_one({"_id": "u1"}))["saved_job_ids"] == []


@pytest.mark.asyncio
async def test_saved_searches(client, make_user, auth_headers):
    await make_user(uid="u1")
    headers = auth_headers("u1")
    body = {"name": "Remote Python", "filters": {"search_term": "python", "is_remote": True}}

    resp = await client.post("/api/v1/users/me/saved-searches", json=body, headers=headers)
    assert resp.status_code == 201
    search = resp.json()
    assert search["filters"]["is_remote"] is True

    resp = await client.post("/api/v1/users/me/saved-searches", json={**body, "name": "  "}, headers=headers)
    assert resp.status_code == 400

    me = (await client.get("/api/v1/users/me", headers=headers)).json()
    assert [s["name"] for s in me["saved_searches"]] == ["Remote Python"]

    assert (await client.delete(f"/api/v1/users/me/saved-searches/{search['id']}", headers=headers)).status_code == 204
    me = (await client.get("/api/v1/users/me", headers=headers)).json()
    assert me["saved_searches"] == []


@pytest.mark.asyncio
async def test_employer_cannot_use_seeker_lists(client, employer, make_job):
    job = await make_job()
    resp = await client.put(f"/api/v1/users/me/saved-jobs/{job['_id']}", headers=employer["headers"])
    assert resp.status_code == 403

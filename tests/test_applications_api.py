# tests/test_applications_api.py
import pytest


QUESTIONS = [
    {"id": "q1", "question_text": "Can you relocate?", "type": "yesNo", "is_required": True},
    {"id": "q2", "question_text": "Anything else?", "type": "text"},
]


@pytest.fixture
async def posted_job(employer, make_job):
    return await make_job(
        company_id=employer["company"]["_id"],
        posted_by_id=employer["user"]["_id"],
        screening_questions=QUESTIONS,
    )


@pytest.fixture
async def seeker(make_user, auth_headers):
    user = await make_user(uid="seeker", name="Sana", headline="Backend dev")
    return {"user": user, "headers": auth_headers("seeker")}


async def _apply(client, seeker, job, answers=None):
    body = {"answers": answers if answers is not None else [{"question_id": "q1", "answer": True}]}
    return await client.post(f"/api/v1/jobs/{job['_id']}/apply", json=body, headers=seeker["headers"])


@pytest.mark.asyncio
async def test_apply_records_application_and_notifies_poster(client, seeker, posted_job, employer, test_db):
    resp = await _apply(client, seeker, posted_job)
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "Applied"
    assert body["applicant_name"] == "Sana"
    assert body["company_id"] == employer["company"]["_id"]
    assert body["answers"][0]["question_text"] == "Can you relocate?"

    user = await test_db["users"].find_one({"_id": "seeker"})
    assert user["applied_job_ids"] == [posted_job["_id"]]

    resp = await client.get("/api/v1/users/me/notifications", headers=employer["headers"])
    assert [n["type"] for n in resp.json()] == ["NEW_APPLICATION"]

    resp = await client.get("/api/v1/users/me/applications", headers=seeker["headers"])
    assert list(resp.json()) == [posted_job["_id"]]


@pytest.mark.asyncio
async def test_duplicate_application_conflicts(client, seeker, posted_job):
    assert (await _apply(client, seeker, posted_job)).status_code == 201
    resp = await _apply(client, seeker, posted_job)
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_required_question_must_be_answered(client, seeker, posted_job):
    resp = await _apply(client, seeker, posted_job, answers=[{"question_id": "q2", "answer": "hi"}])
    assert resp.status_code == 400
    assert "Can you relocate?" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_cannot_apply_to_unapproved_or_missing_job(client, seeker, make_job):
    pending = await make_job(status="pending")
    assert (await _apply(client, seeker, pending, answers=[])).status_code == 400
    assert (await _apply(client, seeker, {"_id": "nope"}, answers=[])).status_code == 404


@pytest.mark.asyncio
async def test_suspended_seeker_cannot_apply(client, make_user, auth_headers, make_job):
    await make_user(uid="sus", status="suspended")
    job = await make_job()
    resp = await client.post(f"/api/v1/jobs/{job['_id']}/apply", headers=auth_headers("sus"))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_employer_cannot_apply(client, employer, make_job):
    job = await make_job()
    resp = await client.post(f"/api/v1/jobs/{job['_id']}/apply", headers=employer["headers"])
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_withdraw_only_from_applied(client, seeker, posted_job, test_db):
    assert (await client.post(f"/api/v1/jobs/{posted_job['_id']}/withdraw", headers=seeker["headers"])).status_code == 404

    await _apply(client, seeker, posted_job)
    resp = await client.post(f"/api/v1/jobs/{posted_job['_id']}/withdraw", headers=seeker["headers"])
    assert resp.status_code == 200
    assert resp.json()["status"] == "Withdrawn by Applicant"

    resp = await client.post(f"/api/v1/jobs/{posted_job['_id']}/withdraw", headers=seeker["headers"])
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_employer_moves_application_through_pipeline(client, seeker, posted_job, employer):
    app_id = (await _apply(client, seeker, posted_job)).json()["id"]

    resp = await client.get(f"/api/v1/employer/jobs/{posted_job['_id']}/applications", headers=employer["headers"])
    assert [a["id"] for a in resp.json()] == [app_id]

    resp = await client.patch(
        f"/api/v1/applications/{app_id}/status",
        json={"status": "Interviewing", "employer_notes": "Strong systems design"},
        headers=employer["headers"],
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "Interviewing"
    assert resp.json()["employer_notes"] == "Strong systems design"

    resp = await client.get("/api/v1/users/me/notifications", headers=seeker["headers"])
    notes = resp.json()
    assert notes[0]["type"] == "APPLICATION_STATUS_UPDATE"
    assert "Interviewing" in notes[0]["message"]

    resp = await client.post(f"/api/v1/users/me/notifications/{notes[0]['id']}/read", headers=seeker["headers"])
    assert resp.json() == {"read": True}
    resp = await client.post(f"/api/v1/users/me/notifications/{notes[0]['id']}/read", headers=employer["headers"])
    assert resp.status_code == 404

    resp = await client.patch(
        f"/api/v1/applications/{app_id}/status", json={"status": "Withdrawn by Applicant"}, headers=employer["headers"]
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_other_company_cannot_touch_application(client, seeker, posted_job, make_user, make_company, auth_headers):
    app_id = (await _apply(client, seeker, posted_job)).json()["id"]
    rival = await make_company(name="Rival", admin_uids=["rival"])
    await make_user("employer", uid="rival", company_id=rival["_id"], is_company_admin=True)
    resp = await client.patch(
        f"/api/v1/applications/{app_id}/status", json={"status": "Reviewed"}, headers=auth_headers("rival")
    )
    assert resp.status_code == 403
    resp = await client.get(f"/api/v1/employer/jobs/{posted_job['_id']}/applications", headers=auth_headers("rival"))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_employer_dashboard(client, seeker, posted_job, employer, make_job):
    await make_job(title="Queued", status="pending", company_id=employer["company"]["_id"])
    await _apply(client, seeker, posted_job)

    resp = await client.get("/api/v1/employer/jobs", headers=employer["headers"])
    counts = {j["title"]: j["applicant_count"] for j in resp.json()}
    assert counts == {"Backend Engineer": 1, "Queued": 0}

    resp = await client.get("/api/v1/employer/stats", headers=employer["headers"])
    assert resp.json() == {
        "total_applications": 1,
        "new_applications_last_7_days": 1,
        "applications_by_status": {"Applied": 1},
    }

    resp = await client.get("/api/v1/employer/applications/recent", params={"count": 3}, headers=employer["headers"])
    assert len(resp.json()) == 1
    resp = await client.get("/api/v1/employer/candidates/seeker/applications", headers=employer["headers"])
    assert [a["job_id"] for a in resp.json()] == [posted_job["_id"]]


@pytest.mark.asyncio
async def test_candidate_search_and_saved_searches(client, employer, make_user, test_db):
    await make_user(uid="c1", name="Ana", skills=["Rust"], is_profile_searchable=True, home_city="Delhi")
    await make_user(uid="c2", name="Ben", skills=["Go"], is_profile_searchable=True)
    await make_user(uid="c3", name="Cy", skills=["Rust"], is_profile_searchable=False)

    resp = await client.get("/api/v1/employer/candidates", params={"search_term": "rust"}, headers=employer["headers"])
    assert [c["uid"] for c in resp.json()] == ["c1"]

    body = {"name": "Rustaceans", "filters": {"search_term": "rust", "location": "delhi"}}
    resp = await client.post("/api/v1/employer/saved-searches", json=body, headers=employer["headers"])
    assert resp.status_code == 201
    search_id = resp.json()["id"]
    user = await test_db["users"].find_one({"_id": employer["user"]["_id"]})
    assert [s["name"] for s in user["saved_candidate_searches"]] == ["Rustaceans"]

    resp = await client.delete(f"/api/v1/employer/saved-searches/{search_id}", headers=employer["headers"])
    assert resp.status_code == 204
    user = await test_db["users"].find_one({"_id": employer["user"]["_id"]})
    assert user["saved_candidate_searches"] == []

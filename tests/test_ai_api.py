# tests/test_ai_api.py
import pytest

from jobboard.services.data_uri import to_data_uri


@pytest.fixture
async def asha(make_user, auth_headers):
    await make_user(
        uid="asha",
        name="Asha",
        email="asha@mail.io",
        headline="Data engineer",
        skills=["Spark", "Airflow"],
        is_profile_searchable=True,
    )
    return auth_headers("asha")


@pytest.mark.asyncio
async def test_upload_binary_resume_returns_parsing_error(client, asha):
    files = {"file": ("resume.pdf", b"%PDF-1.7 binary", "application/pdf")}
    resp = await client.post("/api/v1/ai/parse-resume/upload", files=files, headers=asha)
    assert resp.status_code == 200
    body = resp.json()
    assert body["skills"] == []
    assert body["experience"].startswith("Parsing Error: The uploaded file type (application/pdf)")


@pytest.mark.asyncio
async def test_upload_text_resume_is_parsed(client, asha):
    text = b"Asha Rao\nData engineer\nasha@mail.io\n\nSkills: Spark, Airflow\n"
    files = {"file": ("resume.txt", text, "text/plain")}
    resp = await client.post("/api/v1/ai/parse-resume/upload", files=files, headers=asha)
    assert resp.json()["name"] == "Asha Rao"
    assert resp.json()["skills"] == ["Spark", "Airflow"]

    files = {"file": ("empty.txt", b"", "text/plain")}
    resp = await client.post("/api/v1/ai/parse-resume/upload", files=files, headers=asha)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_parse_job_description_is_employer_only(client, asha, employer):
    body = {"job_description_data_uri": to_data_uri(b"Analyst\nLocation: Delhi\nSkills: Excel", "text/plain")}
    assert (await client.post("/api/v1/ai/parse-job-description", json=body, headers=asha)).status_code == 403
    resp = await client.post("/api/v1/ai/parse-job-description", json=body, headers=employer["headers"])
    assert resp.status_code == 200
    assert resp.json()["location"] == "Delhi"
    assert resp.json()["skills"] == ["Excel"]


@pytest.mark.asyncio
async def test_job_matching_for_signed_in_seeker(client, asha, make_job):
    assert (await client.post("/api/v1/ai/job-matching/me", headers=asha)).status_code == 404

    data_job = await make_job(title="Data Engineer", skills=["Spark"])
    await make_job(title="Accountant", skills=["Tally"])
    await make_job(title="Spark Lead", status="pending", skills=["Spark"])

    resp = await client.post("/api/v1/ai/job-matching/me", headers=asha)
    assert resp.status_code == 200
    body = resp.json()
    assert body["relevant_job_ids"] == [data_job["_id"]]
    assert [j["title"] for j in body["jobs"]] == ["Data Engineer"]


@pytest.mark.asyncio
async def test_candidate_matching_for_employer_job(client, asha, employer, make_user, make_job):
    await make_user(uid="bob", name="Bob", skills=["Excel"], is_profile_searchable=True)
    await make_user(uid="hidden", name="Hid", skills=["Spark"], is_profile_searchable=False)
    job = await make_job(title="Data Engineer", skills=["Spark"], company_id=employer["company"]["_id"])
    foreign = await make_job(company_id="elsewhere")

    resp = await client.post(f"/api/v1/ai/candidate-matching/job/{job['_id']}", headers=employer["headers"])
    assert resp.status_code == 200
    assert resp.json()["relevant_candidate_ids"] == ["asha"]
    assert [c["name"] for c in resp.json()["candidates"]] == ["Asha"]

    resp = await client.post(f"/api/v1/ai/candidate-matching/job/{foreign['_id']}", headers=employer["headers"])
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_profile_summary_for_signed_in_seeker(client, asha):
    resp = await client.post("/api/v1/ai/profile-summary/me", headers=asha)
    assert resp.json()["generated_summary"] == "Asha is a Data engineer. Key strengths include Spark, Airflow."

    resp = await client.post(
        "/api/v1/ai/profile-summary/me", json={"target_role_or_company": "Acme Analytics"}, headers=asha
    )
    assert resp.json()["generated_summary"].endswith("Brings experience directly relevant to Acme Analytics.")


@pytest.mark.asyncio
async def test_generic_flow_routes(client, asha):
    body = {"job_seeker_profile": "Skills: Go", "job_postings": "Job ID: j1\nSkills: Go\n"}
    resp = await client.post("/api/v1/ai/job-matching", json=body, headers=asha)
    assert resp.json()["relevant_job_ids"] == ["j1"]

    resp = await client.post("/api/v1/ai/profile-summary", json={"job_seeker_profile_data": ""}, headers=asha)
    assert resp.json()["generated_summary"].startswith("Could not generate a summary")

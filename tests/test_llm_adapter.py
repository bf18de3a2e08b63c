# tests/test_llm_adapter.py
import pytest

from jobboard.services import llm_adapter
from jobboard.services.data_uri import to_data_uri
from jobboard.services.llm_adapters import gemini_adapter


@pytest.mark.asyncio
async def test_mock_adapter_runs(test_settings):
    payload = {"prompt": "p", "media": [], "input": {"job_seeker_profile_data": "Name: Asha\nSkills: Go, SQL"}}
    res = await llm_adapter.run_stage("profile_summary", payload, seed=1)
    assert isinstance(res, dict)
    assert res["generated_summary"].startswith("Asha is a motivated professional.")


@pytest.mark.asyncio
async def test_mock_adapter_unknown_stage_returns_empty():
    assert await llm_adapter.run_stage("no_such_stage", {}) == {}


@pytest.mark.asyncio
async def test_http_adapter_fallback(monkeypatch, test_settings):
    monkeypatch.setattr(test_settings, "LLM_ADAPTER", "http")
    monkeypatch.setattr(test_settings, "LLM_HTTP_URL", "https://example.invalid/llm")
    monkeypatch.setattr(test_settings, "LLM_ALLOW_FALLBACK", True)

    async def fake_run(stage, payload, seed=42):
        raise RuntimeError("simulated http failure")

    monkeypatch.setattr("jobboard.services.llm_adapters.http_adapter.run_stage", fake_run)

    res = await llm_adapter.run_stage("candidate_matching", {"input": {"job_description": "x", "candidate_profiles": ""}}, seed=2)
    assert res["relevant_candidate_ids"] == []


@pytest.mark.asyncio
async def test_http_adapter_failure_propagates_without_fallback(monkeypatch, test_settings):
    monkeypatch.setattr(test_settings, "LLM_ADAPTER", "http")

    async def fake_run(stage, payload, seed=42):
        raise RuntimeError("simulated http failure")

    monkeypatch.setattr("jobboard.services.llm_adapters.http_adapter.run_stage", fake_run)
    with pytest.raises(RuntimeError):
        await llm_adapter.run_stage("job_matching", {})


@pytest.mark.asyncio
async def test_retries_before_giving_up(monkeypatch, test_settings):
    monkeypatch.setattr(test_settings, "LLM_ADAPTER", "http")
    monkeypatch.setattr(test_settings, "LLM_RETRIES", 2)
    monkeypatch.setattr(test_settings, "LLM_BACKOFF_FACTOR", 0)
    attempts = []

    async def flaky(stage, payload, seed=42):
        attempts.append(seed)
        if len(attempts) < 3:
            raise RuntimeError("temporary")
        return {"ok": True}

    monkeypatch.setattr("jobboard.services.llm_adapters.http_adapter.run_stage", flaky)
    assert await llm_adapter.run_stage("job_matching", {}, seed=7) == {"ok": True}
    assert attempts == [7, 7, 7]


def test_load_adapter_rejects_modules_without_run_stage():
    with pytest.raises(RuntimeError):
        llm_adapter.load_adapter("jobboard.services.data_uri")


def test_gemini_request_carries_prompt_media_and_schema():
    uri = to_data_uri(b"hello", "text/plain")
    body = gemini_adapter.build_request(
        {"prompt": "Parse this", "media": [uri, "not-a-uri"], "output_schema": {"type": "object"}}, seed=3
    )
    parts = body["contents"][0]["parts"]
    assert parts[0]["text"].startswith("Parse this")
    assert '{"type": "object"}' in parts[0]["text"]
    assert parts[1] == {"inline_data": {"mime_type": "text/plain", "data": "aGVsbG8="}}
    assert len(parts) == 2
    assert body["generationConfig"] == {"responseMimeType": "application/json", "seed": 3}


@pytest.mark.parametrize(
    "text,expected",
    [
        ('{"a": 1}', {"a": 1}),
        ('```json\n{"a": 1}\n```', {"a": 1}),
        ("Sure! Here it is: {\"a\": [1, 2]} hope that helps", {"a": [1, 2]}),
        ("[1, 2]", {}),
        ("no json here", {}),
    ],
)
def test_gemini_extract_json(text, expected):
    assert gemini_adapter.extract_json(text) == expected


@pytest.mark.asyncio
async def test_gemini_requires_api_key(test_settings, monkeypatch):
    monkeypatch.setattr(test_settings, "LLM_API_KEY", None)
    with pytest.raises(RuntimeError):
        await gemini_adapter.run_stage("job_matching", {"prompt": "x"})

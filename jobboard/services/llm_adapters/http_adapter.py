# jobboard/services/llm_adapters/http_adapter.py
import httpx

from jobboard.core.config import settings


async def run_stage(stage_name: str, payload: dict, seed: int = 42) -> dict:
    # Posts the stage payload to a JSON gateway at LLM_HTTP_URL that answers with the output object
    url = settings.LLM_HTTP_URL
    if not url:
        raise RuntimeError("LLM_HTTP_URL is not configured")
    headers = {"Authorization": f"Bearer {settings.LLM_API_KEY}"} if settings.LLM_API_KEY else {}
    async with httpx.AsyncClient(timeout=settings.LLM_TIMEOUT_SEC) as client:
        resp = await client.post(
            str(url),
            json={"stage": stage_name, "payload": payload, "seed": seed},
            headers=headers,
        )
        resp.raise_for_status()
        return resp.json()

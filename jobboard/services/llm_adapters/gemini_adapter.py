# jobboard/services/llm_adapters/gemini_adapter.py
"""
Google Generative Language REST adapter (generateContent).

The rendered prompt goes in as a text part and every media data URI as an
inline_data part; the response is requested as JSON and parsed back into a
dict. A reply without a parseable JSON object yields {}.
"""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from jobboard.core.config import settings
from jobboard.services.data_uri import extract_mime_type

logger = logging.getLogger(__name__)


def _media_part(data_uri: str) -> Optional[Dict[str, Any]]:
    mime = extract_mime_type(data_uri)
    if not mime or "," not in data_uri:
        return None
    return {"inline_data": {"mime_type": mime, "data": data_uri.split(",", 1)[1]}}


def build_request(payload: dict, seed: int = 42) -> Dict[str, Any]:
    parts: List[Dict[str, Any]] = [{"text": payload.get("prompt", "")}]
    for uri in payload.get("media") or []:
        part = _media_part(uri)
        if part:
            parts.append(part)
    generation_config: Dict[str, Any] = {"responseMimeType": "application/json", "seed": seed}
    if payload.get("output_schema"):
        # the schema is sent as a hint in the prompt; the REST schema dialect is narrower than JSON Schema
        parts[0]["text"] += "\n\nRespond with JSON matching this schema:\n" + json.dumps(payload["output_schema"])
    return {"contents": [{"role": "user", "parts": parts}], "generationConfig": generation_config}


def extract_json(text: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(text)
    except ValueError:
        # the model sometimes wraps the object in prose or a code fence
        start, end = text.find("{"), text.rfind("}")
        if start == -1 or end <= start:
            return {}
        try:
            parsed = json.loads(text[start:end + 1])
        except ValueError:
            return {}
    return parsed if isinstance(parsed, dict) else {}


async def run_stage(stage_name: str, payload: dict, seed: int = 42) -> dict:
    if not settings.LLM_API_KEY:
        raise RuntimeError("LLM_API_KEY is not configured")
    url = f"{settings.GEMINI_ENDPOINT}/{settings.LLM_MODEL}:generateContent"
    headers = {"x-goog-api-key": settings.LLM_API_KEY, "Content-Type": "application/json"}
    async with httpx.AsyncClient(timeout=settings.LLM_TIMEOUT_SEC) as client:
        resp = await client.post(url, json=build_request(payload, seed), headers=headers)
        resp.raise_for_status()
        data = resp.json()
    candidates = data.get("candidates") or [{}]
    parts = candidates[0].get("content", {}).get("parts") or [{}]
    text = "".join(p.get("text", "") for p in parts)
    if not text:
        logger.warning("Gemini returned no text for stage %s (finishReason=%s)", stage_name, candidates[0].get("finishReason"))
        return {}
    return extract_json(text)

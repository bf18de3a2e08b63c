# jobboard/services/llm_adapter.py
"""
Pluggable LLM adapter loader and facade.

Settings:
- LLM_ADAPTER: "mock" (default), "http", "gemini" or a dotted module path
- LLM_RETRIES / LLM_BACKOFF_FACTOR: extra attempts against the configured adapter
- LLM_ALLOW_FALLBACK: fall back to the mock adapter when the configured one fails

Public:
- async def run_stage(stage_name: str, payload: dict, seed: int = 42) -> dict
"""

import asyncio
import importlib
import logging
from typing import Any, Dict

from jobboard.core.config import settings

logger = logging.getLogger(__name__)

_BUILTIN_ADAPTERS = {
    "mock": "jobboard.services.llm_adapters.mock_adapter",
    "http": "jobboard.services.llm_adapters.http_adapter",
    "gemini": "jobboard.services.llm_adapters.gemini_adapter",
}


def load_adapter(name: str):
    mod = importlib.import_module(_BUILTIN_ADAPTERS.get(name, name))
    # adapter module must implement async run_stage
    if not hasattr(mod, "run_stage"):
        raise RuntimeError(f"Adapter {name} does not expose run_stage()")
    return mod


async def _run_with_retries(adapter, stage_name: str, payload: Dict[str, Any], seed: int) -> Dict[str, Any]:
    attempts = max(settings.LLM_RETRIES, 0) + 1
    for attempt in range(1, attempts + 1):
        try:
            return await adapter.run_stage(stage_name, payload, seed=seed)
        except Exception:
            if attempt == attempts:
                raise
            delay = settings.LLM_BACKOFF_FACTOR * (2 ** (attempt - 1))
            logger.warning("Stage %s failed (attempt %d/%d), retrying in %.2fs", stage_name, attempt, attempts, delay)
            await asyncio.sleep(delay)


async def run_stage(stage_name: str, payload: Dict[str, Any], seed: int = 42) -> Dict[str, Any]:
    """
    Unified entry to call the configured adapter.
    If the adapter fails and fallback is allowed, fall back to the mock adapter.
    """
    adapter = load_adapter(settings.LLM_ADAPTER)
    try:
        return await _run_with_retries(adapter, stage_name, payload, seed)
    except Exception:
        if settings.LLM_ALLOW_FALLBACK and settings.LLM_ADAPTER != "mock":
            logger.warning("Adapter %s failed for stage %s, falling back to mock", settings.LLM_ADAPTER, stage_name, exc_info=True)
            return await load_adapter("mock").run_stage(stage_name, payload, seed=seed)
        raise

# jobboard/services/llm_adapters/mock_adapter.py
import asyncio
from typing import Any, Dict

from jobboard.services import text_extract
from jobboard.services.data_uri import decode_text


def _media_text(payload: dict) -> str:
    return "\n".join(decode_text(uri) for uri in payload.get("media") or [])


def _job_matching(inputs: Dict[str, Any]) -> Dict[str, Any]:
    ids = text_extract.rank_by_overlap(
        inputs.get("job_seeker_profile", ""), inputs.get("job_postings", ""), "Job ID"
    )
    if not ids:
        return {"relevant_job_ids": [], "reasoning": "No postings share skills or keywords with the profile."}
    return {
        "relevant_job_ids": ids,
        "reasoning": f"Ranked {len(ids)} posting(s) by overlap between the profile and each posting's skills and description.",
    }


def _candidate_matching(inputs: Dict[str, Any]) -> Dict[str, Any]:
    ids = text_extract.rank_by_overlap(
        inputs.get("job_description", ""), inputs.get("candidate_profiles", ""), "Candidate UID"
    )
    if not ids:
        return {"relevant_candidate_ids": [], "reasoning": "No candidate shares skills or keywords with the job."}
    return {
        "relevant_candidate_ids": ids,
        "reasoning": f"Ranked {len(ids)} candidate(s) by overlap between the job description and each profile.",
    }


def _profile_summary(inputs: Dict[str, Any]) -> Dict[str, Any]:
    profile = inputs.get("job_seeker_profile_data", "")
    name = text_extract.field_value(profile, "Name")
    headline = text_extract.field_value(profile, "Headline")
    skills = text_extract.field_value(profile, "Skills")
    if not (name or headline or skills):
        return {}
    sentences = [f"{name or 'This candidate'} is {'a ' + headline if headline else 'a motivated professional'}."]
    if skills:
        sentences.append(f"Key strengths include {skills}.")
    target = inputs.get("target_role_or_company")
    if target:
        sentences.append(f"Brings experience directly relevant to {target}.")
    return {"generated_summary": " ".join(sentences)}


async def run_stage(stage_name: str, payload: dict, seed: int = 42) -> dict:
    # deterministic stand-in for the model; returns the flow's output fields
    await asyncio.sleep(0)  # yield
    inputs = payload.get("input") or {}
    if stage_name == "parse_resume":
        return text_extract.parse_resume_text(_media_text(payload))
    if stage_name == "parse_job_description":
        return text_extract.parse_job_text(_media_text(payload))
    if stage_name == "job_matching":
        return _job_matching(inputs)
    if stage_name == "candidate_matching":
        return _candidate_matching(inputs)
    if stage_name == "profile_summary":
        return _profile_summary(inputs)
    return {}

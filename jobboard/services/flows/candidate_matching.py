# jobboard/services/flows/candidate_matching.py
from typing import List

from pydantic import BaseModel, Field

from jobboard.services.flows.base import Flow


class AIPoweredCandidateMatchingInput(BaseModel):
    job_description: str
    # "Candidate UID: ..." blocks, see formatting.format_candidates_for_ai
    candidate_profiles: str


class AIPoweredCandidateMatchingOutput(BaseModel):
    relevant_candidate_ids: List[str] = Field(default_factory=list)
    reasoning: str = ""


NO_MATCH_REASONING = "AI did not return a valid response or found no matches."

PROMPT = """You are an expert AI recruitment assistant. Your task is to match candidates to a given job description.
You will receive a detailed job description and a collection of candidate profiles.

Job Description:
{job_description}

Candidate Profiles:
{candidate_profiles}

Based on the provided information, analyze each candidate profile against the job description.
Identify the candidate UIDs that are the most relevant matches.
Provide a clear reasoning for your selections, highlighting specific skills, experience, or qualifications that make each candidate a strong fit.
Return the UIDs of the matched candidates in the 'relevant_candidate_ids' array and your explanation in the 'reasoning' field.

Prioritize candidates whose skills and experience closely align with the core requirements of the job description.
Consider factors like years of experience, specific technical skills, and cultural fit if discernible from the profiles.

Ensure the output is correctly formatted JSON.
"""


class CandidateMatchingFlow(Flow[AIPoweredCandidateMatchingInput, AIPoweredCandidateMatchingOutput]):
    stage_name = "candidate_matching"
    output_model = AIPoweredCandidateMatchingOutput
    prompt_template = PROMPT

    def default_output(self, inp: AIPoweredCandidateMatchingInput) -> AIPoweredCandidateMatchingOutput:
        return AIPoweredCandidateMatchingOutput(relevant_candidate_ids=[], reasoning=NO_MATCH_REASONING)


_flow = CandidateMatchingFlow()


async def ai_powered_candidate_matching(inp: AIPoweredCandidateMatchingInput) -> AIPoweredCandidateMatchingOutput:
    return await _flow.run(inp)

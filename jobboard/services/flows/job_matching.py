# jobboard/services/flows/job_matching.py
from typing import List

from pydantic import BaseModel, Field

from jobboard.services.flows.base import Flow


class AIPoweredJobMatchingInput(BaseModel):
    # skills, experience, education, languages, preferences and resume summary
    job_seeker_profile: str
    # "Job ID: ..." blocks for the approved postings
    job_postings: str


class AIPoweredJobMatchingOutput(BaseModel):
    # most relevant first
    relevant_job_ids: List[str] = Field(default_factory=list)
    reasoning: str = ""


NO_MATCH_REASONING = (
    "AI did not return a valid response or found no matches based on the provided profile and job listings."
)

PROMPT = """You are an expert AI career counselor specializing in matching job seekers with suitable job opportunities.
You will receive a detailed profile for a job seeker and a list of available, approved job postings.

Job Seeker Profile:
{job_seeker_profile}

Available Job Postings:
{job_postings}

Your task is to:
1.  Thoroughly analyze the job seeker's profile, paying close attention to their skills, languages (and proficiency if specified), work experience (including roles, responsibilities, and duration), education, stated preferences (such as preferred locations, desired salary in INR, and job search status), and any summary from their resume.
2.  Carefully review each job posting, focusing on the job description, required skills, language requirements, location, job type, remote status, and salary range (if provided).
3.  Identify the job IDs that are the MOST relevant matches for the job seeker. Consider a holistic match, not just keyword stuffing.
4.  Provide a detailed reasoning for your selections. Explain for each recommended job (or generally for the set of recommendations) how it aligns with the seeker's profile. Highlight specific connections, e.g., "The seeker's experience in 'Project Management' and skill 'Agile' directly match Job ID XYZ's requirements." or "Job ID ABC aligns with the seeker's desired salary range and preferred remote work option." Also consider language skills if relevant to job description.
5.  Return the job IDs in the 'relevant_job_ids' array, ideally ordered by relevance (most relevant first).
6.  Ensure your output is a correctly formatted JSON object matching the defined output schema.

Prioritize jobs that offer a strong alignment in skills, experience level, salary expectations (if seeker's desired salary falls within or near job's range), and location/remote preferences.
If the seeker's profile is sparse, make the best judgment based on the available information.
If no jobs are a good match, return an empty 'relevant_job_ids' array and explain why in the 'reasoning' field.
"""


class JobMatchingFlow(Flow[AIPoweredJobMatchingInput, AIPoweredJobMatchingOutput]):
    stage_name = "job_matching"
    output_model = AIPoweredJobMatchingOutput
    prompt_template = PROMPT

    def default_output(self, inp: AIPoweredJobMatchingInput) -> AIPoweredJobMatchingOutput:
        return AIPoweredJobMatchingOutput(relevant_job_ids=[], reasoning=NO_MATCH_REASONING)


_flow = JobMatchingFlow()


async def ai_powered_job_matching(inp: AIPoweredJobMatchingInput) -> AIPoweredJobMatchingOutput:
    return await _flow.run(inp)

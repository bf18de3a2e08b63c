# jobboard/services/flows/profile_summary.py
from typing import Optional

from pydantic import BaseModel

from jobboard.services.flows.base import Flow


class GenerateProfileSummaryInput(BaseModel):
    # name, headline, experiences, skills and education as text
    job_seeker_profile_data: str
    target_role_or_company: Optional[str] = None


class GenerateProfileSummaryOutput(BaseModel):
    # typically 3-5 sentences
    generated_summary: Optional[str] = None


FALLBACK_SUMMARY = (
    "Could not generate a summary at this time. Please ensure your profile has sufficient details or try again."
)

PROMPT = """You are an expert career coach and professional resume writer.
Your task is to generate a concise, impactful, and professional summary (approximately 3-5 sentences) for a job seeker.
The summary should be tailored to the target role or company if provided.
Use the job seeker profile data to understand their background, skills, and experiences.

Job Seeker Profile Data:
{job_seeker_profile_data}

{target_block}

Craft a summary that is:
- Engaging and professional in tone.
- Highlights key strengths and achievements.
- Aligns with the job seeker's career aspirations as inferable from their profile.
- Is well-written and grammatically correct.
- Avoids clichés and generic statements.

Return only the generated summary text in the 'generated_summary' field of the JSON output.
If the profile data is too sparse to generate a meaningful summary, you can indicate that or return a very generic placeholder.
"""

TARGETED_BLOCK = """Target Role/Company/Industry: {target}
Focus the summary on highlighting experiences and skills most relevant to this target."""

GENERAL_BLOCK = "Generate a general, strong professional summary."


class ProfileSummaryFlow(Flow[GenerateProfileSummaryInput, GenerateProfileSummaryOutput]):
    stage_name = "profile_summary"
    output_model = GenerateProfileSummaryOutput
    prompt_template = PROMPT

    def render_prompt(self, inp: GenerateProfileSummaryInput) -> str:
        target = (inp.target_role_or_company or "").strip()
        block = TARGETED_BLOCK.format(target=target) if target else GENERAL_BLOCK
        return self.prompt_template.format(job_seeker_profile_data=inp.job_seeker_profile_data, target_block=block)

    def accept(self, output: GenerateProfileSummaryOutput) -> bool:
        return bool(output.generated_summary and output.generated_summary.strip())

    def default_output(self, inp: GenerateProfileSummaryInput) -> GenerateProfileSummaryOutput:
        return GenerateProfileSummaryOutput(generated_summary=FALLBACK_SUMMARY)


_flow = ProfileSummaryFlow()


async def generate_profile_summary(inp: GenerateProfileSummaryInput) -> GenerateProfileSummaryOutput:
    return await _flow.run(inp)

# jobboard/services/flows/parse_job_description.py
from typing import List, Optional

from pydantic import BaseModel, Field

from jobboard.models.job import JobType
from jobboard.services.flows.base import Flow, UNSUPPORTED_DOCUMENT_MESSAGE, unsupported_mime


class ParseJobDescriptionInput(BaseModel):
    job_description_data_uri: str


class ParseJobDescriptionOutput(BaseModel):
    title: Optional[str] = None
    # responsibilities and qualifications, or the parsing error message
    description: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None


PROMPT = """You are an expert job description parser. Analyze the attached job description document and extract key information.

Extract the following details and structure them according to the output schema:
- Job Title.
- Full Job Description (responsibilities, qualifications, about the role, etc.). Try to capture the main content.
- Required or Preferred Skills (as a list of strings).
- Job Location (e.g., "City, State", "Remote").
- Job Type (e.g., "Full-time", "Part-time", "Contract", "Internship").
- Salary range if specified (minimum and maximum values).

Prioritize accuracy. If some information is not clearly available, omit the field rather than guessing.
For skills, extract distinct skills. For salary, provide numbers if possible.
Ensure the output is valid JSON matching the provided schema.
"""


class ParseJobDescriptionFlow(Flow[ParseJobDescriptionInput, ParseJobDescriptionOutput]):
    stage_name = "parse_job_description"
    output_model = ParseJobDescriptionOutput
    prompt_template = PROMPT
    media_fields = ["job_description_data_uri"]

    def precheck(self, inp: ParseJobDescriptionInput) -> Optional[ParseJobDescriptionOutput]:
        mime = unsupported_mime(inp.job_description_data_uri, self.stage_name)
        if mime:
            return ParseJobDescriptionOutput(description=UNSUPPORTED_DOCUMENT_MESSAGE.format(mime=mime), skills=[])
        return None

    def default_output(self, inp: ParseJobDescriptionInput) -> ParseJobDescriptionOutput:
        return ParseJobDescriptionOutput(skills=[])


_flow = ParseJobDescriptionFlow()


async def parse_job_description_flow(inp: ParseJobDescriptionInput) -> ParseJobDescriptionOutput:
    return await _flow.run(inp)

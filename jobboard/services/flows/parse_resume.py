# jobboard/services/flows/parse_resume.py
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from jobboard.services.flows.base import Flow, UNSUPPORTED_DOCUMENT_MESSAGE, unsupported_mime


class ParseResumeInput(BaseModel):
    # data:<mimetype>;base64,<encoded_data>; plain text works best
    resume_data_uri: str


class ParseResumeOutput(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    headline: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    # markdown summary of work history, or the parsing error message
    experience: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None


PROMPT = """You are an expert resume parser. Analyze the attached resume document and extract key information.

Extract the following details and structure them according to the output schema:
- Candidate's full name.
- Candidate's email address.
- A concise professional headline or summary.
- A list of technical and soft skills.
- A summary of their work experience. If possible, format it nicely, perhaps using Markdown for structure if you can infer sections like job titles, companies, and dates.
- URLs for their portfolio and LinkedIn profile, if present.

Prioritize accuracy. If some information is not clearly available, omit the field rather than guessing.
Ensure the output is valid JSON matching the provided schema.
If the document content appears to be an error message about file processing, summarize that error.
"""


class ParseResumeFlow(Flow[ParseResumeInput, ParseResumeOutput]):
    stage_name = "parse_resume"
    output_model = ParseResumeOutput
    prompt_template = PROMPT
    media_fields = ["resume_data_uri"]

    def precheck(self, inp: ParseResumeInput) -> Optional[ParseResumeOutput]:
        mime = unsupported_mime(inp.resume_data_uri, self.stage_name)
        if mime:
            return ParseResumeOutput(experience=UNSUPPORTED_DOCUMENT_MESSAGE.format(mime=mime), skills=[])
        return None

    def default_output(self, inp: ParseResumeInput) -> ParseResumeOutput:
        return ParseResumeOutput(skills=[])


_flow = ParseResumeFlow()


async def parse_resume_flow(inp: ParseResumeInput) -> ParseResumeOutput:
    return await _flow.run(inp)

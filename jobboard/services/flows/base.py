# jobboard/services/flows/base.py
"""
Shared machinery for the AI flows.

A flow renders its prompt from a typed input, sends it (plus any media data
URIs) through the LLM adapter facade, and validates the reply against its
output model. Anything that is not a valid output (adapter error, empty or
malformed reply) yields the flow's default result instead of an exception.

Stages:
  parse_resume
  parse_job_description
  job_matching
  candidate_matching
  profile_summary
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from jobboard.services import llm_adapter
from jobboard.services.data_uri import extract_mime_type, is_unsupported_document
from jobboard.services.flow_cache import cache, cache_key

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)

UNSUPPORTED_DOCUMENT_MESSAGE = (
    "Parsing Error: The uploaded file type ({mime}) cannot be directly processed by the AI. "
    "Please try uploading a plain text file (.txt) or ensure the content is pasted directly if supported."
)


class Flow(Generic[InputT, OutputT]):
    stage_name: str = ""
    output_model: Type[BaseModel]
    prompt_template: str = ""
    # input fields carrying data URIs; sent as media parts, not prompt text
    media_fields: List[str] = []

    def render_prompt(self, inp: InputT) -> str:
        values = inp.model_dump(exclude=set(self.media_fields))
        return self.prompt_template.format(**values)

    def default_output(self, inp: InputT) -> OutputT:
        raise NotImplementedError

    def precheck(self, inp: InputT) -> Optional[OutputT]:
        """Return a result to short-circuit the model call."""
        return None

    def accept(self, output: OutputT) -> bool:
        return True

    def build_payload(self, inp: InputT) -> Dict[str, Any]:
        return {
            "prompt": self.render_prompt(inp),
            "media": [getattr(inp, f) for f in self.media_fields],
            "input": inp.model_dump(exclude=set(self.media_fields)),
            "output_schema": self.output_model.model_json_schema(),
        }

    async def _call_model(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            return await llm_adapter.run_stage(self.stage_name, payload)
        except Exception:
            logger.exception("[%s] model call failed", self.stage_name)
            return None

    def _validate(self, raw: Optional[Dict[str, Any]]) -> Optional[OutputT]:
        if not raw or not isinstance(raw, dict):
            return None
        try:
            output = self.output_model.model_validate(raw)
        except ValidationError as exc:
            logger.warning("[%s] model output failed validation: %s", self.stage_name, exc)
            return None
        return output if self.accept(output) else None

    async def run(self, inp: InputT) -> OutputT:
        early = self.precheck(inp)
        if early is not None:
            return early
        payload = self.build_payload(inp)
        key = cache_key(self.stage_name, payload)
        output = self._validate(await cache.get(key))
        if output is not None:
            logger.debug("[%s] cache hit", self.stage_name)
            return output

        raw = await self._call_model(payload)
        output = self._validate(raw)
        if output is None:
            logger.warning("[%s] no usable output from the model, returning default result", self.stage_name)
            return self.default_output(inp)
        # cache only replies that passed validation
        await cache.set(key, raw)
        return output


def unsupported_mime(data_uri: str, stage_name: str) -> Optional[str]:
    """MIME type of a document the model cannot read, else None."""
    mime = extract_mime_type(data_uri)
    if is_unsupported_document(mime):
        logger.warning(
            "[%s] MIME type %s is not suitable for direct processing; extract its text before sending it",
            stage_name,
            mime,
        )
        return mime
    return None

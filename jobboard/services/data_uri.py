# jobboard/services/data_uri.py
import base64
import binascii
import re
from typing import Optional
from urllib.parse import unquote_to_bytes

# document formats the model cannot read as inline media
UNSUPPORTED_DOCUMENT_MIME_TYPES = [
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # .docx
    "application/msword",  # .doc
    "application/pdf",
    "application/vnd.oasis.opendocument.text",  # .odt
]

_MIME_RE = re.compile(r":(.*?);")


def extract_mime_type(data_uri: str) -> Optional[str]:
    """'data:text/plain;base64,...' -> 'text/plain'. None when the header has no ';'."""
    header = data_uri.split(",")[0]
    m = _MIME_RE.search(header)
    if not m:
        return None
    return m.group(1).strip() or None


def is_unsupported_document(mime_type: Optional[str]) -> bool:
    return bool(mime_type) and mime_type in UNSUPPORTED_DOCUMENT_MIME_TYPES


def to_data_uri(content: bytes, mime_type: str) -> str:
    return f"data:{mime_type or 'application/octet-stream'};base64,{base64.b64encode(content).decode('ascii')}"


def decode_text(data_uri: str) -> str:
    """Best-effort text payload of a data URI; empty string when it cannot be decoded."""
    if "," not in data_uri:
        return ""
    header, body = data_uri.split(",", 1)
    try:
        raw = base64.b64decode(body) if header.endswith(";base64") else unquote_to_bytes(body)
    except (binascii.Error, ValueError):
        return ""
    return raw.decode("utf-8", errors="ignore")

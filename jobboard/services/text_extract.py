# jobboard/services/text_extract.py
"""
Rule-based extraction used by the mock LLM adapter.

These heuristics stand in for the model in development and tests; they are
deterministic and deliberately simple.
"""
from typing import Any, Dict, List, Optional, Set
import re

EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
URL_RE = re.compile(r"https?://[^\s,;)]+", re.IGNORECASE)
WORD_RE = re.compile(r"[a-z0-9+#.]{2,}")

STOPWORDS = {
    "and", "the", "for", "with", "you", "our", "are", "will", "job", "jobs", "role",
    "name", "email", "title", "company", "skills", "location", "type", "remote",
    "true", "false", "n/a", "description", "experience", "years", "months", "from",
    "candidate", "uid", "id", "salary", "level", "headline", "in", "at", "of", "to",
}

JOB_TYPES = ["Full-time", "Part-time", "Contract", "Internship"]


def _lines(text: str) -> List[str]:
    return [l.strip() for l in text.splitlines() if l.strip()]


def _section(joined: str, headings: str, limit: int = 400) -> Optional[str]:
    m = re.search(rf"(?:{headings})\s*:?\s*([\s\S]{{0,{limit}}})", joined, re.IGNORECASE)
    return m.group(1).strip() if m else None


def _split_items(block: str, limit: int) -> List[str]:
    # stop at the next blank-line separated heading
    block = re.split(r"\n\s*\n", block)[0]
    return [x.strip("-•* \t") for x in re.split(r"[\n,;]", block) if x.strip("-•* \t")][:limit]


def parse_resume_text(text: str) -> Dict[str, Any]:
    lines = _lines(text)
    joined = "\n".join(lines)

    skills: List[str] = []
    block = _section(text, r"Technical Skills|Skills")
    if block:
        skills = _split_items(block, 50)

    email = EMAIL_RE.search(joined)
    urls = URL_RE.findall(joined)
    linkedin = next((u for u in urls if "linkedin.com" in u.lower()), None)
    portfolio = next((u for u in urls if "linkedin.com" not in u.lower()), None)

    experience = _section(text, r"Work Experience|Experience")
    if not experience:
        bullets = re.findall(r"[-•\u2022]\s*(.+)", joined)
        experience = "\n".join(f"- {b}" for b in bullets[:20]) or None

    parsed: Dict[str, Any] = {
        "name": lines[0][:100] if lines else None,
        "email": email.group(0) if email else None,
        "headline": lines[1][:150] if len(lines) > 1 and not EMAIL_RE.search(lines[1]) else None,
        "skills": skills,
        "experience": experience,
        "portfolio_url": portfolio,
        "linkedin_url": linkedin,
    }
    return {k: v for k, v in parsed.items() if v not in (None, "")}


def _salary_numbers(joined: str) -> List[float]:
    m = re.search(r"salary[^\n]*", joined, re.IGNORECASE)
    if not m:
        return []
    values = []
    for num, unit in re.findall(r"(\d[\d,]*(?:\.\d+)?)\s*(k|l|lpa|cr)?\b", m.group(0), re.IGNORECASE):
        value = float(num.replace(",", ""))
        unit = unit.lower()
        if unit == "k":
            value *= 1000
        elif unit in ("l", "lpa"):
            value *= 100_000
        elif unit == "cr":
            value *= 10_000_000
        values.append(value)
    return values


def parse_job_text(text: str) -> Dict[str, Any]:
    lines = _lines(text)
    joined = "\n".join(lines)
    title = lines[0][:100] if lines else None

    skills: List[str] = []
    block = _section(text, r"Required Skills|Skills|Requirements|Qualifications")
    if block:
        skills = _split_items(block, 30)

    location = None
    m = re.search(r"Location\s*:\s*(.+)", joined, re.IGNORECASE)
    if m:
        location = m.group(1).strip()
    elif re.search(r"\bremote\b", joined, re.IGNORECASE):
        location = "Remote"

    job_type = next((t for t in JOB_TYPES if t.lower() in joined.lower()), None)
    salaries = _salary_numbers(joined)

    parsed: Dict[str, Any] = {
        "title": title,
        "description": "\n".join(lines[1:]) or None,
        "skills": skills,
        "location": location,
        "job_type": job_type,
        "salary_min": min(salaries) if salaries else None,
        "salary_max": max(salaries) if len(salaries) > 1 else None,
    }
    return {k: v for k, v in parsed.items() if v not in (None, "")}


def keywords(text: str) -> Set[str]:
    return {w.strip(".") for w in WORD_RE.findall(text.lower()) if w.strip(".") not in STOPWORDS}


def split_blocks(text: str, id_label: str) -> Dict[str, str]:
    """Map each '<id_label>: <id>' block in a listing to its text."""
    blocks: Dict[str, str] = {}
    pattern = re.compile(rf"^{re.escape(id_label)}\s*:\s*(\S+)\s*$", re.MULTILINE)
    matches = list(pattern.finditer(text))
    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        blocks[m.group(1)] = text[m.end():end]
    return blocks


def rank_by_overlap(reference: str, listing: str, id_label: str, min_overlap: int = 1) -> List[str]:
    """Ids from the listing ordered by keyword overlap with the reference text."""
    wanted = keywords(reference)
    scored = []
    for position, (item_id, block) in enumerate(split_blocks(listing, id_label).items()):
        overlap = len(wanted & keywords(block))
        if overlap >= min_overlap:
            scored.append((-overlap, position, item_id))
    return [item_id for _, _, item_id in sorted(scored)]


def field_value(text: str, label: str) -> Optional[str]:
    m = re.search(rf"^\s*{re.escape(label)}\s*:\s*(.+)$", text, re.IGNORECASE | re.MULTILINE)
    if not m:
        return None
    value = m.group(1).strip()
    return None if value in ("", "N/A") else value

from typing import Dict, Any
import json
import logging
import re

from langgraph.graph import StateGraph, END

from .extractors import extract_text, fetch_job_description_from_url
from .llm import get_llm, message_text
from .prompts import (
    ATS_PROMPT,
    COVER_LETTER_PROMPT,
    PARSE_RESUME_PROMPT,
    RESUME_SCHEMA,
    TAILOR_RESUME_PROMPT,
    TONE_INSTRUCTIONS,
)

logger = logging.getLogger(__name__)

# a fence opening the reply and one closing it; backticks inside the body stay
_OPEN_FENCE_RE = re.compile(r"\A\s*```[A-Za-z]*[ \t]*\n?")
_CLOSE_FENCE_RE = re.compile(r"\n?[ \t]*```\s*\Z")


class LLMResponseError(ValueError):
    """The model answered, but not with a usable JSON object."""


def strip_code_fences(text: str) -> str:
    text = _OPEN_FENCE_RE.sub("", text or "", count=1)
    return _CLOSE_FENCE_RE.sub("", text, count=1).strip()


def parse_json_response(text: str) -> Dict[str, Any]:
    cleaned = strip_code_fences(text)
    start, end = cleaned.find("{"), cleaned.rfind("}")
    if start == -1 or end <= start:
        raise LLMResponseError("No JSON object found in model response")

    try:
        data = json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError as e:
        raise LLMResponseError(f"Model returned invalid JSON: {e.msg}") from e

    if not isinstance(data, dict):
        raise LLMResponseError("Model response is not a JSON object")
    return data


def _generate(prompt: str) -> str:
    return message_text(get_llm().invoke(prompt))


# ---------- Nodes ----------

def extract_resume_node(state: Dict[str, Any]) -> Dict[str, Any]:
    upload = state["upload"]
    text = extract_text(upload["data"], upload.get("mimetype", ""), upload.get("filename", ""))
    logger.info("Extracted %d characters from %s", len(text), upload.get("filename") or "upload")
    state["resume_text"] = text
    return state

def load_job_description_node(state: Dict[str, Any]) -> Dict[str, Any]:
    jd_text = (state.get("job_description") or "").strip()
    job_url = (state.get("job_url") or "").strip()
    if not jd_text and job_url:
        logger.info("Fetching job description from %s", job_url)
        jd_text = fetch_job_description_from_url(job_url)
    state["job_description"] = jd_text
    return state

def score_ats_node(state: Dict[str, Any]) -> Dict[str, Any]:
    if not state["resume_text"].strip():
        # skip the model call, the route turns this into a 400
        state["analysis"] = None
        return state

    prompt = ATS_PROMPT.format(
        resume_text=state["resume_text"],
        job_description=state["job_description"],
    )
    state["analysis"] = parse_json_response(_generate(prompt))
    return state

def structure_resume_node(state: Dict[str, Any]) -> Dict[str, Any]:
    if not state["resume_text"].strip():
        state["resume_data"] = None
        return state

    prompt = PARSE_RESUME_PROMPT.format(schema=RESUME_SCHEMA, resume_text=state["resume_text"])
    state["resume_data"] = parse_json_response(_generate(prompt))
    return state

def tailor_resume_node(state: Dict[str, Any]) -> Dict[str, Any]:
    prompt = TAILOR_RESUME_PROMPT.format(
        resume_json=json.dumps(state["resume_data"], indent=2),
        job_description=state["job_description"],
    )
    state["tailored_resume"] = parse_json_response(_generate(prompt))
    return state

def cover_letter_node(state: Dict[str, Any]) -> Dict[str, Any]:
    form = state["form"]
    info = form.get("personalInfo") or {}
    tone = form.get("tone")
    if not isinstance(tone, str):
        tone = "professional"
    prompt = COVER_LETTER_PROMPT.format(
        name=info.get("name", ""),
        email=info.get("email", ""),
        phone=info.get("phone", ""),
        address=info.get("address", ""),
        job_title=form.get("jobTitle", ""),
        company_name=form.get("companyName", ""),
        job_description=state.get("job_description") or "Not provided",
        experience=form.get("experience", ""),
        skills=form.get("skills", ""),
        achievements=form.get("achievements", ""),
        tone_instruction=TONE_INSTRUCTIONS.get(tone, TONE_INSTRUCTIONS["professional"]),
    )
    letter = _generate(prompt).strip()
    if not letter:
        raise LLMResponseError("Model returned an empty cover letter")
    state["cover_letter"] = letter
    return state


# ---------- Graphs ----------

def build_ats_graph():
    graph = StateGraph(dict)
    graph.add_node("extract_resume", extract_resume_node)
    graph.add_node("load_job_description", load_job_description_node)
    graph.add_node("score_ats", score_ats_node)

    graph.set_entry_point("extract_resume")
    graph.add_edge("extract_resume", "load_job_description")
    graph.add_edge("load_job_description", "score_ats")
    graph.add_edge("score_ats", END)
    return graph.compile()

def build_parse_graph():
    graph = StateGraph(dict)
    graph.add_node("extract_resume", extract_resume_node)
    graph.add_node("structure_resume", structure_resume_node)

    graph.set_entry_point("extract_resume")
    graph.add_edge("extract_resume", "structure_resume")
    graph.add_edge("structure_resume", END)
    return graph.compile()

def build_cover_letter_graph():
    graph = StateGraph(dict)
    graph.add_node("load_job_description", load_job_description_node)
    graph.add_node("write_cover_letter", cover_letter_node)

    graph.set_entry_point("load_job_description")
    graph.add_edge("load_job_description", "write_cover_letter")
    graph.add_edge("write_cover_letter", END)
    return graph.compile()

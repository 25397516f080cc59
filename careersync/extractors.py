from io import BytesIO
from pathlib import Path

import requests
import trafilatura
from pypdf import PdfReader
import docx

PDF_TYPES = {"application/pdf"}
WORD_TYPES = {
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
TEXT_TYPES = {"text/plain", "text/markdown"}


class ExtractionError(ValueError):
    pass


def extract_text_from_pdf(data: bytes) -> str:
    reader = PdfReader(BytesIO(data))
    parts = []
    for page in reader.pages:
        parts.append(page.extract_text() or "")
    return "\n".join(parts).strip()

def extract_text_from_docx(data: bytes) -> str:
    d = docx.Document(BytesIO(data))
    return "\n".join(p.text for p in d.paragraphs).strip()

def extract_text_from_txt(data: bytes) -> str:
    return data.decode("utf-8", errors="ignore").strip()

def _kind(mimetype: str, filename: str) -> str:
    mimetype = (mimetype or "").split(";")[0].strip().lower()
    if mimetype in PDF_TYPES:
        return "pdf"
    if mimetype in WORD_TYPES:
        return "docx"
    if mimetype in TEXT_TYPES:
        return "txt"

    # browsers sometimes send application/octet-stream, fall back to the suffix
    ext = Path(filename or "").suffix.lower()
    if ext == ".pdf":
        return "pdf"
    if ext in (".docx", ".doc"):
        return "docx"
    if ext in (".txt", ".md"):
        return "txt"
    raise ExtractionError(f"Unsupported file type: {mimetype or ext or 'unknown'}. Use PDF/DOCX/TXT")

def extract_text(data: bytes, mimetype: str = "", filename: str = "") -> str:
    kind = _kind(mimetype, filename)
    try:
        if kind == "pdf":
            return extract_text_from_pdf(data)
        if kind == "docx":
            return extract_text_from_docx(data)
        return extract_text_from_txt(data)
    except Exception as e:
        # legacy .doc and corrupt files end up here
        raise ExtractionError(f"Failed to extract text from file: {e}") from e

def fetch_job_description_from_url(url: str, timeout: int = 20) -> str:
    headers = {"User-Agent": "Mozilla/5.0"}
    r = requests.get(url, headers=headers, timeout=timeout)
    r.raise_for_status()

    extracted = trafilatura.extract(r.text, include_comments=False, include_tables=False)
    if extracted and len(extracted.strip()) > 200:
        return extracted.strip()

    # fallback: return html if extraction fails
    return r.text

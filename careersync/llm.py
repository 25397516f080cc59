from typing import Optional

from flask import current_app
from langchain_google_genai import ChatGoogleGenerativeAI


def get_llm(api_key: Optional[str] = None, temperature: float = 0.3) -> ChatGoogleGenerativeAI:
    """
    Gemini chat model. Uses the server key unless a caller-supplied key is given
    (the API key test does that).
    """
    cfg = current_app.config
    return ChatGoogleGenerativeAI(
        google_api_key=api_key or cfg["GEMINI_API_KEY"],
        model=cfg["GEMINI_MODEL"],
        temperature=temperature,
    )


def message_text(message) -> str:
    # Newer Gemini responses may carry a list of content parts instead of a str
    content = getattr(message, "content", message)
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, dict):
                parts.append(part.get("text", ""))
            else:
                parts.append(str(part))
        return "".join(parts)
    return content or ""

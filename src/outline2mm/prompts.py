"""Prompts for asking a language model to extract keywords."""

from __future__ import annotations

KEYWORD_PROMPT_TEMPLATE = """
Please analyze the following text and extract the key domain terms and concepts.
Return only a JSON array of strings with the extracted keywords.
For example: ["term1", "term2", "term3"]

Text to analyze:
{text}
"""


def build_keyword_prompt(text: str) -> str:
    """Render the keyword-analysis instruction for ``text``.

    Raises:
        ValueError: If ``text`` is empty or whitespace only.
    """
    if not text or not text.strip():
        raise ValueError("Text to analyze cannot be empty")
    return KEYWORD_PROMPT_TEMPLATE.format(text=text)


def build_keyword_messages(text: str, system_prompt: str | None = None) -> list[dict[str, str]]:
    """Build chat messages for a keyword-analysis completion request.

    A system message is prepended only when ``system_prompt`` is given.
    """
    messages: list[dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": build_keyword_prompt(text)})
    return messages

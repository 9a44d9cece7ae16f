"""Generative rewrite of page HTML into markdown via a chat model.

Model providers
---------------
``google`` (default)
    Gemini through ``langchain-google-genai``.  Requires ``GOOGLE_API_KEY``
    (``GOOGLE_GENERATIVE_AI_API_KEY`` is accepted too).

``openai``
    Requires ``OPENAI_API_KEY``.  Configure via ``OPENAI_CHAT_MODEL``.

``ollama``
    Local Ollama server at ``OLLAMA_BASE_URL``.

Set ``LLM_PROVIDER`` in your ``.env`` to switch providers.
"""

from __future__ import annotations

import os
from typing import Any

from sitecompiler.config import settings

CONVERSION_PROMPT = """# Task
Convert the input HTML to clean markdown format.

# Processing
- Don't change or remove words, just convert or keep it still.
- Don't yield anything else then the converted markdown itself.
- Ignore hyperlinks which points at non-global urls, such as "/here.png" "./here.html"

# IMPORTANT
DONT INCLUDE "```" AT THE START OR END. JUST OUTPUT THE MARKDOWN ITSELF, NOT THE CODEBLOCK. The data is as follows: """


def _require_env(*names: str) -> str:
    for name in names:
        value = os.environ.get(name, "")
        if value:
            return value
    raise EnvironmentError(
        f"{' or '.join(names)} environment variable is not set. "
        "Set it or choose another LLM_PROVIDER."
    )


def _get_llm() -> Any:
    """Return a configured LangChain chat model based on ``settings``."""
    if settings.llm_provider == "openai":
        _require_env("OPENAI_API_KEY")
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(model=settings.openai_chat_model, temperature=0)

    if settings.llm_provider == "ollama":
        from langchain_ollama import ChatOllama

        return ChatOllama(
            model=settings.ollama_chat_model,
            base_url=settings.ollama_base_url,
            temperature=0,
        )

    api_key = _require_env("GOOGLE_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY")
    from langchain_google_genai import ChatGoogleGenerativeAI

    return ChatGoogleGenerativeAI(
        model=settings.google_chat_model,
        google_api_key=api_key,
        temperature=0,
    )


def extract_via_generative_model(data: str) -> str:
    """Ask the chat model to convert *data* (HTML or text) to markdown.

    The response is returned verbatim; nothing checks that the model honoured
    the prompt.

    Raises:
        EnvironmentError: If the provider's API key is not set.
    """
    llm = _get_llm()
    response = llm.invoke(CONVERSION_PROMPT + data)
    return response.content if hasattr(response, "content") else str(response)

"""
Language model client for the ReAct agent.

The agent always reasons with the same OpenAI chat model at temperature 0 so
its tool use is as repeatable as the provider allows.  A new client is built
for every agent call; nothing is cached at module level, which keeps calls
with different API keys from sharing a client.
"""

from __future__ import annotations

import logging
from typing import Any

from langchain_openai import ChatOpenAI

logger = logging.getLogger("react_search.llm")

REACT_MODEL_NAME = "gpt-4o"
REACT_TEMPERATURE = 0


def build_llm(
    api_key: str,
    *,
    model_name: str = REACT_MODEL_NAME,
    temperature: float = REACT_TEMPERATURE,
) -> Any:
    """Return a fresh ``ChatOpenAI`` client.

    Args:
        api_key: OpenAI API key.
        model_name: OpenAI model identifier.
        temperature: Sampling temperature.

    Returns:
        A ``ChatOpenAI`` instance ready to be handed to an agent.
    """
    logger.info(f"Initialising OpenAI chat model (model={model_name}, temperature={temperature})")
    return ChatOpenAI(
        model=model_name,
        temperature=temperature,
        openai_api_key=api_key,
    )

"""Prompt templates pulled from the LangChain Hub.

The agent's instructions are not kept in this repository.  They are fetched by
key from a shared prompt registry on every call, so an updated prompt is picked
up without a redeploy.  Anything with a ``get(key)`` method can stand in for
the registry, which is how the tests avoid the network.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from langchain_classic import hub
from langchain_core.prompts import BasePromptTemplate

logger = logging.getLogger("react_search.prompts")

REACT_PROMPT_KEY = "hwchase17/react"


class TemplateSource(Protocol):
    def get(self, key: str) -> BasePromptTemplate:
        """Return the template stored under ``key`` or raise."""
        ...


class HubTemplateSource:
    """Template source backed by the LangChain Hub.

    ``api_url`` and ``api_key`` point the pull at a private LangSmith
    workspace; public prompts such as ``hwchase17/react`` need neither.
    """

    def __init__(self, api_url: Optional[str] = None, api_key: Optional[str] = None) -> None:
        self.api_url = api_url
        self.api_key = api_key

    def get(self, key: str) -> BasePromptTemplate:
        logger.info(f"Pulling prompt template {key!r} from the hub")
        return hub.pull(key, api_url=self.api_url, api_key=self.api_key)

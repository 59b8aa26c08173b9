# This package holds the building blocks the ReAct agent is assembled from.
#
# Each module wraps one external collaborator: the OpenAI chat model, the
# Google search tool, the prompt hub, the credential lookup, the executor
# settings file and the optional Langfuse tracing.  The agent only talks to
# them through the factories exported here, which keeps every network-facing
# piece replaceable in tests.

from .credentials import Credentials, resolve_credentials
from .llm import build_llm
from .prompts import HubTemplateSource, TemplateSource
from .web import build_search_tool

__all__ = [
    "Credentials",
    "resolve_credentials",
    "build_llm",
    "HubTemplateSource",
    "TemplateSource",
    "build_search_tool",
]

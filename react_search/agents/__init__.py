"""ReAct agent exposed as a LangChain tool.

Public API:
- ``ReActAgent``: the tool; ``call``/``acall`` run one query
- ``ReActAgentInput`` / ``ReActAgentOutput``: request and response schemas
- ``build_pipeline``: assembles the ReAct agent executor
"""

from .pipeline import build_pipeline
from .react_agent import REACT_AGENT_DESCRIPTION, REACT_AGENT_NAME, ReActAgent
from .types import AgentState, ReActAgentInput, ReActAgentOutput

__all__ = [
    "AgentState",
    "REACT_AGENT_DESCRIPTION",
    "REACT_AGENT_NAME",
    "ReActAgent",
    "ReActAgentInput",
    "ReActAgentOutput",
    "build_pipeline",
]

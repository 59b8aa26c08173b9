from __future__ import annotations

from typing import TypedDict

from pydantic import BaseModel, Field


class AgentState(TypedDict, total=False):
    """Input/output mapping of the agent executor."""

    input: str
    output: str


class ReActAgentInput(BaseModel):
    """Arguments accepted by the ``react_agent`` tool."""

    query: str = Field(..., min_length=1, strict=True, description="The query string.")


class ReActAgentOutput(BaseModel):
    output: str = Field(..., description="Final answer produced by the agent.")

from __future__ import annotations

from typing import Any, Optional, Sequence

from langchain_classic.agents import AgentExecutor, create_react_agent
from langchain_core.prompts import BasePromptTemplate
from langchain_core.tools import BaseTool

from ..tools.agent_config import ExecutorSettings


def build_pipeline(
    llm: Any,
    tools: Sequence[BaseTool],
    prompt: BasePromptTemplate,
    settings: Optional[ExecutorSettings] = None,
) -> AgentExecutor:
    """Assemble a ReAct agent and wrap it in an executor.

    The returned runnable takes ``{"input": str}`` and returns a mapping whose
    ``"output"`` key holds the final answer.  No network calls are made here;
    they happen when the executor is invoked.
    """
    settings = settings or ExecutorSettings()
    tools = list(tools)
    agent = create_react_agent(llm, tools, prompt)
    return AgentExecutor(agent=agent, tools=tools, **settings.as_kwargs())

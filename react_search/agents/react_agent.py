"""
ReAct agent exposed as a LangChain tool.

``ReActAgent`` answers a natural-language query by running a reason-and-act
agent that can search Google and think with an OpenAI chat model.  Each call
pulls the ``hwchase17/react`` prompt from the hub, builds a fresh LLM client,
a fresh search tool and a fresh executor, runs the executor once and returns
its final answer.  Nothing is cached between calls, so one instance can serve
concurrent calls without them seeing each other's state.

Every collaborator (environment lookup, template source, client factories and
pipeline factory) is a field with a real default, so tests and hosts can swap
any of them at construction time.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Callable, List, Optional, Type

from langchain_core.callbacks import AsyncCallbackManagerForToolRun, CallbackManagerForToolRun
from langchain_core.runnables import Runnable
from langchain_core.tools import BaseTool
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, model_validator

from ..errors import ConfigurationError, QueryValidationError
from ..tools.agent_config import ExecutorSettings, get_executor_settings
from ..tools.credentials import (
    ENV_GOOGLE_API_KEY,
    ENV_GOOGLE_CSE_ID,
    ENV_OPENAI_API_KEY,
    resolve_credentials,
)
from ..tools.langfuse_tracing import traced_span
from ..tools.llm import REACT_MODEL_NAME, REACT_TEMPERATURE, build_llm
from ..tools.prompts import REACT_PROMPT_KEY, HubTemplateSource
from ..tools.web import build_search_tool
from .pipeline import build_pipeline
from .types import AgentState, ReActAgentInput

logger = logging.getLogger("react_search.agent")

REACT_AGENT_NAME = "react_agent"
REACT_AGENT_DESCRIPTION = "A langchain based agent that will reason and act to answer the users query"

_CREDENTIAL_FIELDS = (
    ("google_api_key", ENV_GOOGLE_API_KEY),
    ("google_cse_id", ENV_GOOGLE_CSE_ID),
    ("openai_api_key", ENV_OPENAI_API_KEY),
)


def _reveal(value: Optional[SecretStr]) -> Optional[str]:
    return value.get_secret_value() if value is not None else None


class ReActAgent(BaseTool):
    """Tool that answers a query with a Google-search-backed ReAct agent.

    Credentials may be passed by field name (``openai_api_key=...``) or by
    environment variable name (``OPENAI_API_KEY=...``).  Any credential not
    passed is read through ``env``.  Unless ``override`` is set, a missing
    credential fails construction with :class:`ConfigurationError`.  The
    instance is frozen and keeps the keys as ``SecretStr`` out of dumps.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = REACT_AGENT_NAME
    description: str = REACT_AGENT_DESCRIPTION
    args_schema: Type[BaseModel] = ReActAgentInput

    google_api_key: Optional[SecretStr] = Field(default=None, alias=ENV_GOOGLE_API_KEY, exclude=True, repr=False)
    google_cse_id: Optional[SecretStr] = Field(default=None, alias=ENV_GOOGLE_CSE_ID, exclude=True, repr=False)
    openai_api_key: Optional[SecretStr] = Field(default=None, alias=ENV_OPENAI_API_KEY, exclude=True, repr=False)
    override: bool = False

    env: Callable[[str], Optional[str]] = Field(default=os.getenv, exclude=True, repr=False)
    template_source: Any = Field(default_factory=HubTemplateSource, exclude=True, repr=False)
    llm_factory: Callable[..., Any] = Field(default=build_llm, exclude=True, repr=False)
    search_tool_factory: Callable[..., Any] = Field(default=build_search_tool, exclude=True, repr=False)
    pipeline_factory: Callable[..., Any] = Field(default=build_pipeline, exclude=True, repr=False)
    executor_settings: ExecutorSettings = Field(default_factory=get_executor_settings, exclude=True, repr=False)

    @model_validator(mode="before")
    @classmethod
    def check_credentials(cls, data: Any) -> Any:
        """Fill the three credentials before the model is frozen."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        explicit: dict[str, Optional[str]] = {}
        for field_name, env_name in _CREDENTIAL_FIELDS:
            value = data.pop(env_name, None)
            if value is None:
                value = data.get(field_name)
            explicit[env_name] = value.get_secret_value() if isinstance(value, SecretStr) else value

        credentials = resolve_credentials(explicit, env=data.get("env") or os.getenv)
        missing = credentials.missing()
        if missing and not data.get("override", False):
            raise ConfigurationError(missing)
        if missing:
            logger.warning(f"ReAct agent built with override; missing credentials: {', '.join(missing)}")
        data["google_api_key"] = credentials.google_api_key
        data["google_cse_id"] = credentials.google_cse_id
        data["openai_api_key"] = credentials.openai_api_key
        return data

    def call(self, tool_input: Any) -> str:
        """Validate ``tool_input`` (``{"query": str}``) and return the agent's answer."""
        query = self._parse_query(tool_input).query
        return self._answer_query(query)

    async def acall(self, tool_input: Any) -> str:
        """Async variant of :meth:`call`."""
        query = self._parse_query(tool_input).query
        return await self._aanswer_query(query)

    def _run(self, query: str, run_manager: Optional[CallbackManagerForToolRun] = None) -> str:
        callbacks = run_manager.get_child() if run_manager else None
        return self._answer_query(query, callbacks=callbacks)

    async def _arun(self, query: str, run_manager: Optional[AsyncCallbackManagerForToolRun] = None) -> str:
        callbacks = run_manager.get_child() if run_manager else None
        return await self._aanswer_query(query, callbacks=callbacks)

    def _parse_query(self, tool_input: Any) -> ReActAgentInput:
        try:
            return ReActAgentInput.model_validate(tool_input)
        except ValidationError as e:
            issues = e.errors(include_url=False)
            logger.warning(f"Rejected react_agent input: {issues}")
            raise QueryValidationError(issues) from e

    def _assemble_pipeline(self) -> Runnable:
        """Fetch the prompt and assemble a new executor for one call."""
        with traced_span("prompt:pull", input={"key": REACT_PROMPT_KEY}, metadata={"kind": "prompt"}):
            prompt = self.template_source.get(REACT_PROMPT_KEY)
        llm = self.llm_factory(
            _reveal(self.openai_api_key),
            model_name=REACT_MODEL_NAME,
            temperature=REACT_TEMPERATURE,
        )
        tools: List[Any] = [self.search_tool_factory(_reveal(self.google_api_key), _reveal(self.google_cse_id))]
        return self.pipeline_factory(llm, tools, prompt, self.executor_settings)

    def _answer_query(self, query: str, callbacks: Any = None) -> str:
        logger.info(f"ReAct agent query: {query}")
        with traced_span("agent:react_agent", input={"query": query}, metadata={"kind": "agent"}) as span:
            try:
                pipeline = self._assemble_pipeline()
                state: AgentState = {"input": query}
                result = pipeline.invoke(state, config={"callbacks": callbacks})
            except Exception:
                logger.exception("ReAct agent call failed")
                raise
            answer = str(result["output"])
            if span is not None:
                span.update(output=answer)
        logger.info(f"ReAct agent answer_len={len(answer)}")
        return answer

    async def _aanswer_query(self, query: str, callbacks: Any = None) -> str:
        logger.info(f"ReAct agent query: {query}")
        with traced_span("agent:react_agent", input={"query": query}, metadata={"kind": "agent"}) as span:
            try:
                # The hub pull is blocking; keep it off the event loop.
                pipeline = await asyncio.to_thread(self._assemble_pipeline)
                state: AgentState = {"input": query}
                result = await pipeline.ainvoke(state, config={"callbacks": callbacks})
            except Exception:
                logger.exception("ReAct agent call failed")
                raise
            answer = str(result["output"])
            if span is not None:
                span.update(output=answer)
        logger.info(f"ReAct agent answer_len={len(answer)}")
        return answer

"""Shared fixtures: stub collaborators so no test touches the network."""

from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
from langchain_core.runnables import RunnableLambda

from react_search.agents import ReActAgent

CREDENTIALS: Dict[str, str] = {
    "GOOGLE_SEARCH_API_KEY": "google-test-key",
    "GOOGLE_CSE_ID": "cse-test-id",
    "OPENAI_API_KEY": "sk-test",
}

TEMPLATE = "react-template"


class CountingTemplateSource:
    """Template source stub that records every key requested."""

    def __init__(self, template: Any = TEMPLATE, error: Optional[Exception] = None) -> None:
        self.template = template
        self.error = error
        self.calls: List[str] = []

    def get(self, key: str) -> Any:
        self.calls.append(key)
        if self.error is not None:
            raise self.error
        return self.template


class Recorder:
    """Callable stub that records its arguments and returns a fixed value."""

    def __init__(self, result: Any) -> None:
        self.result = result
        self.calls: List[Tuple[tuple, dict]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        return self.result


def fixed_pipeline(answer: str) -> RunnableLambda:
    return RunnableLambda(lambda state: {"input": state["input"], "output": answer})


def echo_pipeline() -> RunnableLambda:
    return RunnableLambda(lambda state: {"input": state["input"], "output": f"answer for {state['input']}"})


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LANGFUSE_PUBLIC_KEY", "LANGFUSE_SECRET_KEY", "LANGFUSE_HOST", *CREDENTIALS):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def template_source() -> CountingTemplateSource:
    return CountingTemplateSource()


@pytest.fixture
def llm_factory() -> Recorder:
    return Recorder("fake-llm")


@pytest.fixture
def search_tool_factory() -> Recorder:
    return Recorder("fake-search-tool")


@pytest.fixture
def pipeline_factory() -> Recorder:
    return Recorder(fixed_pipeline("Paris"))


@pytest.fixture
def make_agent(
    template_source: CountingTemplateSource,
    llm_factory: Recorder,
    search_tool_factory: Recorder,
    pipeline_factory: Recorder,
) -> Callable[..., ReActAgent]:
    """Build a ReActAgent wired to the stub collaborators.

    Credentials come from ``CREDENTIALS`` through the env provider unless the
    caller overrides ``env`` or passes explicit values.
    """

    def _make(**kwargs: Any) -> ReActAgent:
        kwargs.setdefault("env", CREDENTIALS.get)
        kwargs.setdefault("template_source", template_source)
        kwargs.setdefault("llm_factory", llm_factory)
        kwargs.setdefault("search_tool_factory", search_tool_factory)
        kwargs.setdefault("pipeline_factory", pipeline_factory)
        return ReActAgent(**kwargs)

    return _make

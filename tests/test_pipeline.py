"""
Tests for build_pipeline using a scripted LLM and a local tool.

The executor, ReAct output parser and tool dispatch are the real LangChain
implementations; only the model and the search backend are fake.
"""

from langchain_classic.agents import AgentExecutor
from langchain_core.language_models import FakeListLLM
from langchain_core.prompts import PromptTemplate
from langchain_core.tools import Tool

from react_search.agents import build_pipeline
from react_search.tools.agent_config import ExecutorSettings

# Same shape as the hub's hwchase17/react prompt.
REACT_TEMPLATE = """Answer the following questions as best you can. You have access to the following tools:

{tools}

Use the following format:

Question: the input question you must answer
Thought: you should always think about what to do
Action: the action to take, should be one of [{tool_names}]
Action Input: the input to the action
Observation: the result of the action
... (this Thought/Action/Action Input/Observation can repeat N times)
Thought: I now know the final answer
Final Answer: the final answer to the original input question

Begin!

Question: {input}
Thought:{agent_scratchpad}"""


def _search_tool(searches: list) -> Tool:
    def google_search(query: str) -> str:
        searches.append(query)
        return "Paris is the capital and largest city of France."

    return Tool(name="google_search", func=google_search, description="Search Google.")


def test_final_answer_without_tool_use() -> None:
    searches: list = []
    llm = FakeListLLM(responses=["I already know this.\nFinal Answer: Paris"])
    executor = build_pipeline(llm, [_search_tool(searches)], PromptTemplate.from_template(REACT_TEMPLATE))

    result = executor.invoke({"input": "capital of France"})

    assert result["output"] == "Paris"
    assert searches == []


def test_one_search_step_then_answer() -> None:
    searches: list = []
    llm = FakeListLLM(
        responses=[
            "I should look this up.\nAction: google_search\nAction Input: capital of France",
            "I now know the final answer\nFinal Answer: Paris",
        ]
    )
    executor = build_pipeline(llm, [_search_tool(searches)], PromptTemplate.from_template(REACT_TEMPLATE))

    result = executor.invoke({"input": "What is the capital of France?"})

    assert result["output"] == "Paris"
    assert searches == ["capital of France"]


def test_executor_settings_are_applied() -> None:
    llm = FakeListLLM(responses=["Final Answer: ok"])
    settings = ExecutorSettings(max_iterations=4, verbose=False, handle_parsing_errors=True)
    executor = build_pipeline(llm, (_search_tool([]),), PromptTemplate.from_template(REACT_TEMPLATE), settings)

    assert isinstance(executor, AgentExecutor)
    assert executor.max_iterations == 4
    assert executor.handle_parsing_errors is True
    assert [tool.name for tool in executor.tools] == ["google_search"]


def test_default_settings() -> None:
    llm = FakeListLLM(responses=["Final Answer: ok"])
    executor = build_pipeline(llm, [_search_tool([])], PromptTemplate.from_template(REACT_TEMPLATE))

    assert executor.max_iterations == 15
    assert executor.handle_parsing_errors is False

"""
Web search tool.

This module builds the Google Custom Search tool handed to the ReAct agent.
The search itself is done by ``GoogleSearchAPIWrapper``; the wrapper is bound
to the caller's API key and search engine id and exposed as a LangChain
``Tool`` so the agent can pick it by name.  Every search is recorded as a
Langfuse span when tracing is configured.
"""

import logging

from langchain_core.tools import Tool
from langchain_google_community import GoogleSearchAPIWrapper

from .langfuse_tracing import traced_tool

logger = logging.getLogger("react_search.web")

GOOGLE_SEARCH_TOOL_NAME = "google_search"
GOOGLE_SEARCH_DESCRIPTION = (
    "A wrapper around Google Search. Useful for when you need to answer questions "
    "about current events. Input should be a search query."
)


def build_search_tool(api_key: str, cse_id: str) -> Tool:
    """Return a fresh Google search tool.

    Args:
        api_key: Google Custom Search JSON API key.
        cse_id: Programmable Search Engine id.

    Returns:
        A ``Tool`` named ``google_search`` whose input is the search phrase and
        whose output is the concatenated result snippets.
    """
    api_wrapper = GoogleSearchAPIWrapper(google_api_key=api_key, google_cse_id=cse_id)

    @traced_tool(GOOGLE_SEARCH_TOOL_NAME)
    def google_search(query: str) -> str:
        logger.info(f"Google search: {query}")
        return api_wrapper.run(query)

    return Tool(
        name=GOOGLE_SEARCH_TOOL_NAME,
        func=google_search,
        description=GOOGLE_SEARCH_DESCRIPTION,
    )

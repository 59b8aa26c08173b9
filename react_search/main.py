"""
FastAPI server exposing the ReAct search agent over HTTP.

``POST /query`` accepts ``{"query": "..."}`` and returns the agent's final
answer as ``{"output": "..."}``.  The agent is built on the first request so
the server can start (and report the problem) even when credentials are
missing; in that case every query answers 503 with the missing variable
names.  To start the server run ``uvicorn react_search.main:app --reload``
from the project root after installing dependencies.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .agents import REACT_AGENT_DESCRIPTION, REACT_AGENT_NAME, ReActAgent, ReActAgentInput, ReActAgentOutput
from .errors import ConfigurationError
from .tools.langfuse_tracing import end_trace, start_trace

app = FastAPI(title="ReAct Search Agent")

# Configure a simple application-wide logger.  The log level can be set via
# the LOG_LEVEL environment variable (default: INFO).  Logs are emitted to
# standard output, which can be captured by the hosting environment.
_log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=_log_level,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger("react_search.main")


@lru_cache(maxsize=1)
def get_agent() -> ReActAgent:
    """Build the shared agent from the process environment."""
    return ReActAgent()


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error(f"Agent is not configured: {exc.message}")
    return JSONResponse(status_code=503, content={"detail": exc.message, "missing": list(exc.missing)})


@app.post("/query", response_model=ReActAgentOutput)
def query(request: ReActAgentInput, agent: ReActAgent = Depends(get_agent)) -> ReActAgentOutput:
    """Run the agent once for ``request.query`` and return its answer."""
    trace = start_trace(
        name="/query",
        input={"query": request.query},
        metadata={"endpoint": "/query"},
    )
    logger.info(f"Received query request: {request.query}")
    try:
        answer = agent.call(request.model_dump())
    except Exception as e:
        end_trace(trace, error=str(e))
        raise
    end_trace(trace, output={"output": answer})
    return ReActAgentOutput(output=answer)


@app.get("/")
async def root() -> JSONResponse:
    """Return a brief description of the API."""
    return JSONResponse(
        {
            "message": "ReAct search agent is running. POST {\"query\": ...} to /query.",
            "tool": {"name": REACT_AGENT_NAME, "description": REACT_AGENT_DESCRIPTION},
        }
    )

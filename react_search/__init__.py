"""Package exposing the ReAct search agent and its HTTP host."""

from .agents import ReActAgent
from .main import app  # Re-export FastAPI application for uvicorn

__all__ = ["ReActAgent", "app"]

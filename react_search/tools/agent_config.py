"""Agent configuration loader.

Executor options for the ReAct agent live in `react_search/agent_config.yaml`.
The model, temperature and prompt key are fixed in code; only the loop
around them is tunable here.

The loader is intentionally small and tolerant:
- If the YAML file is missing or invalid, it falls back to defaults.
- A value of the wrong type falls back to the default for that key only.

The YAML schema:

- react_agent:
    max_iterations: <int>            (default 15)
    verbose: <bool>                  (default false)
    handle_parsing_errors: <bool>    (default false)
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Any, Optional

import yaml

logger = logging.getLogger("react_search.config")


@dataclass(frozen=True)
class ExecutorSettings:
    max_iterations: int = 15
    verbose: bool = False
    handle_parsing_errors: bool = False

    def as_kwargs(self) -> dict[str, Any]:
        return asdict(self)


def _default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "agent_config.yaml")


@lru_cache(maxsize=8)
def load_agent_config(path: Optional[str] = None) -> dict[str, Any]:
    config_path = path or os.getenv("AGENT_CONFIG_PATH") or _default_config_path()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Agent config not found at {config_path}; using defaults")
        return {}
    except (OSError, yaml.YAMLError) as e:
        # Keep this loader non-fatal; a bad file should not crash the server.
        logger.warning(f"Could not load agent config {config_path}: {e}; using defaults")
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def get_executor_settings(path: Optional[str] = None) -> ExecutorSettings:
    config = load_agent_config(path)
    block = config.get("react_agent", {})
    if not isinstance(block, dict):
        block = {}

    defaults = ExecutorSettings()
    max_iterations = block.get("max_iterations")
    verbose = block.get("verbose")
    handle_parsing_errors = block.get("handle_parsing_errors")

    # bool is an int subclass; `max_iterations: true` is not a count.
    if not isinstance(max_iterations, int) or isinstance(max_iterations, bool) or max_iterations < 1:
        max_iterations = defaults.max_iterations

    return ExecutorSettings(
        max_iterations=max_iterations,
        verbose=verbose if isinstance(verbose, bool) else defaults.verbose,
        handle_parsing_errors=(
            handle_parsing_errors if isinstance(handle_parsing_errors, bool) else defaults.handle_parsing_errors
        ),
    )

"""
Errors raised by the ReAct agent adapter.

Only configuration and input problems are modelled here.  Failures from the
prompt hub, OpenAI, Google search or the agent executor are left untouched and
reach the caller as the libraries raised them.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, List, Tuple


class ConfigurationError(Exception):
    """Raised when the agent is built without the credentials it needs."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing: Tuple[str, ...] = tuple(missing)
        self.message = f"Missing {' or '.join(self.missing)} environment variable."
        super().__init__(self.message)


class QueryValidationError(ValueError):
    """Raised when a call's input does not match the query schema."""

    def __init__(self, issues: List[dict[str, Any]]) -> None:
        self.issues = issues
        self.message = f"Validation failed: {json.dumps(issues, default=str)}"
        super().__init__(self.message)

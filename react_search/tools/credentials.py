"""Credential resolution for the ReAct agent.

Three secrets are needed to run the agent: a Google Custom Search API key, a
Google Custom Search engine id and an OpenAI API key.  Each one may be passed
explicitly by the caller; otherwise it is looked up by a fixed environment
variable name.  The environment lookup is an injected callable so tests can
supply a plain dict's ``get`` instead of touching ``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Tuple

ENV_GOOGLE_API_KEY = "GOOGLE_SEARCH_API_KEY"
ENV_GOOGLE_CSE_ID = "GOOGLE_CSE_ID"
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"

ENV_VARS: Tuple[str, str, str] = (ENV_GOOGLE_API_KEY, ENV_GOOGLE_CSE_ID, ENV_OPENAI_API_KEY)

EnvProvider = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Credentials:
    google_api_key: Optional[str]
    google_cse_id: Optional[str]
    openai_api_key: Optional[str]

    def missing(self) -> Tuple[str, ...]:
        """Return the env var names whose value is absent or empty."""
        values = (self.google_api_key, self.google_cse_id, self.openai_api_key)
        return tuple(name for name, value in zip(ENV_VARS, values) if not value)


def resolve_credentials(
    explicit: Optional[Mapping[str, Optional[str]]] = None,
    env: EnvProvider = os.getenv,
) -> Credentials:
    """Resolve each credential from ``explicit`` first, then from ``env``.

    Args:
        explicit: Values keyed by env var name.  ``None`` means "not given";
            an empty string is kept as-is and later reported as missing.
        env: Environment provider, ``os.getenv`` by default.

    Returns:
        The resolved :class:`Credentials`.
    """
    explicit = explicit or {}

    def _pick(name: str) -> Optional[str]:
        value = explicit.get(name)
        return value if value is not None else env(name)

    return Credentials(
        google_api_key=_pick(ENV_GOOGLE_API_KEY),
        google_cse_id=_pick(ENV_GOOGLE_CSE_ID),
        openai_api_key=_pick(ENV_OPENAI_API_KEY),
    )

"""Runtime settings, read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from graphops.core.models import GraphKind

load_dotenv()


def env_int(name: str, default: int) -> int:
    """Integer setting from the environment; unparsable values give ``default``."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


LOG_LEVEL = os.getenv("GRAPHOPS_LOG_LEVEL", "WARNING")
DEFAULT_KIND = os.getenv("GRAPHOPS_DEFAULT_KIND", "directed")
JSON_INDENT = env_int("GRAPHOPS_JSON_INDENT", 2)


def default_kind() -> GraphKind:
    """Graph kind used when the user does not choose one.

    Unknown values fall back to directed.
    """
    from graphops.core.models import GraphKind

    try:
        return GraphKind(DEFAULT_KIND.strip().lower())
    except ValueError:
        return GraphKind.DIRECTED

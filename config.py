"""
config.py — Engine & Server Settings
=====================================
Every tunable the engine and the Flask adapter read lives here.
Values can be overridden through environment variables; nothing else
in the project touches os.environ.
"""

import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Graph / adjacency
# =============================================================================

# Weight used for edges that declare none.
DEFAULT_EDGE_WEIGHT = 1

# A declared weight of 0 is falsy and gets DEFAULT_EDGE_WEIGHT instead.
# Kept on by default so traces match the editor's existing behaviour.
ZERO_WEIGHT_AS_DEFAULT = _env_flag("GRAPH_ZERO_WEIGHT_AS_DEFAULT", True)

# =============================================================================
# Server
# =============================================================================

SECRET_KEY = os.environ.get("SECRET_KEY", "graph-engine-dev-key-change-in-production")

# Completed runs kept in memory for step navigation (oldest evicted first).
MAX_STORED_RUNS = int(os.environ.get("MAX_STORED_RUNS", "32"))

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))
DEBUG = _env_flag("DEBUG", False)

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

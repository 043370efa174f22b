"""Scaffolder runtime settings: tunable parameters for import and codegen.

All values read from environment variables with sensible defaults.
Import from here instead of hardcoding.

Infrastructure config (API host, CORS, Figma token) stays in
scaffolder/config.py.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _bool(key: str, default: bool) -> bool:
    return os.getenv(key, "true" if default else "false").lower() in ("true", "1", "yes")


# =====================================================================
# Design import
# =====================================================================

# Largest accepted upload (bytes) for POST /api/figma/upload
UPLOAD_MAX_BYTES = _int("UPLOAD_MAX_BYTES", 10 * 1024 * 1024)


# =====================================================================
# HTTP Clients (Figma API)
# =====================================================================

FIGMA_HTTP_TIMEOUT = _float("FIGMA_HTTP_TIMEOUT", 60.0)
FIGMA_HTTP_MAX_CONNECTIONS = _int("FIGMA_HTTP_MAX_CONNECTIONS", 5)
FIGMA_HTTP_MAX_KEEPALIVE = _int("FIGMA_HTTP_MAX_KEEPALIVE", 3)


# =====================================================================
# Code generation
# =====================================================================

# Emit Angular standalone components (false: NgModule-declared components)
CODEGEN_STANDALONE = _bool("CODEGEN_STANDALONE", True)


# =====================================================================
# Logging
# =====================================================================

# Level for the scaffolder and api log roots (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

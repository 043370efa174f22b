"""Scaffolder configuration constants: infrastructure env vars in one place."""

import os

# Server binding for uvicorn
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Comma-separated list of origins allowed by CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:4200,http://localhost:5173")

# Figma REST API Personal Access Token for design file access.
# Empty means imports fall back to the built-in sample design.
FIGMA_TOKEN = os.getenv("FIGMA_TOKEN", "")
FIGMA_API_BASE = os.getenv("FIGMA_API_BASE", "https://api.figma.com")

"""Figma REST API client, the design-tree source for imports.

Fetches whole file documents using Personal Access Token (PAT)
authentication and validates them into DesignFile trees. Failures are
raised as FigmaClientError subclasses and never retried here.

Environment:
    FIGMA_TOKEN: Figma Personal Access Token (required)
    FIGMA_API_BASE: API origin (default https://api.figma.com)

Usage:
    file_key = parse_figma_url("https://www.figma.com/design/6kGd851qaAX4TiL44vpIrO/App")
    async with FigmaClient() as client:
        design = await client.fetch_design_tree(file_key)
"""

import logging
import re
from typing import Any, Dict, Optional

import httpx

from scaffolder import config, settings
from scaffolder.analysis.models import DesignFile, DesignValidationError, parse_design_file

logger = logging.getLogger("scaffolder.integrations.figma")

_FILE_KEY_RE = re.compile(r"figma\.com/(?:file|design|proto)/([a-zA-Z0-9]+)")


class FigmaClientError(Exception):
    """Raised when a Figma API call fails."""


class InvalidFigmaUrlError(FigmaClientError):
    """The URL does not point at a Figma file, design or prototype."""


class FigmaUnauthorizedError(FigmaClientError):
    """Token missing, invalid, or lacking access to the file."""


class FigmaNotFoundError(FigmaClientError):
    """The requested file does not exist."""


class MalformedDesignError(FigmaClientError):
    """Response body is not a usable Figma document."""


def parse_figma_url(url: str) -> str:
    """Extract the file key from a Figma URL.

    Supports:
        https://www.figma.com/file/{fileKey}/{name}
        https://www.figma.com/design/{fileKey}/{name}?node-id={nodeId}
        https://www.figma.com/proto/{fileKey}/{name}

    Raises:
        InvalidFigmaUrlError if no file key can be found
    """
    match = _FILE_KEY_RE.search(url or "")
    if not match:
        raise InvalidFigmaUrlError(
            "Invalid Figma URL. Expected format: "
            "https://www.figma.com/design/{fileKey}/..."
        )
    return match.group(1)


class FigmaClient:
    """Async Figma REST API client.

    Args:
        token: Figma PAT. Falls back to FIGMA_TOKEN.
        timeout: HTTP request timeout in seconds.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._token = token or config.FIGMA_TOKEN
        if not self._token:
            raise FigmaUnauthorizedError(
                "Figma token not configured. Set FIGMA_TOKEN environment variable "
                "or pass token= to FigmaClient()."
            )
        self._client: Optional[httpx.AsyncClient] = None
        self._timeout = timeout if timeout is not None else settings.FIGMA_HTTP_TIMEOUT
        self._base_url = base_url or config.FIGMA_API_BASE
        self._transport = transport

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"X-FIGMA-TOKEN": self._token},
                timeout=self._timeout,
                limits=httpx.Limits(
                    max_connections=settings.FIGMA_HTTP_MAX_CONNECTIONS,
                    max_keepalive_connections=settings.FIGMA_HTTP_MAX_KEEPALIVE,
                ),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        """Make a GET request to the Figma API."""
        client = await self._get_client()
        try:
            resp = await client.get(path, params=params)
        except httpx.TimeoutException as e:
            raise FigmaClientError(f"Figma API timeout: {path}") from e
        except httpx.ConnectError as e:
            raise FigmaClientError(f"Figma API connection error: {path}") from e
        except httpx.TransportError as e:
            raise FigmaClientError(f"Figma API transport error: {path}") from e

        if resp.status_code in (401, 403):
            raise FigmaUnauthorizedError(
                f"Figma API returned {resp.status_code}. Check that FIGMA_TOKEN is valid "
                "and has file_content:read scope."
            )
        if resp.status_code == 404:
            raise FigmaNotFoundError(f"Figma resource not found: {path}")
        if resp.status_code == 429:
            raise FigmaClientError("Figma API rate limit exceeded. Retry later.")
        if resp.status_code != 200:
            raise FigmaClientError(
                f"Figma API error {resp.status_code}: {resp.text[:200]}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedDesignError(f"Figma API returned non-JSON body for {path}") from e
        if not isinstance(data, dict):
            raise MalformedDesignError(f"Figma API returned unexpected body for {path}")
        return data

    # ------------------------------------------------------------------
    # Core API methods
    # ------------------------------------------------------------------

    async def get_file(self, file_key: str) -> Dict[str, Any]:
        """Fetch a whole Figma file.

        GET /v1/files/:key
        """
        data = await self._get(f"/v1/files/{file_key}")
        if not isinstance(data.get("document"), dict):
            raise MalformedDesignError(f"Figma file {file_key} has no document")
        data.setdefault("key", file_key)
        logger.info(f"get_file: file={file_key}, name={data.get('name', '')!r}")
        return data

    async def fetch_design_tree(self, file_key: str) -> DesignFile:
        """Fetch a file and validate it into a DesignFile tree."""
        data = await self.get_file(file_key)
        try:
            return parse_design_file(data)
        except DesignValidationError as e:
            raise MalformedDesignError(str(e)) from e

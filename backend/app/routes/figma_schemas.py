"""Pydantic schemas for the Figma import / convert API endpoints.

Field names are camelCase on the wire to match the analysis result JSON.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImportRequest(_CamelModel):
    """Request for POST /api/figma/import."""
    url: str = Field(..., min_length=1, description="Figma file/design/proto URL")


class ConvertRequest(_CamelModel):
    """Request for POST /api/figma/convert."""
    file_key: str = Field(..., min_length=1)
    standalone: Optional[bool] = Field(
        None, description="Emit standalone components (defaults to CODEGEN_STANDALONE)",
    )
    theme: Literal["light", "dark", "custom"] = "light"


class ConvertResponse(_CamelModel):
    """Response for POST /api/figma/convert."""
    message: str
    converted: int


class ComponentCode(BaseModel):
    """Response for GET /api/figma/component/{fileKey}/{componentId}."""
    html: str
    ts: str
    scss: str


class ImportSummary(_CamelModel):
    """One row of GET /api/figma/imports."""
    id: str
    file_key: str
    file_name: str
    source: str
    stats: Dict[str, Any]
    imported_at: datetime


class ImportListResponse(_CamelModel):
    """Response for GET /api/figma/imports."""
    imports: List[ImportSummary]
    total: int
    page: int
    page_size: int

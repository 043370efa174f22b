"""Figma design import and Angular Material conversion endpoints.

Flow: import (URL), upload (JSON export) or demo → analysis result is
persisted → convert emits code for the latest import of a file key →
component / download endpoints serve that code.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.models.db import DesignComponentModel, DesignImportModel
from app.repositories.design_import import DesignImportRepository
from scaffolder import config, settings
from scaffolder.analysis import (
    AnalysisResult,
    ClassifiedComponent,
    DesignFile,
    DesignValidationError,
    analyze_file,
    analyze_payload,
    parse_design_file,
)
from scaffolder.codegen import (
    EmitOptions,
    GeneratedCode,
    build_component_archive,
    build_project_archive,
    emit,
)
from scaffolder.codegen.angular_material import kebab_name
from scaffolder.integrations.figma_client import (
    FigmaClient,
    FigmaClientError,
    FigmaNotFoundError,
    FigmaUnauthorizedError,
    InvalidFigmaUrlError,
    MalformedDesignError,
    parse_figma_url,
)
from scaffolder.integrations.sample_design import demo_design, sample_design

from .figma_schemas import (
    ComponentCode,
    ConvertRequest,
    ConvertResponse,
    ImportListResponse,
    ImportRequest,
    ImportSummary,
)

logger = logging.getLogger("api.figma")

router = APIRouter(prefix="/api/figma", tags=["figma"])


# --- Helpers ---


def _figma_error_status(exc: FigmaClientError) -> int:
    if isinstance(exc, FigmaUnauthorizedError):
        return 401
    if isinstance(exc, FigmaNotFoundError):
        return 404
    return 502


async def _fetch_design(file_key: str) -> Tuple[DesignFile, str]:
    """Design tree for `file_key` and its source label.

    Without a Figma token the built-in sample design stands in for the file.
    """
    if not config.FIGMA_TOKEN:
        logger.warning(
            f"import: FIGMA_TOKEN not set, using sample design for file={file_key}"
        )
        return parse_design_file(sample_design(file_key)), "sample"

    async with FigmaClient() as client:
        return await client.fetch_design_tree(file_key), "figma"


async def _persist(
    session: AsyncSession,
    result: AnalysisResult,
    source: str,
) -> Dict[str, Any]:
    repo = DesignImportRepository(session)
    design_import = await repo.create(result, source=source)
    logger.info(
        f"{source}: stored import={design_import.id} file={result.file_key} "
        f"components={result.stats.total_components}"
    )
    return result.to_wire()


async def _latest_or_404(repo: DesignImportRepository, file_key: str) -> DesignImportModel:
    design_import = await repo.get_latest(file_key)
    if not design_import:
        raise HTTPException(status_code=404, detail=f"No import found for file {file_key}")
    return design_import


def _stored_code(row: DesignComponentModel) -> Optional[GeneratedCode]:
    if not row.has_code:
        return None
    return GeneratedCode(
        markup=row.generated_html or "",
        logic=row.generated_ts or "",
        style=row.generated_scss or "",
    )


async def _code_for(
    repo: DesignImportRepository,
    row: DesignComponentModel,
    options: Optional[EmitOptions] = None,
) -> Tuple[ClassifiedComponent, GeneratedCode]:
    """Stored code for a component row, emitting and storing it on first use."""
    component = row.to_component()
    code = _stored_code(row)
    if code is None:
        code = emit(component, options or EmitOptions(standalone=settings.CODEGEN_STANDALONE))
        await repo.save_generated_code(row, code)
    return component, code


def _zip_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# --- Import ---


@router.post("/import")
async def import_design(
    payload: ImportRequest,
    session: AsyncSession = Depends(get_session),
):
    """Import a design from a Figma URL, analyze it and store the result."""
    try:
        file_key = parse_figma_url(payload.url)
    except InvalidFigmaUrlError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        design, source = await _fetch_design(file_key)
    except MalformedDesignError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FigmaClientError as e:
        logger.warning(f"import: Figma fetch failed for file={file_key}: {e}")
        raise HTTPException(status_code=_figma_error_status(e), detail=str(e))

    return await _persist(session, analyze_file(design), source)


@router.post("/upload")
async def upload_design(
    figma_file: UploadFile = File(..., alias="figmaFile"),
    session: AsyncSession = Depends(get_session),
):
    """Analyze an uploaded Figma JSON export and store the result."""
    data = await figma_file.read(settings.UPLOAD_MAX_BYTES + 1)
    if len(data) > settings.UPLOAD_MAX_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.UPLOAD_MAX_BYTES} bytes",
        )

    try:
        payload = json.loads(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid JSON: {e}")

    try:
        result = analyze_payload(payload)
    except DesignValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return await _persist(session, result, "upload")


@router.get("/demo")
async def demo(session: AsyncSession = Depends(get_session)):
    """Analyze and store the built-in demo design."""
    result = analyze_file(parse_design_file(demo_design()))
    return await _persist(session, result, "demo")


@router.get("/imports", response_model=ImportListResponse)
async def list_imports(
    file_key: Optional[str] = Query(None, alias="fileKey"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    session: AsyncSession = Depends(get_session),
):
    """List stored imports, newest first."""
    repo = DesignImportRepository(session)
    imports, total = await repo.list(file_key=file_key, page=page, page_size=page_size)
    return ImportListResponse(
        imports=[
            ImportSummary(
                id=i.id,
                file_key=i.file_key,
                file_name=i.file_name,
                source=i.source,
                stats=i.stats,
                imported_at=i.imported_at,
            )
            for i in imports
        ],
        total=total,
        page=page,
        page_size=page_size,
    )


# --- Convert ---


@router.post("/convert", response_model=ConvertResponse)
async def convert(
    payload: ConvertRequest,
    session: AsyncSession = Depends(get_session),
):
    """Emit Angular Material code for every component of the latest import."""
    repo = DesignImportRepository(session)
    design_import = await _latest_or_404(repo, payload.file_key)

    standalone = settings.CODEGEN_STANDALONE if payload.standalone is None else payload.standalone
    options = EmitOptions(standalone=standalone, theme=payload.theme)
    for row in design_import.components:
        await repo.save_generated_code(row, emit(row.to_component(), options))

    converted = len(design_import.components)
    logger.info(f"convert: file={payload.file_key} import={design_import.id} converted={converted}")
    return ConvertResponse(message="Components converted successfully", converted=converted)


@router.get("/component/{file_key}/{component_id}", response_model=ComponentCode)
async def get_component_code(
    file_key: str,
    component_id: str,
    session: AsyncSession = Depends(get_session),
):
    """Generated html/ts/scss for one component of the latest import."""
    repo = DesignImportRepository(session)
    row = await repo.get_component(file_key, component_id)
    if not row:
        raise HTTPException(status_code=404, detail=f"Component {component_id} not found")

    _, code = await _code_for(repo, row)
    return ComponentCode(html=code.markup, ts=code.logic, scss=code.style)


# --- Download ---


@router.get("/download/{file_key}/{component_id}")
async def download_component(
    file_key: str,
    component_id: str,
    session: AsyncSession = Depends(get_session),
):
    """Zip of one component's html/ts/scss files."""
    repo = DesignImportRepository(session)
    row = await repo.get_component(file_key, component_id)
    if not row:
        raise HTTPException(status_code=404, detail=f"Component {component_id} not found")

    component, code = await _code_for(repo, row)
    return _zip_response(
        build_component_archive(component, code),
        f"{kebab_name(component.name)}.zip",
    )


@router.get("/download-all/{file_key}")
async def download_all(
    file_key: str,
    session: AsyncSession = Depends(get_session),
):
    """Zip of every component of the latest import plus shared Material files."""
    repo = DesignImportRepository(session)
    design_import = await _latest_or_404(repo, file_key)

    entries: List[Tuple[ClassifiedComponent, GeneratedCode]] = []
    for row in design_import.components:
        entries.append(await _code_for(repo, row))

    logger.info(f"download-all: file={file_key} components={len(entries)}")
    return _zip_response(build_project_archive(entries), "angular-material-components.zip")

"""Repository layer for design import persistence.

Provides async CRUD operations for DesignImportModel and its components.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.db import DesignComponentModel, DesignImportModel
from scaffolder.analysis.models import AnalysisResult
from scaffolder.codegen import GeneratedCode


class DesignImportRepository:
    """Data access layer for analyzed design imports."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, result: AnalysisResult, source: str = "upload") -> DesignImportModel:
        """Persist an analysis result as a new import with its components.

        Args:
            result: AnalysisResult from the analysis engine
            source: Where the design came from (figma | sample | upload | demo)

        Returns:
            Created DesignImportModel with components loaded
        """
        design_import = DesignImportModel(
            file_key=result.file_key,
            file_name=result.file_name,
            source=source,
            stats=result.stats.model_dump(mode="json", by_alias=True),
        )
        self.session.add(design_import)
        await self.session.flush()

        for idx, component in enumerate(result.components):
            wire = component.to_wire()
            self.session.add(DesignComponentModel(
                import_id=design_import.id,
                position=idx,
                source_id=component.source_id,
                name=component.name,
                widget_type=component.widget_type.value,
                mapped_target=component.mapped_target,
                support_status=component.support_status.value,
                properties=wire.get("properties", {}),
                styles=wire.get("styles", {}),
            ))

        await self.session.flush()

        # Reload with components relationship
        return await self.get(design_import.id)

    async def get(self, import_id: str) -> Optional[DesignImportModel]:
        """Get an import by ID with components loaded."""
        result = await self.session.execute(
            select(DesignImportModel)
            .options(selectinload(DesignImportModel.components))
            .where(DesignImportModel.id == import_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_latest(self, file_key: str) -> Optional[DesignImportModel]:
        """Most recent import of a file key, with components loaded."""
        result = await self.session.execute(
            select(DesignImportModel)
            .options(selectinload(DesignImportModel.components))
            .where(DesignImportModel.file_key == file_key)
            .order_by(DesignImportModel.imported_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list(
        self,
        file_key: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Tuple[List[DesignImportModel], int]:
        """List imports, newest first, with optional file key filter.

        Args:
            file_key: Only imports of this file
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            Tuple of (imports, total_count)
        """
        query = select(DesignImportModel)
        count_query = select(func.count()).select_from(DesignImportModel)

        if file_key:
            query = query.where(DesignImportModel.file_key == file_key)
            count_query = count_query.where(DesignImportModel.file_key == file_key)

        query = query.order_by(DesignImportModel.imported_at.desc())
        query = query.offset((page - 1) * page_size).limit(page_size)

        result = await self.session.execute(query)
        imports = list(result.scalars().all())

        count_result = await self.session.execute(count_query)
        total = count_result.scalar() or 0

        return imports, total

    async def get_component(
        self,
        file_key: str,
        source_id: str,
    ) -> Optional[DesignComponentModel]:
        """Component of the latest import of `file_key` with the given Figma node id.

        Source ids are not unique within a tree; the first one in pre-order wins.
        """
        latest = (
            select(DesignImportModel.id)
            .where(DesignImportModel.file_key == file_key)
            .order_by(DesignImportModel.imported_at.desc())
            .limit(1)
            .scalar_subquery()
        )
        result = await self.session.execute(
            select(DesignComponentModel)
            .where(
                DesignComponentModel.import_id == latest,
                DesignComponentModel.source_id == source_id,
            )
            .order_by(DesignComponentModel.position)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def save_generated_code(
        self,
        component: DesignComponentModel,
        code: GeneratedCode,
    ) -> DesignComponentModel:
        """Store emitted markup/logic/style on a component row."""
        component.generated_html = code.markup
        component.generated_ts = code.logic
        component.generated_scss = code.style
        await self.session.flush()
        return component

    async def delete(self, import_id: str) -> bool:
        """Delete an import and its components.

        Returns:
            True if deleted, False if not found
        """
        design_import = await self.get(import_id)
        if not design_import:
            return False
        await self.session.delete(design_import)
        await self.session.flush()
        return True

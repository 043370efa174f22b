"""SQLAlchemy ORM models for the scaffolder API.

Tables:
- design_imports: One row per analyzed design (import, upload or demo)
- design_components: Classified components of an import, in tree pre-order,
  with their generated Angular code once converted
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from scaffolder.analysis.models import AnalysisStats, ClassifiedComponent


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _gen_uuid() -> str:
    return str(uuid.uuid4())


# ─── Design Import ───────────────────────────────────────────────────


class DesignImportModel(Base):
    """One analysis of a design file.

    Each import owns a fresh set of component rows; the same file key may
    be imported many times, and lookups by file key use the newest row.
    """

    __tablename__ = "design_imports"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_gen_uuid)
    file_key: Mapped[str] = mapped_column(String(255), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    source: Mapped[str] = mapped_column(
        String(32), nullable=False, default="upload",
        comment="figma | sample | upload | demo",
    )

    # AnalysisStats wire JSON
    stats: Mapped[Dict[str, Any]] = mapped_column(
        JSON, nullable=False, comment="{totalComponents, frames, supported, partial, unsupported}",
    )

    imported_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )

    # Relationships
    components: Mapped[List["DesignComponentModel"]] = relationship(
        back_populates="design_import",
        cascade="all, delete-orphan",
        order_by="DesignComponentModel.position",
    )

    __table_args__ = (
        Index("ix_design_imports_file_key", "file_key"),
        Index("ix_design_imports_imported_at", "imported_at"),
    )

    def analysis_stats(self) -> AnalysisStats:
        return AnalysisStats.model_validate(self.stats)


# ─── Design Component ────────────────────────────────────────────────


class DesignComponentModel(Base):
    """A classified component within an import, plus its generated code."""

    __tablename__ = "design_components"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_gen_uuid)
    import_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("design_imports.id", ondelete="CASCADE"), nullable=False,
    )
    # Index in the pre-order component list
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    source_id: Mapped[str] = mapped_column(String(255), nullable=False, comment="Figma node id")
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    widget_type: Mapped[str] = mapped_column(String(32), nullable=False)
    mapped_target: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    support_status: Mapped[str] = mapped_column(
        String(32), nullable=False, comment="supported | partial | unsupported",
    )
    properties: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    styles: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    # Filled by /convert or on first code request
    generated_html: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    generated_ts: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    generated_scss: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationship
    design_import: Mapped["DesignImportModel"] = relationship(back_populates="components")

    __table_args__ = (
        Index("ix_design_components_import_id", "import_id"),
        Index("ix_design_components_source_id", "source_id"),
    )

    @property
    def has_code(self) -> bool:
        return self.generated_html is not None

    def to_component(self) -> ClassifiedComponent:
        """Rebuild the analysis record from the stored wire JSON."""
        payload: Dict[str, Any] = {
            "sourceId": self.source_id,
            "name": self.name,
            "widgetType": self.widget_type,
            "supportStatus": self.support_status,
            "properties": self.properties or {},
            "styles": self.styles or {},
        }
        if self.mapped_target is not None:
            payload["mappedTarget"] = self.mapped_target
        return ClassifiedComponent.model_validate(payload)

"""Tree walker and aggregator.

Visits every node of a design tree once, in pre-order, and turns each
classifier candidate into a ClassifiedComponent. Frames and groups are
counted on every visited node whether or not they are candidates.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from .classifier import classify, mapped_target, support_status
from .models import (
    DEFAULT_FILE_KEY,
    DEFAULT_FILE_NAME,
    FRAME_KINDS,
    AnalysisResult,
    AnalysisStats,
    ClassifiedComponent,
    DesignFile,
    DesignNode,
    SupportStatus,
    WidgetType,
    parse_design_file,
    parse_design_node,
)
from .properties import extract_properties
from .styles import extract_styles

logger = logging.getLogger("scaffolder.analysis")


def build_component(node: DesignNode, widget_type: WidgetType) -> ClassifiedComponent:
    """Assemble the output record for a node already resolved to `widget_type`."""
    emitted = widget_type.emitted
    return ClassifiedComponent(
        source_id=node.id,
        name=node.name,
        widget_type=emitted,
        mapped_target=mapped_target(emitted),
        support_status=support_status(emitted),
        properties=extract_properties(node, widget_type),
        styles=extract_styles(node),
    )


def walk(root: DesignNode) -> Tuple[List[ClassifiedComponent], int]:
    """Pre-order traversal returning (components, frame count).

    A candidate is appended before its children are visited, so nested
    candidates follow their ancestor in the flat list.
    """
    components: List[ClassifiedComponent] = []
    frames = 0
    stack: List[DesignNode] = [root]

    while stack:
        node = stack.pop()
        if node.type in FRAME_KINDS:
            frames += 1

        verdict = classify(node)
        if verdict.is_candidate and verdict.widget_type is not None:
            component = build_component(node, verdict.widget_type)
            logger.debug(
                f"walk: {node.id or '<no id>'} '{node.name}' -> "
                f"{verdict.widget_type.value} ({component.support_status.value})"
            )
            components.append(component)

        stack.extend(reversed(node.children))

    return components, frames


def _stats(components: List[ClassifiedComponent], frames: int) -> AnalysisStats:
    counts: Dict[SupportStatus, int] = {status: 0 for status in SupportStatus}
    for component in components:
        counts[component.support_status] += 1
    return AnalysisStats(
        total_components=len(components),
        frames=frames,
        supported=counts[SupportStatus.SUPPORTED],
        partial=counts[SupportStatus.PARTIAL],
        unsupported=counts[SupportStatus.UNSUPPORTED],
    )


def analyze(
    root: DesignNode,
    file_key: str = DEFAULT_FILE_KEY,
    file_name: str = DEFAULT_FILE_NAME,
) -> AnalysisResult:
    """Classify every candidate under `root` and summarize the result."""
    components, frames = walk(root)
    stats = _stats(components, frames)
    logger.info(
        f"analyze: file={file_key}, components={stats.total_components}, "
        f"frames={stats.frames}, supported={stats.supported}, "
        f"partial={stats.partial}, unsupported={stats.unsupported}"
    )
    return AnalysisResult(
        file_key=file_key,
        file_name=file_name,
        components=components,
        stats=stats,
    )


def analyze_file(design: DesignFile) -> AnalysisResult:
    return analyze(design.document, file_key=design.file_key, file_name=design.file_name)


def analyze_payload(payload: Dict[str, Any]) -> AnalysisResult:
    """Analyze raw JSON: either a file response ({document, ...}) or a bare node.

    Raises:
        DesignValidationError: when the payload is not a well-formed node tree
    """
    if isinstance(payload, dict) and "document" in payload:
        return analyze_file(parse_design_file(payload))
    return analyze(parse_design_node(payload))

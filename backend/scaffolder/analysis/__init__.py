"""Design-tree analysis engine.

Walks a validated Figma node tree, classifies candidate nodes into widget
types, and extracts normalized properties and styles for code generation.

Public entry points:
- analyze / analyze_file / analyze_payload (walker.py)
- classify (classifier.py)
- extract_properties (properties.py)
- extract_styles (styles.py)
"""

from .classifier import Classification, classify, mapped_target, support_status
from .models import (
    AnalysisResult,
    AnalysisStats,
    ClassifiedComponent,
    DesignFile,
    DesignNode,
    DesignValidationError,
    StyleBag,
    SupportStatus,
    WidgetType,
    parse_design_file,
    parse_design_node,
)
from .properties import extract_properties, extract_text_content
from .styles import extract_styles
from .walker import analyze, analyze_file, analyze_payload, walk

__all__ = [
    "AnalysisResult",
    "AnalysisStats",
    "Classification",
    "ClassifiedComponent",
    "DesignFile",
    "DesignNode",
    "DesignValidationError",
    "StyleBag",
    "SupportStatus",
    "WidgetType",
    "analyze",
    "analyze_file",
    "analyze_payload",
    "classify",
    "extract_properties",
    "extract_styles",
    "extract_text_content",
    "mapped_target",
    "parse_design_file",
    "parse_design_node",
    "support_status",
    "walk",
]

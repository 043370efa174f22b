"""Typed views over Figma design JSON and the analysis result schema.

Input side: DesignNode / DesignFile validate the raw Figma REST shape
(camelCase keys) into frozen models. Unknown keys are ignored; a node
without a name or type is rejected with a DesignValidationError that
names the offending JSON path.

Output side: ClassifiedComponent / AnalysisResult serialize back to
camelCase JSON via to_wire().
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

Number = Union[int, float]
PropertyValue = Union[bool, str, List[str]]

DEFAULT_FILE_KEY = "figma-file-1"
DEFAULT_FILE_NAME = "Design System"

# Figma node kinds the engine distinguishes
FRAME_KINDS = frozenset({"FRAME", "GROUP"})
COMPONENT_KINDS = frozenset({"COMPONENT", "INSTANCE"})
TEXT_KIND = "TEXT"
RECTANGLE_KIND = "RECTANGLE"
VECTOR_KIND = "VECTOR"
INSTANCE_KIND = "INSTANCE"
FRAME_KIND = "FRAME"
DROP_SHADOW = "DROP_SHADOW"


class DesignValidationError(ValueError):
    """Raised when raw design JSON does not have the shape of a Figma node tree."""


class _FigmaModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =====================================================================
# Input: raw Figma nodes
# =====================================================================


class Color(_FigmaModel):
    """Figma RGBA color, channels in the unit interval."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


class Vector(_FigmaModel):
    x: Number = 0
    y: Number = 0


class BoundingBox(_FigmaModel):
    x: Optional[Number] = None
    y: Optional[Number] = None
    width: Optional[Number] = None
    height: Optional[Number] = None


class Paint(_FigmaModel):
    """One entry of a node's fills[] or strokes[]."""

    type: str = "SOLID"
    visible: bool = True
    opacity: Optional[float] = None
    color: Optional[Color] = None


class Effect(_FigmaModel):
    """One entry of a node's effects[] (shadows, blurs)."""

    type: str = ""
    visible: bool = True
    offset: Optional[Vector] = None
    radius: Optional[Number] = None
    color: Optional[Color] = None


class TypeStyle(_FigmaModel):
    font_size: Optional[Number] = None
    font_weight: Optional[Number] = None
    line_height_px: Optional[Number] = None
    line_height: Optional[Number] = None
    letter_spacing: Optional[Number] = None
    text_align_horizontal: Optional[str] = None


class DesignNode(_FigmaModel):
    """A single node of a Figma document tree.

    The tree is immutable for the duration of an analysis pass; children
    are owned by their parent and visited in document order.
    """

    id: str = ""
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    children: List["DesignNode"] = Field(default_factory=list)
    absolute_bounding_box: Optional[BoundingBox] = None
    fills: List[Paint] = Field(default_factory=list)
    strokes: List[Paint] = Field(default_factory=list)
    effects: List[Effect] = Field(default_factory=list)
    style: Optional[TypeStyle] = None
    characters: Optional[str] = None
    component_id: Optional[str] = None
    corner_radius: Optional[Number] = None
    padding_left: Optional[Number] = None
    padding_right: Optional[Number] = None
    padding_top: Optional[Number] = None
    padding_bottom: Optional[Number] = None
    opacity: Optional[float] = None

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    @property
    def bbox(self) -> Optional[BoundingBox]:
        return self.absolute_bounding_box

    def name_contains(self, *keywords: str) -> bool:
        lower = self.lower_name
        return any(k in lower for k in keywords)


DesignNode.model_rebuild()


class DesignFile(_FigmaModel):
    """Figma file response: GET /v1/files/:key (or an uploaded export)."""

    key: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    document: DesignNode

    @property
    def file_key(self) -> str:
        return self.key or self.id or DEFAULT_FILE_KEY

    @property
    def file_name(self) -> str:
        return self.name or DEFAULT_FILE_NAME


def _format_validation_error(exc: ValidationError, prefix: Tuple[Any, ...] = ()) -> str:
    """Render pydantic errors as 'json.path: field: message' lines."""
    lines = []
    for err in exc.errors():
        loc = [str(p) for p in (*prefix, *err.get("loc", ()))]
        if len(loc) > 1:
            lines.append(f"{'.'.join(loc[:-1])}: {loc[-1]}: {err['msg']}")
        elif loc:
            lines.append(f"{loc[0]}: {err['msg']}")
        else:
            lines.append(err["msg"])
    return "; ".join(lines)


def _malformed(kind: str, path: Tuple[Any, ...], message: str) -> DesignValidationError:
    where = ".".join(str(p) for p in path)
    return DesignValidationError(
        f"Malformed design {kind}: {where}: {message}" if where else f"Malformed design {kind}: {message}"
    )


def _parse_shallow(raw: Any, path: Tuple[Any, ...], kind: str) -> DesignNode:
    """Validate one node dict with its children left out."""
    if not isinstance(raw, dict):
        raise _malformed(kind, path, "Input should be a valid dictionary")
    if not isinstance(raw.get("children", []), list):
        raise _malformed(kind, (*path, "children"), "Input should be a valid list")
    try:
        return DesignNode.model_validate({**raw, "children": []})
    except ValidationError as e:
        raise DesignValidationError(
            f"Malformed design {kind}: {_format_validation_error(e, path)}"
        ) from e


def _parse_tree(payload: Any, root_path: Tuple[Any, ...], kind: str) -> DesignNode:
    """Validate a node tree with an explicit stack.

    Nodes are validated one at a time in pre-order, then validated children
    are attached to their parents bottom-up, so nesting depth is not bounded
    by the validator's recursion limit.
    """
    nodes: List[DesignNode] = []
    parents: List[int] = []
    stack: List[Tuple[Any, Tuple[Any, ...], int]] = [(payload, root_path, -1)]

    while stack:
        raw, path, parent = stack.pop()
        index = len(nodes)
        nodes.append(_parse_shallow(raw, path, kind))
        parents.append(parent)
        children = raw.get("children", [])
        for pos in range(len(children) - 1, -1, -1):
            stack.append((children[pos], (*path, "children", pos), index))

    # Children always follow their parent in pre-order; index 0 is the root
    kids: List[List[DesignNode]] = [[] for _ in nodes]
    for index in range(len(nodes) - 1, -1, -1):
        node = nodes[index]
        if kids[index]:
            node = node.model_copy(update={"children": kids[index][::-1]})
        if index == 0:
            return node
        kids[parents[index]].append(node)
    return nodes[0]


def parse_design_node(payload: Any) -> DesignNode:
    """Validate a raw node dict (and its subtree) into a DesignNode."""
    return _parse_tree(payload, (), "node")


def parse_design_file(payload: Any) -> DesignFile:
    """Validate a raw Figma file payload ({key|id, name, document})."""
    if isinstance(payload, dict) and "document" in payload:
        document = _parse_tree(payload["document"], ("document",), "file")
        payload = {**payload, "document": document}
    try:
        return DesignFile.model_validate(payload)
    except ValidationError as e:
        raise DesignValidationError(
            f"Malformed design file: {_format_validation_error(e)}"
        ) from e


# =====================================================================
# Output: classified components
# =====================================================================


class WidgetType(str, Enum):
    BUTTON = "Button"
    INPUT = "Input"
    CARD = "Card"
    CHECKBOX = "Checkbox"
    RADIO = "Radio"
    SELECT = "Select"
    DATE_PICKER = "DatePicker"
    TABS = "Tabs"
    TABLE = "Table"
    # Detected by name but has no target widget; recorded as CUSTOM.
    CAROUSEL = "Carousel"
    CUSTOM = "Custom"

    @property
    def emitted(self) -> "WidgetType":
        """Type recorded on the output component."""
        if self is WidgetType.CAROUSEL:
            return WidgetType.CUSTOM
        return self


class SupportStatus(str, Enum):
    SUPPORTED = "supported"
    PARTIAL = "partial"
    UNSUPPORTED = "unsupported"


class RGB(_WireModel):
    r: int
    g: int
    b: int


class RGBA(_WireModel):
    r: int
    g: int
    b: int
    a: float


class Padding(_WireModel):
    top: Number = 0
    right: Number = 0
    bottom: Number = 0
    left: Number = 0


class Typography(_WireModel):
    font_size: Optional[Number] = None
    font_weight: Optional[Number] = None
    line_height: Optional[Number] = None
    letter_spacing: Optional[Number] = None
    text_align: Optional[str] = None


class BoxShadow(_WireModel):
    offset_x: Number = 0
    offset_y: Number = 0
    radius: Number = 0
    color: RGBA


class StyleBag(_WireModel):
    """Normalized styles; every field is omitted when the source lacks it."""

    width: Optional[Number] = None
    height: Optional[Number] = None
    border_radius: Optional[Number] = None
    padding: Optional[Padding] = None
    typography: Optional[Typography] = None
    background_color: Optional[RGB] = None
    border_color: Optional[RGB] = None
    box_shadow: Optional[BoxShadow] = None


class ClassifiedComponent(_WireModel):
    source_id: str
    name: str
    widget_type: WidgetType
    mapped_target: Optional[str] = None
    support_status: SupportStatus
    properties: Dict[str, PropertyValue] = Field(default_factory=dict)
    styles: StyleBag = Field(default_factory=StyleBag)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AnalysisStats(_WireModel):
    total_components: int = 0
    frames: int = 0
    supported: int = 0
    partial: int = 0
    unsupported: int = 0


class AnalysisResult(_WireModel):
    file_key: str
    file_name: str
    components: List[ClassifiedComponent] = Field(default_factory=list)
    stats: AnalysisStats = Field(default_factory=AnalysisStats)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys and optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

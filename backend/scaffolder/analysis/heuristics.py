"""Structural shape detectors and visual predicates.

Each detector inspects one node and its immediate children only; none of
them recurse. They are the last-resort classification signal, tried after
every component-id and name rule has failed.
"""

from __future__ import annotations

from typing import Optional

from .models import (
    FRAME_KIND,
    FRAME_KINDS,
    RECTANGLE_KIND,
    TEXT_KIND,
    DesignNode,
    Paint,
)
from .styles import first_drop_shadow, first_visible

# Button-like nodes are smaller than this bounding box
BUTTON_MAX_WIDTH = 300
BUTTON_MAX_HEIGHT = 100
# Text shorter than this counts as a label
LABEL_MAX_CHARS = 30


# =====================================================================
# Visual predicates
# =====================================================================


def paint_opacity(paint: Paint) -> float:
    """Figma omits opacity when it is 1."""
    return 1.0 if paint.opacity is None else paint.opacity


def has_visible_drop_shadow(node: DesignNode) -> bool:
    return first_drop_shadow(node.effects) is not None


def has_visible_stroke(node: DesignNode) -> bool:
    return any(s.visible for s in node.strokes)


def has_visible_fill(node: DesignNode) -> bool:
    return any(f.visible and paint_opacity(f) > 0 for f in node.fills)


def first_opaque_fill(node: DesignNode) -> Optional[Paint]:
    """First visible fill with non-zero opacity."""
    for fill in node.fills:
        if fill.visible and paint_opacity(fill) > 0:
            return fill
    return None


def first_visible_fill(node: DesignNode) -> Optional[Paint]:
    return first_visible(node.fills)


def saturation(r: float, g: float, b: float) -> float:
    """HSV saturation, 0 for black."""
    high = max(r, g, b)
    low = min(r, g, b)
    return 0.0 if high == 0 else (high - low) / high


# =====================================================================
# Child predicates
# =====================================================================


def is_text(node: DesignNode) -> bool:
    return node.type == TEXT_KIND


def is_label_like_text(child: DesignNode) -> bool:
    if not is_text(child):
        return False
    if "label" in child.lower_name:
        return True
    return child.characters is not None and len(child.characters) < LABEL_MAX_CHARS


def is_input_area(child: DesignNode) -> bool:
    if child.type == RECTANGLE_KIND:
        return True
    return child.type == FRAME_KIND and "input" in child.lower_name


# =====================================================================
# Shape detectors
# =====================================================================


def is_button_like(node: DesignNode) -> bool:
    """Rounded corners plus an action-ish name or a small footprint."""
    if not node.corner_radius or node.corner_radius <= 0:
        return False
    if node.name_contains("click", "action"):
        return True
    bbox = node.absolute_bounding_box
    if bbox is None or bbox.width is None or bbox.height is None:
        return False
    return bbox.width < BUTTON_MAX_WIDTH and bbox.height < BUTTON_MAX_HEIGHT


def is_input_like(node: DesignNode) -> bool:
    """A short label text next to an entry area (rectangle or 'input' frame)."""
    if not node.children:
        return False
    has_label = any(is_label_like_text(c) for c in node.children)
    has_input_area = any(is_input_area(c) for c in node.children)
    return has_label and has_input_area


def is_card_like(node: DesignNode) -> bool:
    """An elevated frame/group holding several children, at least one text."""
    if node.type not in FRAME_KINDS:
        return False
    if not has_visible_drop_shadow(node):
        return False
    return len(node.children) > 1 and any(is_text(c) for c in node.children)

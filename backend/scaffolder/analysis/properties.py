"""Widget-specific property extraction.

Given a node and its resolved widget type, builds the property bag the
code emitters consume (variant, color theme, label/placeholder text,
flags, option lists). Every branch is best-effort: a field that cannot
be inferred is left out of the bag rather than defaulted, except where a
widget has a documented fallback label.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Tuple

from .heuristics import (
    first_opaque_fill,
    first_visible_fill,
    has_visible_drop_shadow,
    has_visible_fill,
    has_visible_stroke,
    is_text,
    paint_opacity,
    saturation,
)
from .models import (
    FRAME_KINDS,
    INSTANCE_KIND,
    VECTOR_KIND,
    DesignNode,
    PropertyValue,
    WidgetType,
)

PropertyBag = Dict[str, PropertyValue]

# (substring, Material button variant), checked in order
BUTTON_VARIANTS: Tuple[Tuple[str, str], ...] = (
    ("primary", "raised"),
    ("secondary", "stroked"),
    ("text", "basic"),
    ("icon", "icon"),
    ("flat", "flat"),
)
# Material form-field appearances, checked in order
INPUT_APPEARANCES: Tuple[str, ...] = ("outline", "standard", "fill")

DEFAULT_DATE_LABEL = "Choose a date"
DEFAULT_SELECT_LABEL = "Select an option"

# Fill opacity below which a stroked button counts as unfilled
STROKED_FILL_MAX_OPACITY = 0.2
DISABLED_MAX_OPACITY = 0.5
DISABLED_MAX_SATURATION = 0.1
ICON_MAX_SIZE = 24
# Label text sits in the top 30% or the left 20% of its container
LABEL_ZONE_TOP = 0.3
LABEL_ZONE_LEFT = 0.2

_OPTION_WORD_RE = re.compile(r"option|item", re.IGNORECASE)


# =====================================================================
# Text roles
# =====================================================================


def _in_label_zone(child: DesignNode, node: DesignNode) -> bool:
    parent, box = node.absolute_bounding_box, child.absolute_bounding_box
    if parent is None or box is None:
        return False
    if box.y is not None and parent.height is not None:
        if box.y - (parent.y or 0) < parent.height * LABEL_ZONE_TOP:
            return True
    if box.x is not None and parent.width is not None:
        if box.x - (parent.x or 0) < parent.width * LABEL_ZONE_LEFT:
            return True
    return False


def _font_rank(text: DesignNode) -> Tuple[float, float]:
    style = text.style
    if style is None:
        return (0, 0)
    return (style.font_size or 0, style.font_weight or 0)


def extract_text_content(node: DesignNode, role: str) -> Optional[str]:
    """Find the text child playing `role` (label, title, content, hint, ...).

    A direct TEXT child whose name contains the role wins. Otherwise:
    title/heading → largest then boldest text; label → first text in the
    top/left label zone; content → longest text. Other roles have no
    fallback.
    """
    if not node.children:
        return None

    role = role.lower()
    texts = [c for c in node.children if is_text(c)]

    named = next((t for t in texts if role in t.lower_name), None)
    if named is not None and named.characters:
        return named.characters

    if not texts:
        return None

    if role in ("title", "heading"):
        ranked = sorted(texts, key=_font_rank, reverse=True)
        return ranked[0].characters or None

    if role == "label":
        zoned = [t for t in texts if _in_label_zone(t, node)]
        return (zoned[0].characters or None) if zoned else None

    if role == "content":
        longest = max(texts, key=lambda t: len(t.characters or ""))
        return longest.characters or None

    return None


# =====================================================================
# Shared inference helpers
# =====================================================================


def button_variant(node: DesignNode) -> str:
    if node.component_id:
        for key, variant in BUTTON_VARIANTS:
            if key in node.component_id:
                return variant

    for key, variant in BUTTON_VARIANTS:
        if key in node.lower_name:
            return variant

    if has_visible_drop_shadow(node):
        return "raised"

    has_fill = has_visible_fill(node)
    if has_visible_stroke(node) and (
        not has_fill
        or all(paint_opacity(f) < STROKED_FILL_MAX_OPACITY for f in node.fills)
    ):
        return "stroked"
    if has_fill:
        return "flat"
    return "basic"


def color_theme(node: DesignNode) -> str:
    if node.name_contains("primary"):
        return "primary"
    if node.name_contains("accent", "secondary"):
        return "accent"
    if node.name_contains("warn", "danger", "error"):
        return "warn"

    fill = first_opaque_fill(node)
    if fill is not None and fill.color is not None:
        r, g, b = fill.color.r, fill.color.g, fill.color.b
        if r > 0.7 and g < 0.3 and b < 0.3:
            return "warn"
        if r < 0.3 and g < 0.5 and b > 0.7:
            return "primary"
        if r > 0.7 and g > 0.5 and b < 0.3:
            return "accent"

    return "primary"


def is_disabled(node: DesignNode) -> bool:
    if node.name_contains("disabled"):
        return True
    if node.opacity is not None and node.opacity < DISABLED_MAX_OPACITY:
        return True
    fill = first_visible_fill(node)
    if fill is not None and fill.color is not None:
        c = fill.color
        if saturation(c.r, c.g, c.b) < DISABLED_MAX_SATURATION:
            return True
    return False


def _is_small_square(child: DesignNode) -> bool:
    box = child.absolute_bounding_box
    if box is None or not box.width or not box.height:
        return False
    return box.width == box.height and box.width < ICON_MAX_SIZE


def has_icon(node: DesignNode) -> bool:
    return any(
        c.type == VECTOR_KIND or "icon" in c.lower_name or _is_small_square(c)
        for c in node.children
    )


def input_appearance(node: DesignNode) -> str:
    if node.component_id:
        for appearance in INPUT_APPEARANCES:
            if appearance in node.component_id:
                return appearance

    for appearance in INPUT_APPEARANCES:
        if appearance in node.lower_name:
            return appearance

    if has_visible_stroke(node):
        return "outline"
    if has_visible_fill(node):
        return "fill"
    return "standard"


def is_required(node: DesignNode) -> bool:
    if node.name_contains("required"):
        return True
    return any(
        (is_text(c) and "*" in (c.characters or ""))
        or c.name_contains("required", "asterisk")
        for c in node.children
    )


def has_action_buttons(node: DesignNode) -> bool:
    for child in node.children:
        if child.type in FRAME_KINDS and child.name_contains("action", "button"):
            return True
    return any(
        c.type == INSTANCE_KIND
        and ("button" in (c.component_id or "") or "button" in c.lower_name)
        for c in node.children
    )


def _option_label(option: DesignNode) -> str:
    if option.characters:
        return option.characters
    first_text = next((c for c in option.children if is_text(c)), None)
    if first_text is not None and first_text.characters:
        return first_text.characters
    return _OPTION_WORD_RE.sub("", option.name, count=1).strip()


def select_options(node: DesignNode) -> List[str]:
    return [
        _option_label(c)
        for c in node.children
        if c.name_contains("option", "item")
    ]


# =====================================================================
# Per-widget extractors
# =====================================================================


def _set(bag: PropertyBag, key: str, value: Optional[PropertyValue]) -> None:
    if value is not None:
        bag[key] = value


def _button_properties(node: DesignNode) -> PropertyBag:
    return {
        "variant": button_variant(node),
        "color": color_theme(node),
        "disabled": is_disabled(node),
        "icon": has_icon(node),
    }


def _input_properties(node: DesignNode) -> PropertyBag:
    bag: PropertyBag = {"appearance": input_appearance(node)}
    _set(bag, "label", extract_text_content(node, "label"))
    _set(
        bag, "placeholder",
        extract_text_content(node, "placeholder") or extract_text_content(node, "hint"),
    )
    bag["required"] = is_required(node)
    return bag


def _card_properties(node: DesignNode) -> PropertyBag:
    bag: PropertyBag = {}
    _set(bag, "title", extract_text_content(node, "title"))
    _set(bag, "subtitle", extract_text_content(node, "subtitle"))
    _set(bag, "content", extract_text_content(node, "content"))
    bag["actions"] = has_action_buttons(node)
    return bag


def _date_picker_properties(node: DesignNode) -> PropertyBag:
    return {
        "label": extract_text_content(node, "label") or DEFAULT_DATE_LABEL,
        "appearance": input_appearance(node),
    }


def _select_properties(node: DesignNode) -> PropertyBag:
    bag: PropertyBag = {
        "label": extract_text_content(node, "label") or DEFAULT_SELECT_LABEL,
        "appearance": input_appearance(node),
    }
    options = select_options(node)
    if options:
        bag["options"] = options
    return bag


_EXTRACTORS: Dict[WidgetType, Callable[[DesignNode], PropertyBag]] = {
    WidgetType.BUTTON: _button_properties,
    WidgetType.INPUT: _input_properties,
    WidgetType.CARD: _card_properties,
    WidgetType.DATE_PICKER: _date_picker_properties,
    WidgetType.SELECT: _select_properties,
}


def extract_properties(node: DesignNode, widget_type: WidgetType) -> PropertyBag:
    """Property bag for `node` as `widget_type`; empty for types without extractors."""
    extractor = _EXTRACTORS.get(widget_type)
    if extractor is None:
        return {}
    return extractor(node)

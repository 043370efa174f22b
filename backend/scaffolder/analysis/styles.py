"""Geometry/style extraction: one Figma node to a normalized StyleBag.

Pure function over a single node, no tree traversal. Every field is
independently optional and left unset when the source attribute is
missing, zero, or invisible.
"""

from __future__ import annotations

import math
from typing import List, Optional

from .models import (
    DROP_SHADOW,
    RGB,
    RGBA,
    BoxShadow,
    Color,
    DesignNode,
    Effect,
    Padding,
    Paint,
    StyleBag,
    Typography,
)

# Alpha of the black shadow used when a drop shadow carries no color of its own
DEFAULT_SHADOW_ALPHA = 0.25


def unit_to_255(value: float) -> int:
    """Convert a unit-interval channel to 0-255, rounding half up."""
    return int(math.floor(value * 255 + 0.5))


def color_to_rgb(color: Color) -> RGB:
    return RGB(
        r=unit_to_255(color.r),
        g=unit_to_255(color.g),
        b=unit_to_255(color.b),
    )


def color_to_rgba(color: Color) -> RGBA:
    return RGBA(
        r=unit_to_255(color.r),
        g=unit_to_255(color.g),
        b=unit_to_255(color.b),
        a=color.a,
    )


def first_visible(paints: List[Paint]) -> Optional[Paint]:
    """First paint with visible != false; later paints are ignored."""
    for paint in paints:
        if paint.visible:
            return paint
    return None


def first_drop_shadow(effects: List[Effect]) -> Optional[Effect]:
    for effect in effects:
        if effect.type == DROP_SHADOW and effect.visible:
            return effect
    return None


def _paint_rgb(paints: List[Paint]) -> Optional[RGB]:
    paint = first_visible(paints)
    if paint is None or paint.color is None:
        return None
    return color_to_rgb(paint.color)


def _padding(node: DesignNode) -> Optional[Padding]:
    sides = (node.padding_top, node.padding_right, node.padding_bottom, node.padding_left)
    if not any(sides):
        return None
    return Padding(
        top=node.padding_top or 0,
        right=node.padding_right or 0,
        bottom=node.padding_bottom or 0,
        left=node.padding_left or 0,
    )


def _typography(node: DesignNode) -> Optional[Typography]:
    style = node.style
    if style is None:
        return None
    line_height = style.line_height_px if style.line_height_px is not None else style.line_height
    typography = Typography(
        font_size=style.font_size,
        font_weight=style.font_weight,
        line_height=line_height,
        letter_spacing=style.letter_spacing,
        text_align=style.text_align_horizontal,
    )
    if not typography.model_dump(exclude_none=True):
        return None
    return typography


def _box_shadow(node: DesignNode) -> Optional[BoxShadow]:
    effect = first_drop_shadow(node.effects)
    if effect is None:
        return None
    offset = effect.offset
    return BoxShadow(
        offset_x=(offset.x if offset is not None else 0) or 0,
        offset_y=(offset.y if offset is not None else 0) or 0,
        radius=effect.radius or 0,
        color=(
            color_to_rgba(effect.color) if effect.color is not None
            else RGBA(r=0, g=0, b=0, a=DEFAULT_SHADOW_ALPHA)
        ),
    )


def extract_styles(node: DesignNode) -> StyleBag:
    """Extract dimensions, radius, padding, typography, colors and shadow."""
    bbox = node.absolute_bounding_box
    return StyleBag(
        width=(bbox.width or None) if bbox is not None else None,
        height=(bbox.height or None) if bbox is not None else None,
        border_radius=node.corner_radius or None,
        padding=_padding(node),
        typography=_typography(node),
        background_color=_paint_rgb(node.fills),
        border_color=_paint_rgb(node.strokes),
        box_shadow=_box_shadow(node),
    )

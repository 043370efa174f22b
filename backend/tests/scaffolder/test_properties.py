"""Tests for scaffolder.analysis.properties (per-widget property bags)."""

import pytest

from scaffolder.analysis import WidgetType, extract_properties, extract_text_content, parse_design_node
from scaffolder.analysis.properties import (
    DEFAULT_DATE_LABEL,
    DEFAULT_SELECT_LABEL,
    button_variant,
    color_theme,
    has_icon,
    input_appearance,
    is_disabled,
    is_required,
    select_options,
)


def _node(name="Node", type="INSTANCE", **fields):
    return parse_design_node({"id": "1", "name": name, "type": type, **fields})


def _text(name, characters, **fields):
    return {"id": f"t-{name}", "name": name, "type": "TEXT", "characters": characters, **fields}


def _solid(r, g, b, **fields):
    return {"type": "SOLID", "color": {"r": r, "g": g, "b": b}, **fields}


# ---------------------------------------------------------------------------
# Text roles
# ---------------------------------------------------------------------------


class TestExtractTextContent:

    def test_no_children(self):
        assert extract_text_content(_node(), "label") is None

    def test_named_child_wins(self):
        node = _node(children=[_text("Hint", "first"), _text("Label", "Email")])
        assert extract_text_content(node, "label") == "Email"

    def test_role_is_case_insensitive(self):
        node = _node(children=[_text("Field LABEL", "Email")])
        assert extract_text_content(node, "Label") == "Email"

    def test_title_picks_largest_then_boldest(self):
        node = _node(children=[
            _text("A", "small", style={"fontSize": 12, "fontWeight": 700}),
            _text("B", "big regular", style={"fontSize": 20, "fontWeight": 400}),
            _text("C", "big bold", style={"fontSize": 20, "fontWeight": 700}),
        ])
        assert extract_text_content(node, "title") == "big bold"

    def test_heading_uses_title_fallback(self):
        node = _node(children=[_text("A", "x", style={"fontSize": 30}), _text("B", "y")])
        assert extract_text_content(node, "heading") == "x"

    def test_label_zone_top(self):
        node = _node(
            absoluteBoundingBox={"x": 100, "y": 100, "width": 200, "height": 100},
            children=[
                _text("Bottom", "below", absoluteBoundingBox={"x": 200, "y": 180, "width": 50, "height": 10}),
                _text("Top", "above", absoluteBoundingBox={"x": 200, "y": 110, "width": 50, "height": 10}),
            ],
        )
        assert extract_text_content(node, "label") == "above"

    def test_label_zone_left(self):
        node = _node(
            absoluteBoundingBox={"x": 0, "y": 0, "width": 200, "height": 100},
            children=[_text("Side", "left", absoluteBoundingBox={"x": 10, "y": 60, "width": 20, "height": 10})],
        )
        assert extract_text_content(node, "label") == "left"

    def test_label_outside_zone(self):
        node = _node(
            absoluteBoundingBox={"x": 0, "y": 0, "width": 200, "height": 100},
            children=[_text("Body", "far", absoluteBoundingBox={"x": 150, "y": 80, "width": 20, "height": 10})],
        )
        assert extract_text_content(node, "label") is None

    def test_label_without_boxes(self):
        node = _node(children=[_text("Body", "text")])
        assert extract_text_content(node, "label") is None

    def test_content_picks_longest(self):
        node = _node(children=[_text("A", "short"), _text("B", "a much longer paragraph")])
        assert extract_text_content(node, "content") == "a much longer paragraph"

    def test_unknown_role_has_no_fallback(self):
        node = _node(children=[_text("Body", "text")])
        assert extract_text_content(node, "subtitle") is None

    def test_empty_characters_is_none(self):
        node = _node(children=[_text("Body", "")])
        assert extract_text_content(node, "content") is None


# ---------------------------------------------------------------------------
# Button
# ---------------------------------------------------------------------------


class TestButtonProperties:

    @pytest.mark.parametrize("component_id,expected", [
        ("button-primary", "raised"),
        ("button-secondary", "stroked"),
        ("button-text", "basic"),
        ("button-icon", "icon"),
        ("button-flat", "flat"),
    ])
    def test_variant_from_component_id(self, component_id, expected):
        assert button_variant(_node(name="X", componentId=component_id)) == expected

    def test_variant_from_name(self):
        assert button_variant(_node(name="Secondary Action")) == "stroked"

    def test_variant_from_shadow(self):
        node = _node(name="Go", effects=[{"type": "DROP_SHADOW"}])
        assert button_variant(node) == "raised"

    def test_variant_stroked_with_faint_fill(self):
        node = _node(
            name="Go",
            strokes=[_solid(0, 0, 0)],
            fills=[_solid(1, 1, 1, opacity=0.1)],
        )
        assert button_variant(node) == "stroked"

    def test_variant_flat_with_fill(self):
        node = _node(name="Go", fills=[_solid(0.2, 0.4, 0.9)])
        assert button_variant(node) == "flat"

    def test_variant_basic(self):
        assert button_variant(_node(name="Go")) == "basic"

    def test_color_from_name(self):
        assert color_theme(_node(name="Danger zone")) == "warn"
        assert color_theme(_node(name="Accent")) == "accent"

    @pytest.mark.parametrize("rgb,expected", [
        ((0.9, 0.1, 0.1), "warn"),
        ((0.1, 0.3, 0.9), "primary"),
        ((0.9, 0.6, 0.1), "accent"),
        ((0.5, 0.5, 0.5), "primary"),
    ])
    def test_color_from_fill(self, rgb, expected):
        assert color_theme(_node(name="Go", fills=[_solid(*rgb)])) == expected

    def test_color_skips_transparent_fill(self):
        node = _node(name="Go", fills=[_solid(0.9, 0.1, 0.1, opacity=0), _solid(0.9, 0.6, 0.1)])
        assert color_theme(node) == "accent"

    def test_disabled_by_name(self):
        assert is_disabled(_node(name="Disabled Button"))

    def test_disabled_by_opacity(self):
        assert is_disabled(_node(name="Go", opacity=0.4))

    def test_disabled_by_grey_fill(self):
        assert is_disabled(_node(name="Go", fills=[_solid(0.8, 0.8, 0.8)]))

    def test_enabled_colored_button(self):
        assert not is_disabled(_node(name="Go", fills=[_solid(0.2, 0.4, 0.9)]))

    def test_icon_detection(self):
        assert has_icon(_node(children=[{"id": "v", "name": "Glyph", "type": "VECTOR"}]))
        assert has_icon(_node(children=[{"id": "i", "name": "Leading Icon", "type": "FRAME"}]))
        assert has_icon(_node(children=[{
            "id": "s", "name": "Dot", "type": "FRAME",
            "absoluteBoundingBox": {"width": 16, "height": 16},
        }]))
        assert not has_icon(_node(children=[{
            "id": "s", "name": "Dot", "type": "FRAME",
            "absoluteBoundingBox": {"width": 24, "height": 24},
        }]))

    def test_button_bag(self):
        props = extract_properties(_node(name="Primary Button", componentId="button-primary"), WidgetType.BUTTON)
        assert props == {"variant": "raised", "color": "primary", "disabled": False, "icon": False}


# ---------------------------------------------------------------------------
# Input / DatePicker / Select
# ---------------------------------------------------------------------------


class TestInputProperties:

    def test_appearance_from_component_id(self):
        assert input_appearance(_node(componentId="input-outline")) == "outline"

    def test_appearance_from_name(self):
        assert input_appearance(_node(name="Fill Input")) == "fill"

    def test_appearance_from_stroke(self):
        assert input_appearance(_node(name="Email", strokes=[_solid(0, 0, 0)])) == "outline"

    def test_appearance_from_fill(self):
        assert input_appearance(_node(name="Email", fills=[_solid(1, 1, 1)])) == "fill"

    def test_appearance_default(self):
        assert input_appearance(_node(name="Email")) == "standard"

    def test_required(self):
        assert is_required(_node(name="Email required"))
        assert is_required(_node(children=[_text("Label", "Email *")]))
        assert is_required(_node(children=[{"id": "a", "name": "Asterisk", "type": "VECTOR"}]))
        assert not is_required(_node(children=[_text("Label", "Email")]))

    def test_input_bag(self):
        node = _node(name="Input Field", componentId="input-standard", children=[
            _text("Label", "Username"),
            {"id": "r", "name": "Input", "type": "RECTANGLE"},
            _text("Hint", "Enter your username"),
        ])
        props = extract_properties(node, WidgetType.INPUT)
        assert props == {
            "appearance": "standard",
            "label": "Username",
            "placeholder": "Enter your username",
            "required": False,
        }

    def test_placeholder_prefers_named_placeholder(self):
        node = _node(children=[_text("Hint", "hint"), _text("Placeholder", "type here")])
        assert extract_properties(node, WidgetType.INPUT)["placeholder"] == "type here"

    def test_missing_texts_are_omitted(self):
        props = extract_properties(_node(name="Email"), WidgetType.INPUT)
        assert "label" not in props
        assert "placeholder" not in props

    def test_date_picker_default_label(self):
        props = extract_properties(_node(name="Date"), WidgetType.DATE_PICKER)
        assert props == {"label": DEFAULT_DATE_LABEL, "appearance": "standard"}

    def test_date_picker_label(self):
        node = _node(name="Date", strokes=[_solid(0, 0, 0)], children=[_text("Label", "Birthday")])
        props = extract_properties(node, WidgetType.DATE_PICKER)
        assert props == {"label": "Birthday", "appearance": "outline"}


class TestSelectProperties:

    def test_options_from_characters_and_names(self):
        node = _node(name="Country Select", children=[
            _text("Option 1", "France"),
            {"id": "o2", "name": "Option Germany", "type": "FRAME", "children": [_text("Text", "Germany")]},
            {"id": "o3", "name": "Item Spain", "type": "FRAME"},
            {"id": "x", "name": "Chevron", "type": "VECTOR"},
        ])
        assert select_options(node) == ["France", "Germany", "Spain"]

    def test_option_name_strips_first_keyword_only(self):
        node = _node(children=[{"id": "o", "name": "option item", "type": "FRAME"}])
        assert select_options(node) == ["item"]

    def test_select_bag_without_options(self):
        props = extract_properties(_node(name="Select"), WidgetType.SELECT)
        assert props == {"label": DEFAULT_SELECT_LABEL, "appearance": "standard"}

    def test_select_bag_with_options(self):
        node = _node(name="Select", children=[_text("Option A", "Alpha")])
        assert extract_properties(node, WidgetType.SELECT)["options"] == ["Alpha"]


# ---------------------------------------------------------------------------
# Card and types without extractors
# ---------------------------------------------------------------------------


class TestCardProperties:

    def test_card_bag(self):
        node = _node(name="Card", type="FRAME", children=[
            _text("Card Title", "Welcome", style={"fontSize": 18}),
            _text("Subtitle", "Getting started"),
            _text("Body", "Longer body text for the card."),
        ])
        props = extract_properties(node, WidgetType.CARD)
        assert props == {
            "title": "Welcome",
            "subtitle": "Getting started",
            "content": "Longer body text for the card.",
            "actions": False,
        }

    def test_actions_from_frame(self):
        node = _node(name="Card", type="FRAME", children=[{"id": "a", "name": "Actions", "type": "FRAME"}])
        assert extract_properties(node, WidgetType.CARD)["actions"] is True

    def test_actions_from_button_instance(self):
        node = _node(name="Card", type="FRAME", children=[
            {"id": "b", "name": "Go", "type": "INSTANCE", "componentId": "button-text"},
        ])
        assert extract_properties(node, WidgetType.CARD)["actions"] is True

    def test_action_text_is_not_an_action_button(self):
        node = _node(name="Card", type="FRAME", children=[_text("Action", "Go")])
        assert extract_properties(node, WidgetType.CARD)["actions"] is False

    @pytest.mark.parametrize("widget_type", [
        WidgetType.CHECKBOX, WidgetType.RADIO, WidgetType.TABS,
        WidgetType.TABLE, WidgetType.CAROUSEL, WidgetType.CUSTOM,
    ])
    def test_types_without_extractor_are_empty(self, widget_type):
        assert extract_properties(_node(name="Primary Thing"), widget_type) == {}

"""Built-in sample design: a one-page Figma file with five widgets.

Used by the demo endpoint and as the import source when no Figma token
is configured. Each call returns a fresh dict, so callers may mutate it.
"""

from typing import Any, Dict

from scaffolder.analysis.models import DEFAULT_FILE_NAME

DEMO_FILE_KEY = "demo-figma-file"
DEMO_FILE_NAME = "Demo Design System"


def _solid(r: float, g: float, b: float) -> Dict[str, Any]:
    return {"type": "SOLID", "color": {"r": r, "g": g, "b": b, "a": 1}}


def _drop_shadow() -> Dict[str, Any]:
    return {"type": "DROP_SHADOW", "visible": True}


def _primary_button() -> Dict[str, Any]:
    return {
        "id": "1:1",
        "name": "Primary Button",
        "type": "INSTANCE",
        "componentId": "button-primary",
        "fills": [_solid(0.2, 0.4, 0.9)],
        "effects": [_drop_shadow()],
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 120, "height": 40},
        "strokes": [],
        "cornerRadius": 4,
    }


def _input_field() -> Dict[str, Any]:
    return {
        "id": "1:2",
        "name": "Input Field",
        "type": "INSTANCE",
        "componentId": "input-standard",
        "absoluteBoundingBox": {"x": 0, "y": 80, "width": 280, "height": 56},
        "fills": [_solid(1, 1, 1)],
        "strokes": [_solid(0.8, 0.8, 0.8)],
        "cornerRadius": 4,
        "children": [
            {"id": "1:2:1", "name": "Label", "type": "TEXT", "characters": "Username"},
            {"id": "1:2:2", "name": "Input", "type": "RECTANGLE"},
            {"id": "1:2:3", "name": "Hint", "type": "TEXT", "characters": "Enter your username"},
        ],
    }


def _card() -> Dict[str, Any]:
    return {
        "id": "1:3",
        "name": "Card Component",
        "type": "FRAME",
        "absoluteBoundingBox": {"x": 0, "y": 180, "width": 320, "height": 200},
        "fills": [_solid(1, 1, 1)],
        "effects": [_drop_shadow()],
        "cornerRadius": 8,
        "children": [
            {
                "id": "1:3:1",
                "name": "Card Title",
                "type": "TEXT",
                "characters": "Card Title",
                "style": {"fontWeight": 600, "fontSize": 18},
            },
            {
                "id": "1:3:2",
                "name": "Card Content",
                "type": "TEXT",
                "characters": "This is the card content area with description text.",
            },
            {
                "id": "1:3:3",
                "name": "Card Actions",
                "type": "FRAME",
                "children": [
                    {"id": "1:3:3:1", "name": "Action 1", "type": "INSTANCE", "componentId": "button-text"},
                    {"id": "1:3:3:2", "name": "Action 2", "type": "INSTANCE", "componentId": "button-text"},
                ],
            },
        ],
    }


def _date_picker() -> Dict[str, Any]:
    return {
        "id": "1:4",
        "name": "Date Picker",
        "type": "INSTANCE",
        "componentId": "date-picker",
        "absoluteBoundingBox": {"x": 0, "y": 420, "width": 280, "height": 56},
        "children": [
            {
                "id": "1:4:1",
                "name": "Input",
                "type": "INSTANCE",
                "componentId": "input-standard",
                "children": [
                    {"id": "1:4:1:1", "name": "Label", "type": "TEXT", "characters": "Select Date"},
                ],
            },
            {"id": "1:4:2", "name": "Calendar Icon", "type": "VECTOR"},
        ],
    }


def _carousel() -> Dict[str, Any]:
    return {
        "id": "1:5",
        "name": "Custom Carousel",
        "type": "FRAME",
        "absoluteBoundingBox": {"x": 0, "y": 520, "width": 400, "height": 240},
        "children": [
            {"id": "1:5:1", "name": "Slide 1", "type": "RECTANGLE"},
            {"id": "1:5:2", "name": "Slide 2", "type": "RECTANGLE"},
            {
                "id": "1:5:3",
                "name": "Navigation",
                "type": "FRAME",
                "children": [
                    {"id": "1:5:3:1", "name": "Prev", "type": "VECTOR"},
                    {"id": "1:5:3:2", "name": "Next", "type": "VECTOR"},
                ],
            },
        ],
    }


def sample_design(file_key: str = DEMO_FILE_KEY, file_name: str = DEFAULT_FILE_NAME) -> Dict[str, Any]:
    """Figma file payload ({key, name, document}) for the sample page."""
    return {
        "key": file_key,
        "name": file_name,
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "0:1",
                    "name": "Page 1",
                    "type": "CANVAS",
                    "children": [
                        _primary_button(),
                        _input_field(),
                        _card(),
                        _date_picker(),
                        _carousel(),
                    ],
                },
            ],
        },
    }


def demo_design() -> Dict[str, Any]:
    """Sample design under the demo file key and name."""
    return sample_design(DEMO_FILE_KEY, DEMO_FILE_NAME)

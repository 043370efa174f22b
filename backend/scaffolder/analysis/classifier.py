"""Component-type classification for Figma nodes.

A node is a *candidate* when it is a component/instance, or a frame/group
whose name carries a widget keyword. Candidates are resolved to a widget
type by an ordered rule chain; the first matching rule wins:

1. componentId listed in the known-id catalog
2. name substrings (button, input/field, card, check, select, date, tab, table, carousel)
3. structural shape (button-like, input-like, card-like)
4. Custom
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .heuristics import is_button_like, is_card_like, is_input_like
from .models import COMPONENT_KINDS, FRAME_KINDS, DesignNode, SupportStatus, WidgetType

NodePredicate = Callable[[DesignNode], bool]

# Frame/group names containing one of these are component candidates
CANDIDATE_KEYWORDS = (
    "button", "input", "field", "card", "checkbox",
    "select", "date", "table", "tab", "carousel",
)

# Known library component ids per widget type
COMPONENT_TYPE_IDS: Dict[WidgetType, Tuple[str, ...]] = {
    WidgetType.BUTTON: ("button-primary", "button-secondary", "button-flat", "button-icon"),
    WidgetType.INPUT: ("input-standard", "input-outline", "input-fill", "text-field"),
    WidgetType.CARD: ("card-standard", "card-elevated", "card-outlined"),
    WidgetType.CHECKBOX: ("checkbox-standard", "checkbox-indeterminate"),
    WidgetType.RADIO: ("radio-button", "radio-option"),
    WidgetType.SELECT: ("select-standard", "dropdown", "combobox"),
    WidgetType.DATE_PICKER: ("date-picker", "calendar-input"),
    WidgetType.TABS: ("tabs-standard", "tab-bar"),
    WidgetType.TABLE: ("table-standard", "data-table"),
}

SUPPORTED_TYPES = frozenset({
    WidgetType.BUTTON, WidgetType.INPUT, WidgetType.CARD,
    WidgetType.CHECKBOX, WidgetType.RADIO,
})
PARTIAL_TYPES = frozenset({
    WidgetType.SELECT, WidgetType.DATE_PICKER, WidgetType.TABS, WidgetType.TABLE,
})

# Angular Material widget per type; Custom and Carousel have none
MATERIAL_COMPONENTS: Dict[WidgetType, str] = {
    WidgetType.BUTTON: "mat-button",
    WidgetType.INPUT: "mat-form-field",
    WidgetType.CARD: "mat-card",
    WidgetType.CHECKBOX: "mat-checkbox",
    WidgetType.RADIO: "mat-radio",
    WidgetType.SELECT: "mat-select",
    WidgetType.DATE_PICKER: "mat-datepicker",
    WidgetType.TABS: "mat-tabs",
    WidgetType.TABLE: "mat-table",
}


@dataclass(frozen=True)
class Classification:
    """Classifier verdict for one node."""
    is_candidate: bool
    widget_type: Optional[WidgetType] = None


def _component_id_in(ids: Tuple[str, ...]) -> NodePredicate:
    return lambda node: node.component_id is not None and node.component_id in ids


def _name_has(*keywords: str) -> NodePredicate:
    return lambda node: node.name_contains(*keywords)


def _tab_not_table(node: DesignNode) -> bool:
    return "tab" in node.lower_name and "table" not in node.lower_name


TYPE_RULES: List[Tuple[NodePredicate, WidgetType]] = [
    *((_component_id_in(ids), wt) for wt, ids in COMPONENT_TYPE_IDS.items()),
    (_name_has("button"), WidgetType.BUTTON),
    (_name_has("input", "field", "text field"), WidgetType.INPUT),
    (_name_has("card"), WidgetType.CARD),
    (_name_has("check"), WidgetType.CHECKBOX),
    (_name_has("select", "dropdown", "combo"), WidgetType.SELECT),
    (_name_has("date", "calendar"), WidgetType.DATE_PICKER),
    (_tab_not_table, WidgetType.TABS),
    (_name_has("table"), WidgetType.TABLE),
    (_name_has("carousel", "slider"), WidgetType.CAROUSEL),
    (is_button_like, WidgetType.BUTTON),
    (is_input_like, WidgetType.INPUT),
    (is_card_like, WidgetType.CARD),
]


def is_candidate(node: DesignNode) -> bool:
    if node.type in COMPONENT_KINDS:
        return True
    if node.type in FRAME_KINDS:
        return node.name_contains(*CANDIDATE_KEYWORDS)
    return False


def detect_widget_type(node: DesignNode) -> WidgetType:
    """Resolve a candidate's widget type through TYPE_RULES."""
    for predicate, widget_type in TYPE_RULES:
        if predicate(node):
            return widget_type
    return WidgetType.CUSTOM


def classify(node: DesignNode) -> Classification:
    if not is_candidate(node):
        return Classification(is_candidate=False)
    return Classification(is_candidate=True, widget_type=detect_widget_type(node))


def support_status(widget_type: WidgetType) -> SupportStatus:
    if widget_type in SUPPORTED_TYPES:
        return SupportStatus.SUPPORTED
    if widget_type in PARTIAL_TYPES:
        return SupportStatus.PARTIAL
    return SupportStatus.UNSUPPORTED


def mapped_target(widget_type: WidgetType) -> Optional[str]:
    return MATERIAL_COMPONENTS.get(widget_type)

"""Angular Material component emitter.

Turns one ClassifiedComponent into the three files of an Angular
component: HTML template (markup), TypeScript class (logic) and SCSS
(style). Output is a starting scaffold; every value taken from the
design is a plain @Input() default the developer is expected to edit.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from scaffolder.analysis.models import ClassifiedComponent, StyleBag, WidgetType

THEMES = ("light", "dark", "custom")

# Angular button directive per extracted variant
BUTTON_DIRECTIVES: Dict[str, str] = {
    "basic": "mat-button",
    "raised": "mat-raised-button",
    "stroked": "mat-stroked-button",
    "flat": "mat-flat-button",
    "icon": "mat-icon-button",
}

# (symbol, module path)
ModuleImport = Tuple[str, str]

MAT_BUTTON: ModuleImport = ("MatButtonModule", "@angular/material/button")
MAT_ICON: ModuleImport = ("MatIconModule", "@angular/material/icon")
MAT_INPUT: ModuleImport = ("MatInputModule", "@angular/material/input")
MAT_FORM_FIELD: ModuleImport = ("MatFormFieldModule", "@angular/material/form-field")
MAT_CARD: ModuleImport = ("MatCardModule", "@angular/material/card")
MAT_SELECT: ModuleImport = ("MatSelectModule", "@angular/material/select")
MAT_CHECKBOX: ModuleImport = ("MatCheckboxModule", "@angular/material/checkbox")
MAT_RADIO: ModuleImport = ("MatRadioModule", "@angular/material/radio")
MAT_DATEPICKER: ModuleImport = ("MatDatepickerModule", "@angular/material/datepicker")
MAT_NATIVE_DATE: ModuleImport = ("MatNativeDateModule", "@angular/material/core")
MAT_TABS: ModuleImport = ("MatTabsModule", "@angular/material/tabs")
MAT_TABLE: ModuleImport = ("MatTableModule", "@angular/material/table")
MAT_SORT: ModuleImport = ("MatSortModule", "@angular/material/sort")
MAT_PAGINATOR: ModuleImport = ("MatPaginatorModule", "@angular/material/paginator")
COMMON: ModuleImport = ("CommonModule", "@angular/common")
FORMS: ModuleImport = ("FormsModule", "@angular/forms")
REACTIVE_FORMS: ModuleImport = ("ReactiveFormsModule", "@angular/forms")

MODULE_IMPORTS: Dict[WidgetType, List[ModuleImport]] = {
    WidgetType.BUTTON: [MAT_BUTTON],
    WidgetType.INPUT: [MAT_INPUT, MAT_FORM_FIELD, REACTIVE_FORMS],
    WidgetType.CARD: [MAT_CARD],
    WidgetType.SELECT: [COMMON, MAT_FORM_FIELD, MAT_SELECT, REACTIVE_FORMS],
    WidgetType.CHECKBOX: [MAT_CHECKBOX, FORMS],
    WidgetType.RADIO: [COMMON, MAT_RADIO, FORMS],
    WidgetType.DATE_PICKER: [
        MAT_DATEPICKER, MAT_FORM_FIELD, MAT_INPUT, MAT_NATIVE_DATE, REACTIVE_FORMS,
    ],
    WidgetType.TABS: [COMMON, MAT_TABS],
    WidgetType.TABLE: [COMMON, MAT_TABLE, MAT_SORT, MAT_PAGINATOR],
}

# Form control name per reactive-form widget
FORM_CONTROLS: Dict[WidgetType, str] = {
    WidgetType.INPUT: "input",
    WidgetType.SELECT: "select",
    WidgetType.DATE_PICKER: "date",
}


@dataclass
class EmitOptions:
    """Per-call emitter settings.

    selector defaults to app-<kebab-name>; theme 'custom' prepends CSS
    variable definitions to the stylesheet.
    """
    selector: Optional[str] = None
    standalone: bool = True
    theme: str = "light"


@dataclass
class GeneratedCode:
    markup: str
    logic: str
    style: str

    def files(self, base_name: str) -> Dict[str, str]:
        """File name → content for `<base_name>.component.{html,ts,scss}`."""
        return {
            f"{base_name}.component.html": self.markup,
            f"{base_name}.component.ts": self.logic,
            f"{base_name}.component.scss": self.style,
        }


# =====================================================================
# Naming and literals
# =====================================================================


def kebab_name(name: str) -> str:
    """'Primary Button' → 'primary-button'."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "component"


def class_name(name: str) -> str:
    """'primary button' → 'PrimaryButton'."""
    parts = re.split(r"[^a-zA-Z0-9]+", name)
    pascal = "".join(p[:1].upper() + p[1:].lower() for p in parts if p)
    if not pascal or pascal[0].isdigit():
        pascal = "Figma" + pascal
    return pascal


def selector_for(component: ClassifiedComponent, options: EmitOptions) -> str:
    return options.selector or f"app-{kebab_name(component.name)}"


def _ts_str(value: Any) -> str:
    text = str(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{text}'"


def _ts_bool(value: Any) -> str:
    return "true" if value else "false"


def _text(value: Any) -> str:
    return html.escape(str(value), quote=True)


# =====================================================================
# Markup
# =====================================================================


def _button_markup(props: Dict[str, Any]) -> str:
    directive = BUTTON_DIRECTIVES.get(str(props.get("variant", "raised")), "mat-raised-button")
    lines = ["<button", f"  {directive}", '  [color]="color"', '  [disabled]="disabled"',
             '  (click)="onClick()"', ">"]
    if props.get("icon"):
        lines.append("  <mat-icon>{{ icon }}</mat-icon>")
    if directive != "mat-icon-button":
        lines.append("  <span>{{ text }}</span>")
    lines.append("</button>")
    return "\n".join(lines)


def _form_field_open(props: Dict[str, Any], default_label: str) -> List[str]:
    appearance = props.get("appearance", "outline")
    # Angular Material removed 'standard'; it renders as 'fill'
    if appearance == "standard":
        appearance = "fill"
    label = props.get("label", default_label)
    return [
        '<div [formGroup]="form">',
        f'  <mat-form-field appearance="{_text(appearance)}">',
        f"    <mat-label>{_text(label)}</mat-label>",
    ]


def _input_markup(props: Dict[str, Any]) -> str:
    lines = _form_field_open(props, "Label")
    lines.append("    <input")
    lines.append("      matInput")
    if props.get("placeholder"):
        lines.append(f'      placeholder="{_text(props["placeholder"])}"')
    if props.get("required"):
        lines.append("      required")
    lines += [
        '      formControlName="input"',
        '      (input)="onInputChange()"',
        "    >",
    ]
    if props.get("required"):
        lines += [
            "    @if (form.get('input')?.hasError('required')) {",
            "      <mat-error>This field is required</mat-error>",
            "    }",
        ]
    lines += ["  </mat-form-field>", "</div>"]
    return "\n".join(lines)


def _card_markup(props: Dict[str, Any]) -> str:
    lines = ["<mat-card>"]
    if props.get("title"):
        lines.append("  <mat-card-header>")
        lines.append("    <mat-card-title>{{ title }}</mat-card-title>")
        if props.get("subtitle"):
            lines.append("    <mat-card-subtitle>{{ subtitle }}</mat-card-subtitle>")
        lines.append("  </mat-card-header>")
    lines += [
        "  <mat-card-content>",
        "    <p>{{ content }}</p>",
        "  </mat-card-content>",
    ]
    if props.get("actions"):
        lines += [
            "  <mat-card-actions align=\"end\">",
            "    @for (label of actionLabels; track label) {",
            "      <button mat-button (click)=\"onAction(label)\">{{ label }}</button>",
            "    }",
            "  </mat-card-actions>",
        ]
    lines.append("</mat-card>")
    return "\n".join(lines)


def _select_markup(props: Dict[str, Any]) -> str:
    lines = _form_field_open(props, "Select an option")
    lines += [
        '    <mat-select formControlName="select" (selectionChange)="onSelectionChange($event.value)">',
        "      @for (option of options; track option.value) {",
        "        <mat-option [value]=\"option.value\">{{ option.label }}</mat-option>",
        "      }",
        "    </mat-select>",
        "  </mat-form-field>",
        "</div>",
    ]
    return "\n".join(lines)


def _checkbox_markup(props: Dict[str, Any]) -> str:
    return "\n".join([
        "<mat-checkbox",
        '  [color]="color"',
        '  [(ngModel)]="checked"',
        '  (change)="onCheckboxChange($event.checked)"',
        ">",
        "  {{ label }}",
        "</mat-checkbox>",
    ])


def _radio_markup(props: Dict[str, Any]) -> str:
    return "\n".join([
        '<mat-radio-group [(ngModel)]="selected" (change)="onSelectionChange($event.value)">',
        "  @for (option of options; track option) {",
        "    <mat-radio-button [value]=\"option\">{{ option }}</mat-radio-button>",
        "  }",
        "</mat-radio-group>",
    ])


def _date_picker_markup(props: Dict[str, Any]) -> str:
    lines = _form_field_open(props, "Choose a date")
    lines += [
        "    <input",
        "      matInput",
        '      [matDatepicker]="picker"',
        '      formControlName="date"',
        '      (dateChange)="onDateChange()"',
        "    >",
        '    <mat-datepicker-toggle matIconSuffix [for]="picker"></mat-datepicker-toggle>',
        "    <mat-datepicker #picker></mat-datepicker>",
        "  </mat-form-field>",
        "</div>",
    ]
    return "\n".join(lines)


def _tabs_markup(props: Dict[str, Any]) -> str:
    return "\n".join([
        '<mat-tab-group [(selectedIndex)]="selectedIndex" (selectedIndexChange)="onTabChange($event)">',
        "  @for (tab of tabs; track tab.label) {",
        "    <mat-tab [label]=\"tab.label\">",
        '      <div class="tab-content">{{ tab.content }}</div>',
        "    </mat-tab>",
        "  }",
        "</mat-tab-group>",
    ])


def _table_markup(props: Dict[str, Any]) -> str:
    return "\n".join([
        '<div class="table-container">',
        '  <table mat-table [dataSource]="dataSource" matSort>',
        "    @for (column of displayedColumns; track column) {",
        '      <ng-container [matColumnDef]="column">',
        "        <th mat-header-cell *matHeaderCellDef mat-sort-header>{{ columnNames[column] }}</th>",
        "        <td mat-cell *matCellDef=\"let element\">{{ element[column] }}</td>",
        "      </ng-container>",
        "    }",
        '    <tr mat-header-row *matHeaderRowDef="displayedColumns"></tr>',
        '    <tr mat-row *matRowDef="let row; columns: displayedColumns"></tr>',
        "  </table>",
        '  <mat-paginator [pageSizeOptions]="[5, 10, 20]" showFirstLastButtons></mat-paginator>',
        "</div>",
    ])


def _custom_markup(component: ClassifiedComponent) -> str:
    return "\n".join([
        f"<!-- Custom component: {_text(component.name)} -->",
        f'<div class="{kebab_name(component.name)}">',
        "  <h3>{{ title }}</h3>",
        "  <p>{{ description }}</p>",
        '  <div class="custom-content">',
        "    <ng-content></ng-content>",
        "  </div>",
        "</div>",
    ])


_MARKUP = {
    WidgetType.BUTTON: _button_markup,
    WidgetType.INPUT: _input_markup,
    WidgetType.CARD: _card_markup,
    WidgetType.SELECT: _select_markup,
    WidgetType.CHECKBOX: _checkbox_markup,
    WidgetType.RADIO: _radio_markup,
    WidgetType.DATE_PICKER: _date_picker_markup,
    WidgetType.TABS: _tabs_markup,
    WidgetType.TABLE: _table_markup,
}


def emit_markup(component: ClassifiedComponent) -> str:
    builder = _MARKUP.get(component.widget_type)
    if builder is None:
        return _custom_markup(component) + "\n"
    return builder(component.properties) + "\n"


# =====================================================================
# Logic (TypeScript)
# =====================================================================


def module_imports(component: ClassifiedComponent) -> List[ModuleImport]:
    imports = list(MODULE_IMPORTS.get(component.widget_type, [COMMON]))
    props = component.properties
    if component.widget_type == WidgetType.BUTTON and props.get("icon"):
        imports.append(MAT_ICON)
    if component.widget_type == WidgetType.CARD and props.get("actions"):
        imports.append(MAT_BUTTON)
    return imports


def _import_lines(core: List[str], modules: List[ModuleImport], extra: List[str]) -> List[str]:
    lines = [f"import {{ {', '.join(core)} }} from '@angular/core';"]
    by_path: Dict[str, List[str]] = {}
    for symbol, path in modules:
        by_path.setdefault(path, []).append(symbol)
    for path, symbols in by_path.items():
        lines.append(f"import {{ {', '.join(symbols)} }} from '{path}';")
    lines.extend(extra)
    return lines


def _members(component: ClassifiedComponent) -> List[str]:
    props = component.properties
    wt = component.widget_type

    if wt == WidgetType.BUTTON:
        members = [
            f"@Input() text = {_ts_str(component.name)};",
            f"@Input() color = {_ts_str(props.get('color', 'primary'))};",
            f"@Input() disabled = {_ts_bool(props.get('disabled'))};",
        ]
        if props.get("icon"):
            members.append("@Input() icon = 'add';")
        members.append("@Output() buttonClick = new EventEmitter<void>();")
        return members

    if wt == WidgetType.INPUT:
        return [
            f"@Input() label = {_ts_str(props.get('label', 'Label'))};",
            f"@Input() placeholder = {_ts_str(props.get('placeholder', ''))};",
            f"@Input() required = {_ts_bool(props.get('required'))};",
            "@Output() valueChange = new EventEmitter<string>();",
            "form!: FormGroup;",
        ]

    if wt == WidgetType.CARD:
        members = [f"@Input() title = {_ts_str(props.get('title', component.name))};"]
        if props.get("subtitle"):
            members.append(f"@Input() subtitle = {_ts_str(props['subtitle'])};")
        members.append(f"@Input() content = {_ts_str(props.get('content', 'Card content goes here'))};")
        if props.get("actions"):
            members.append("@Input() actionLabels = ['ACTION 1', 'ACTION 2'];")
            members.append("@Output() action = new EventEmitter<string>();")
        return members

    if wt == WidgetType.SELECT:
        labels = props.get("options") or ["Option 1", "Option 2", "Option 3"]
        options = ", ".join(
            f"{{ value: 'option{i}', label: {_ts_str(label)} }}"
            for i, label in enumerate(labels, start=1)
        )
        return [
            f"@Input() label = {_ts_str(props.get('label', 'Select an option'))};",
            f"@Input() options = [{options}];",
            "@Output() selectionChange = new EventEmitter<string>();",
            "form!: FormGroup;",
        ]

    if wt == WidgetType.CHECKBOX:
        return [
            f"@Input() label = {_ts_str(component.name)};",
            "@Input() checked = false;",
            f"@Input() color = {_ts_str(props.get('color', 'primary'))};",
            "@Output() checkedChange = new EventEmitter<boolean>();",
        ]

    if wt == WidgetType.RADIO:
        return [
            "@Input() options: string[] = ['Option 1', 'Option 2'];",
            "@Input() selected = '';",
            "@Output() selectionChange = new EventEmitter<string>();",
        ]

    if wt == WidgetType.DATE_PICKER:
        return [
            f"@Input() label = {_ts_str(props.get('label', 'Choose a date'))};",
            "@Output() dateChange = new EventEmitter<Date | null>();",
            "form!: FormGroup;",
        ]

    if wt == WidgetType.TABS:
        return [
            "@Input() tabs = [",
            "  { label: 'Tab 1', content: 'Content for Tab 1' },",
            "  { label: 'Tab 2', content: 'Content for Tab 2' },",
            "  { label: 'Tab 3', content: 'Content for Tab 3' },",
            "];",
            "@Input() selectedIndex = 0;",
            "@Output() tabChange = new EventEmitter<number>();",
        ]

    if wt == WidgetType.TABLE:
        return [
            "displayedColumns: string[] = ['id', 'name', 'description'];",
            "columnNames: Record<string, string> = { id: 'ID', name: 'Name', description: 'Description' };",
            "dataSource = new MatTableDataSource<Record<string, unknown>>([]);",
            "@ViewChild(MatSort) sort!: MatSort;",
            "@ViewChild(MatPaginator) paginator!: MatPaginator;",
            "@Input() set data(rows: Record<string, unknown>[]) {",
            "  this.dataSource.data = rows;",
            "}",
        ]

    return [
        f"@Input() title = {_ts_str(component.name)};",
        "@Input() description = 'Custom component description';",
    ]


def _methods(component: ClassifiedComponent) -> List[str]:
    wt = component.widget_type
    props = component.properties

    if wt in FORM_CONTROLS:
        control = FORM_CONTROLS[wt]
        initial = "null" if wt == WidgetType.DATE_PICKER else "''"
        validators = "[Validators.required]" if props.get("required") else "[]"
        methods = [
            "constructor(private fb: FormBuilder) {}",
            "",
            "ngOnInit(): void {",
            f"  this.form = this.fb.group({{ {control}: [{initial}, {validators}] }});",
            "}",
            "",
        ]
        emitter = {
            WidgetType.INPUT: ("onInputChange(): void", "valueChange"),
            WidgetType.SELECT: ("onSelectionChange(value: string): void", "selectionChange"),
            WidgetType.DATE_PICKER: ("onDateChange(): void", "dateChange"),
        }[wt]
        value = "value" if wt == WidgetType.SELECT else f"this.form.get('{control}')?.value"
        methods += [f"{emitter[0]} {{", f"  this.{emitter[1]}.emit({value});", "}"]
        return methods

    if wt == WidgetType.BUTTON:
        return ["onClick(): void {", "  if (!this.disabled) {", "    this.buttonClick.emit();", "  }", "}"]
    if wt == WidgetType.CARD and props.get("actions"):
        return ["onAction(label: string): void {", "  this.action.emit(label);", "}"]
    if wt == WidgetType.CHECKBOX:
        return ["onCheckboxChange(checked: boolean): void {", "  this.checkedChange.emit(checked);", "}"]
    if wt == WidgetType.RADIO:
        return ["onSelectionChange(value: string): void {", "  this.selectionChange.emit(value);", "}"]
    if wt == WidgetType.TABS:
        return ["onTabChange(index: number): void {", "  this.tabChange.emit(index);", "}"]
    if wt == WidgetType.TABLE:
        return [
            "ngOnInit(): void {",
            "  if (this.dataSource.data.length === 0) {",
            "    this.dataSource.data = [",
            "      { id: 1, name: 'Item 1', description: 'Description 1' },",
            "      { id: 2, name: 'Item 2', description: 'Description 2' },",
            "    ];",
            "  }",
            "}",
            "",
            "ngAfterViewInit(): void {",
            "  this.dataSource.sort = this.sort;",
            "  this.dataSource.paginator = this.paginator;",
            "}",
            "",
            "applyFilter(value: string): void {",
            "  this.dataSource.filter = value.trim().toLowerCase();",
            "}",
        ]
    return []


# (@angular/core symbol, text that shows the class body uses it)
_CORE_MARKERS = (
    ("Input", "@Input("),
    ("Output", "@Output("),
    ("EventEmitter", "new EventEmitter"),
    ("OnInit", "ngOnInit("),
    ("AfterViewInit", "ngAfterViewInit("),
    ("ViewChild", "@ViewChild("),
)


def _core_symbols(body: str) -> List[str]:
    return ["Component"] + [symbol for symbol, marker in _CORE_MARKERS if marker in body]


def emit_logic(component: ClassifiedComponent, options: Optional[EmitOptions] = None) -> str:
    options = options or EmitOptions()
    selector = selector_for(component, options)
    base = selector[len("app-"):] if selector.startswith("app-") else selector
    wt = component.widget_type

    members = _members(component)
    methods = _methods(component)
    body_lines = [f"  {m}" if m else "" for m in members]
    if methods:
        body_lines.append("")
        body_lines.extend(f"  {m}" if m else "" for m in methods)
    body = "\n".join(body_lines)

    core = _core_symbols(body)
    extra: List[str] = []
    if wt in FORM_CONTROLS:
        extra.append("import { FormBuilder, FormGroup, Validators } from '@angular/forms';")
    if wt == WidgetType.TABLE:
        extra += [
            "import { MatTableDataSource } from '@angular/material/table';",
            "import { MatSort } from '@angular/material/sort';",
            "import { MatPaginator } from '@angular/material/paginator';",
        ]
    modules = module_imports(component)

    metadata = [
        f"  selector: '{selector}',",
        f"  templateUrl: './{base}.component.html',",
        f"  styleUrls: ['./{base}.component.scss'],",
    ]
    if options.standalone:
        metadata.append("  standalone: true,")
        metadata.append(f"  imports: [{', '.join(symbol for symbol, _ in modules)}],")

    implements = [s for s in ("OnInit", "AfterViewInit") if s in core]
    header = f"export class {class_name(component.name)}Component"
    if implements:
        header += f" implements {', '.join(implements)}"

    lines = _import_lines(core, modules if options.standalone else [], extra)
    lines += ["", "@Component({", *metadata, "})", f"{header} {{", body, "}", ""]
    return "\n".join(lines)


# =====================================================================
# Style (SCSS)
# =====================================================================

# Element selector the base styles are applied to, per widget
STYLE_SELECTORS: Dict[WidgetType, str] = {
    WidgetType.BUTTON: "button",
    WidgetType.INPUT: "mat-form-field",
    WidgetType.CARD: "mat-card",
    WidgetType.SELECT: "mat-form-field",
    WidgetType.CHECKBOX: "mat-checkbox",
    WidgetType.RADIO: "mat-radio-group",
    WidgetType.DATE_PICKER: "mat-form-field",
    WidgetType.TABS: "mat-tab-group",
    WidgetType.TABLE: ".table-container",
}

TYPE_STYLES: Dict[WidgetType, List[str]] = {
    WidgetType.BUTTON: ["font-weight: 500;", "letter-spacing: 0.5px;"],
    WidgetType.INPUT: ["width: 100%;"],
    WidgetType.CARD: ["overflow: hidden;"],
    WidgetType.TABLE: ["overflow: auto;"],
}

CUSTOM_STYLES = [
    "display: block;",
    "background-color: #f5f5f5;",
    "border: 1px solid #e0e0e0;",
    "border-radius: 4px;",
    "padding: 16px;",
]

THEME_VARIABLES = """\
:host {
  --primary-color: #3f51b5;
  --accent-color: #ff4081;
  --warn-color: #f44336;
  --background-color: #fafafa;
  --text-color: rgba(0, 0, 0, 0.87);
}
"""


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def css_dimension(value: float) -> str:
    """Fractions become percentages and very wide frames become 100%."""
    if value < 1:
        return f"{value * 100:g}%"
    if value > 600:
        return "100%"
    return f"{value:g}px"


def base_styles(styles: StyleBag) -> List[str]:
    rules: List[str] = []
    if styles.width:
        rules.append(f"width: {css_dimension(styles.width)};")
    if styles.height:
        rules.append(f"height: {css_dimension(styles.height)};")
    if styles.border_radius:
        rules.append(f"border-radius: {styles.border_radius:g}px;")
    if styles.padding is not None:
        p = styles.padding
        rules.append(f"padding: {p.top:g}px {p.right:g}px {p.bottom:g}px {p.left:g}px;")
    if styles.typography is not None:
        t = styles.typography
        if t.font_size:
            rules.append(f"font-size: {t.font_size:g}px;")
        if t.font_weight:
            rules.append(f"font-weight: {t.font_weight:g};")
        if t.line_height:
            rules.append(f"line-height: {t.line_height:g}px;")
        if t.letter_spacing:
            rules.append(f"letter-spacing: {t.letter_spacing:g}px;")
        if t.text_align:
            rules.append(f"text-align: {t.text_align.lower()};")
    if styles.background_color is not None:
        c = styles.background_color
        rules.append(f"background-color: {rgb_to_hex(c.r, c.g, c.b)};")
    if styles.border_color is not None:
        c = styles.border_color
        rules.append(f"border: 1px solid {rgb_to_hex(c.r, c.g, c.b)};")
    if styles.box_shadow is not None:
        s = styles.box_shadow
        c = s.color
        rules.append(
            f"box-shadow: {s.offset_x:g}px {s.offset_y:g}px {s.radius:g}px "
            f"rgba({c.r}, {c.g}, {c.b}, {c.a:g});"
        )
    return rules


def _block(selector: str, rules: List[str]) -> str:
    if not rules:
        return f"{selector} {{\n}}\n"
    body = "\n".join(f"  {r}" for r in rules)
    return f"{selector} {{\n{body}\n}}\n"


def emit_style(component: ClassifiedComponent, options: Optional[EmitOptions] = None) -> str:
    options = options or EmitOptions()
    wt = component.widget_type
    blocks: List[str] = []
    if options.theme == "custom":
        blocks.append(THEME_VARIABLES)

    selector = STYLE_SELECTORS.get(wt)
    if selector is None:
        blocks.append(_block(f".{kebab_name(component.name)}", base_styles(component.styles) + CUSTOM_STYLES))
    else:
        blocks.append(_block(selector, base_styles(component.styles) + TYPE_STYLES.get(wt, [])))

    if wt == WidgetType.CARD and component.properties.get("actions"):
        blocks.append(_block("mat-card-actions", ["padding: 8px;"]))
    if wt == WidgetType.TABLE:
        blocks.append(_block("table", ["width: 100%;"]))
    if options.theme == "dark":
        blocks.append(_block(":host", ["color-scheme: dark;"]))
    return "\n".join(blocks)


def emit(component: ClassifiedComponent, options: Optional[EmitOptions] = None) -> GeneratedCode:
    """Generate markup, logic and style for one classified component."""
    options = options or EmitOptions()
    if options.theme not in THEMES:
        raise ValueError(f"Unknown theme {options.theme!r}; expected one of {', '.join(THEMES)}")
    return GeneratedCode(
        markup=emit_markup(component),
        logic=emit_logic(component, options),
        style=emit_style(component, options),
    )

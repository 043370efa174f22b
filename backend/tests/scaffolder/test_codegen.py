"""Tests for scaffolder.codegen (Angular Material emitter and zip bundles)."""

import io
import zipfile

import pytest

from scaffolder.analysis import ClassifiedComponent, analyze_file, parse_design_file
from scaffolder.codegen import (
    EmitOptions,
    build_component_archive,
    build_project_archive,
    emit,
)
from scaffolder.codegen.angular_material import (
    class_name,
    css_dimension,
    kebab_name,
    module_imports,
    rgb_to_hex,
)
from scaffolder.codegen.archive import MATERIAL_THEME_SCSS, material_module_ts, unique_names
from scaffolder.integrations.sample_design import sample_design


def _component(widget_type, name="Widget", properties=None, styles=None, support_status="supported"):
    return ClassifiedComponent.model_validate({
        "sourceId": "1:1",
        "name": name,
        "widgetType": widget_type,
        "supportStatus": support_status,
        "properties": properties or {},
        "styles": styles or {},
    })


@pytest.fixture
def sample_components():
    return analyze_file(parse_design_file(sample_design())).components


def _zip_contents(data: bytes):
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return {name: zf.read(name).decode("utf-8") for name in zf.namelist()}


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


class TestNaming:

    @pytest.mark.parametrize("name,expected", [
        ("Primary Button", "primary-button"),
        ("Card / Elevated  v2", "card-elevated-v2"),
        ("  --  ", "component"),
    ])
    def test_kebab_name(self, name, expected):
        assert kebab_name(name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("primary button", "PrimaryButton"),
        ("DATE-picker", "DatePicker"),
        ("3 column table", "Figma3ColumnTable"),
        ("!!!", "Figma"),
    ])
    def test_class_name(self, name, expected):
        assert class_name(name) == expected

    def test_rgb_to_hex(self):
        assert rgb_to_hex(51, 102, 230) == "#3366e6"

    @pytest.mark.parametrize("value,expected", [
        (120, "120px"),
        (0.5, "50%"),
        (800, "100%"),
        (12.5, "12.5px"),
    ])
    def test_css_dimension(self, value, expected):
        assert css_dimension(value) == expected


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


class TestMarkup:

    def test_button_directive_per_variant(self):
        code = emit(_component("Button", properties={"variant": "stroked", "icon": True}))
        assert "mat-stroked-button" in code.markup
        assert "<mat-icon>" in code.markup
        assert "{{ text }}" in code.markup

    def test_icon_button_has_no_text(self):
        code = emit(_component("Button", properties={"variant": "icon", "icon": True}))
        assert "mat-icon-button" in code.markup
        assert "{{ text }}" not in code.markup

    def test_basic_button(self):
        code = emit(_component("Button", properties={"variant": "basic"}))
        assert "  mat-button\n" in code.markup

    def test_input_standard_renders_fill(self):
        code = emit(_component("Input", properties={
            "appearance": "standard", "label": "Email", "placeholder": "you@example.com", "required": True,
        }))
        assert 'appearance="fill"' in code.markup
        assert "<mat-label>Email</mat-label>" in code.markup
        assert 'placeholder="you@example.com"' in code.markup
        assert "required" in code.markup
        assert "<mat-error>" in code.markup

    def test_input_text_is_escaped(self):
        code = emit(_component("Input", properties={"label": "<b>Name</b>", "placeholder": 'say "hi"'}))
        assert "&lt;b&gt;Name&lt;/b&gt;" in code.markup
        assert "say &quot;hi&quot;" in code.markup

    def test_card_sections(self):
        code = emit(_component("Card", properties={"title": "T", "subtitle": "S", "actions": True}))
        assert "<mat-card-title>" in code.markup
        assert "<mat-card-subtitle>" in code.markup
        assert "<mat-card-actions" in code.markup

    def test_card_without_title_or_actions(self):
        code = emit(_component("Card", properties={"actions": False}))
        assert "<mat-card-header>" not in code.markup
        assert "<mat-card-actions" not in code.markup

    @pytest.mark.parametrize("widget_type,marker", [
        ("Select", "<mat-select"),
        ("Checkbox", "<mat-checkbox"),
        ("Radio", "<mat-radio-group"),
        ("DatePicker", "<mat-datepicker #picker>"),
        ("Tabs", "<mat-tab-group"),
        ("Table", "<table mat-table"),
    ])
    def test_widget_markup(self, widget_type, marker):
        assert marker in emit(_component(widget_type, support_status="partial")).markup

    def test_custom_markup(self):
        code = emit(_component("Custom", name="Custom Carousel", support_status="unsupported"))
        assert "<!-- Custom component: Custom Carousel -->" in code.markup
        assert 'class="custom-carousel"' in code.markup


# ---------------------------------------------------------------------------
# Logic
# ---------------------------------------------------------------------------


class TestLogic:

    def test_standalone_button(self):
        code = emit(_component("Button", name="Primary Button", properties={"color": "primary", "icon": True}))
        assert "import { Component, Input, Output, EventEmitter } from '@angular/core';" in code.logic
        assert "import { MatButtonModule } from '@angular/material/button';" in code.logic
        assert "import { MatIconModule } from '@angular/material/icon';" in code.logic
        assert "selector: 'app-primary-button'," in code.logic
        assert "templateUrl: './primary-button.component.html'," in code.logic
        assert "standalone: true," in code.logic
        assert "imports: [MatButtonModule, MatIconModule]," in code.logic
        assert "export class PrimaryButtonComponent {" in code.logic
        assert "@Input() text = 'Primary Button';" in code.logic

    def test_non_standalone_has_no_module_imports(self):
        code = emit(_component("Button"), EmitOptions(standalone=False))
        assert "standalone" not in code.logic
        assert "@angular/material" not in code.logic

    def test_custom_selector(self):
        code = emit(_component("Button", name="Go"), EmitOptions(selector="x-go"))
        assert "selector: 'x-go'," in code.logic
        assert "templateUrl: './x-go.component.html'," in code.logic

    def test_form_widget_implements_on_init(self):
        code = emit(_component("Input", name="Email", properties={"required": True}))
        assert "export class EmailComponent implements OnInit {" in code.logic
        assert "import { FormBuilder, FormGroup, Validators } from '@angular/forms';" in code.logic
        assert "this.form = this.fb.group({ input: ['', [Validators.required]] });" in code.logic

    def test_date_picker_control(self):
        code = emit(_component("DatePicker", name="Date", support_status="partial"))
        assert "date: [null, []]" in code.logic
        assert "MatNativeDateModule" in code.logic

    def test_select_options(self):
        code = emit(_component("Select", properties={"options": ["Red", "Blue"]}, support_status="partial"))
        assert "{ value: 'option1', label: 'Red' }, { value: 'option2', label: 'Blue' }" in code.logic

    def test_table_implements_both_hooks(self):
        code = emit(_component("Table", name="Users", support_status="partial"))
        assert "export class UsersComponent implements OnInit, AfterViewInit {" in code.logic
        assert "ViewChild" in code.logic

    def test_string_literals_are_escaped(self):
        code = emit(_component("Button", name="Don't click"))
        assert "@Input() text = 'Don\\'t click';" in code.logic

    def test_card_actions_pull_in_button_module(self):
        card = _component("Card", properties={"actions": True})
        assert ("MatButtonModule", "@angular/material/button") in module_imports(card)


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


class TestStyle:

    def test_button_styles(self, sample_components):
        code = emit(sample_components[0])
        assert code.style.startswith("button {\n")
        assert "  width: 120px;" in code.style
        assert "  height: 40px;" in code.style
        assert "  border-radius: 4px;" in code.style
        assert "  background-color: #3366e6;" in code.style
        assert "  box-shadow: 0px 0px 0px rgba(0, 0, 0, 0.25);" in code.style

    def test_input_border(self, sample_components):
        code = emit(sample_components[1])
        assert "  border: 1px solid #cccccc;" in code.style
        assert code.style.startswith("mat-form-field {")

    def test_custom_styles(self, sample_components):
        code = emit(sample_components[-1])
        assert code.style.startswith(".custom-carousel {")
        assert "  width: 400px;" in code.style
        assert "  background-color: #f5f5f5;" in code.style

    def test_custom_theme_variables(self):
        code = emit(_component("Button"), EmitOptions(theme="custom"))
        assert code.style.startswith(":host {\n  --primary-color")

    def test_dark_theme(self):
        code = emit(_component("Button"), EmitOptions(theme="dark"))
        assert "color-scheme: dark;" in code.style

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            emit(_component("Button"), EmitOptions(theme="neon"))

    def test_typography(self):
        code = emit(_component("Button", styles={"typography": {
            "fontSize": 14, "fontWeight": 500, "lineHeight": 20, "textAlign": "CENTER",
        }}))
        assert "  font-size: 14px;" in code.style
        assert "  line-height: 20px;" in code.style
        assert "  text-align: center;" in code.style


# ---------------------------------------------------------------------------
# Archives
# ---------------------------------------------------------------------------


class TestArchives:

    def test_component_archive(self, sample_components):
        button = sample_components[0]
        files = _zip_contents(build_component_archive(button, emit(button)))
        assert set(files) == {
            "primary-button.component.html",
            "primary-button.component.ts",
            "primary-button.component.scss",
        }
        assert "mat-raised-button" in files["primary-button.component.html"]

    def test_unique_names(self, sample_components):
        names = unique_names(sample_components)
        assert names[3] == "card-actions"
        assert names[7] == "input"
        assert len(set(names)) == len(names)

    def test_duplicate_names_are_suffixed(self):
        components = [_component("Button", name="Go"), _component("Button", name="go"), _component("Button", name="GO")]
        assert unique_names(components) == ["go", "go-2", "go-3"]

    def test_material_module_lists_used_modules_once(self, sample_components):
        ts = material_module_ts(sample_components)
        assert ts.count("import { MatFormFieldModule } from '@angular/material/form-field';") == 1
        assert "MatDatepickerModule," in ts
        assert "MatTableModule" not in ts
        assert "ReactiveFormsModule" not in ts
        assert "export class MaterialModule {}" in ts

    def test_project_archive(self, sample_components):
        entries = [(c, emit(c)) for c in sample_components]
        files = _zip_contents(build_project_archive(entries))
        assert "components/primary-button/primary-button.component.ts" in files
        assert "components/custom-carousel/custom-carousel.component.scss" in files
        assert "material.module.ts" in files
        assert files["assets/styles/material-theme.scss"] == MATERIAL_THEME_SCSS
        component_files = [n for n in files if n.startswith("components/")]
        assert len(component_files) == 3 * len(sample_components)

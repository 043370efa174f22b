"""Zip bundles of generated components for download."""

from __future__ import annotations

import io
import zipfile
from typing import Dict, Iterable, List, Sequence, Tuple

from scaffolder.analysis.models import ClassifiedComponent

from .angular_material import GeneratedCode, kebab_name, module_imports

MATERIAL_THEME_SCSS = """\
@use '@angular/material' as mat;

html {
  @include mat.theme((
    color: (
      primary: mat.$azure-palette,
      tertiary: mat.$rose-palette,
    ),
    typography: Roboto,
    density: 0,
  ));
}
"""


def _zip(files: Iterable[Tuple[str, str]]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        for name, content in files:
            zf.writestr(name, content)
    return buf.getvalue()


def unique_names(components: Sequence[ClassifiedComponent]) -> List[str]:
    """Kebab-case base names, suffixed -2, -3, ... where two components collide."""
    seen: Dict[str, int] = {}
    names = []
    for component in components:
        base = kebab_name(component.name)
        count = seen.get(base, 0) + 1
        seen[base] = count
        names.append(base if count == 1 else f"{base}-{count}")
    return names


def material_module_ts(components: Sequence[ClassifiedComponent]) -> str:
    """NgModule re-exporting every Angular Material module the components use."""
    symbols: Dict[str, str] = {}
    for component in components:
        for symbol, path in module_imports(component):
            if path.startswith("@angular/material"):
                symbols.setdefault(symbol, path)

    lines = ["import { NgModule } from '@angular/core';"]
    lines += [f"import {{ {symbol} }} from '{path}';" for symbol, path in symbols.items()]
    lines += ["", "@NgModule({", "  exports: ["]
    lines += [f"    {symbol}," for symbol in symbols]
    lines += ["  ],", "})", "export class MaterialModule {}", ""]
    return "\n".join(lines)


def build_component_archive(component: ClassifiedComponent, code: GeneratedCode) -> bytes:
    """Zip holding `<name>.component.{html,ts,scss}` for one component."""
    return _zip(code.files(kebab_name(component.name)).items())


def build_project_archive(entries: Sequence[Tuple[ClassifiedComponent, GeneratedCode]]) -> bytes:
    """Zip of every component under components/<name>/ plus shared Material files."""
    components = [component for component, _ in entries]
    files: List[Tuple[str, str]] = []
    for name, (_, code) in zip(unique_names(components), entries):
        for filename, content in code.files(name).items():
            files.append((f"components/{name}/{filename}", content))
    files.append(("material.module.ts", material_module_ts(components)))
    files.append(("assets/styles/material-theme.scss", MATERIAL_THEME_SCSS))
    return _zip(files)

"""Angular Material code emitters and download bundles."""

from .angular_material import EmitOptions, GeneratedCode, emit
from .archive import build_component_archive, build_project_archive

__all__ = [
    "EmitOptions",
    "GeneratedCode",
    "build_component_archive",
    "build_project_archive",
    "emit",
]

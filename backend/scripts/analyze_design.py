#!/usr/bin/env python3
"""Analyze a Figma JSON export and print the component breakdown.

Usage:
    python scripts/analyze_design.py design.json
    python scripts/analyze_design.py design.json --json
    python scripts/analyze_design.py design.json --emit out/ --theme dark
    python scripts/analyze_design.py --demo --zip components.zip
"""

import argparse
import json
import os
import sys

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from scaffolder.analysis import DesignValidationError, analyze_payload
from scaffolder.codegen import EmitOptions, build_project_archive, emit
from scaffolder.codegen.archive import unique_names
from scaffolder.integrations.sample_design import demo_design


def _load(args) -> dict:
    if args.demo:
        return demo_design()
    with open(args.design_file, encoding="utf-8") as f:
        return json.load(f)


def _print_summary(result) -> None:
    stats = result.stats
    print(f"=== {result.file_name} ({result.file_key}) ===")
    print(
        f"Components: {stats.total_components}  Frames: {stats.frames}  "
        f"supported={stats.supported} partial={stats.partial} unsupported={stats.unsupported}"
    )
    print(f"\n{'='*60}")
    for i, comp in enumerate(result.components):
        target = comp.mapped_target or "-"
        print(f"[{i+1}] {comp.name} ({comp.source_id})")
        print(f"    Type:   {comp.widget_type.value} -> {target} [{comp.support_status.value}]")
        if comp.properties:
            print(f"    Props:  {json.dumps(comp.properties)}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Classify Figma nodes as Angular Material widgets")
    parser.add_argument("design_file", nargs="?", help="Figma file JSON or a single node JSON")
    parser.add_argument("--demo", action="store_true", help="Use the built-in demo design")
    parser.add_argument("--json", action="store_true", help="Print the analysis result as JSON")
    parser.add_argument("--emit", metavar="DIR", help="Write <name>.component.{html,ts,scss} files to DIR")
    parser.add_argument("--zip", metavar="FILE", help="Write the project zip to FILE")
    parser.add_argument("--theme", default="light", choices=["light", "dark", "custom"])
    parser.add_argument("--no-standalone", action="store_true", help="Emit NgModule-declared components")
    args = parser.parse_args()

    if not args.demo and not args.design_file:
        parser.error("design_file is required unless --demo is given")

    try:
        result = analyze_payload(_load(args))
    except (OSError, ValueError) as e:
        # DesignValidationError and JSONDecodeError are ValueErrors
        kind = "Invalid design" if isinstance(e, DesignValidationError) else "Cannot read design"
        print(f"{kind}: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_wire(), indent=2))
    else:
        _print_summary(result)

    if not (args.emit or args.zip):
        return 0

    options = EmitOptions(standalone=not args.no_standalone, theme=args.theme)
    entries = [(comp, emit(comp, options)) for comp in result.components]

    if args.emit:
        for name, (_, code) in zip(unique_names(result.components), entries):
            target = os.path.join(args.emit, name)
            os.makedirs(target, exist_ok=True)
            for filename, content in code.files(name).items():
                with open(os.path.join(target, filename), "w", encoding="utf-8") as f:
                    f.write(content)
        print(f"\nWrote {len(entries)} components to {args.emit}")

    if args.zip:
        with open(args.zip, "wb") as f:
            f.write(build_project_archive(entries))
        print(f"\nWrote {args.zip}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

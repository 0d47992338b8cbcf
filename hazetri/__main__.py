"""
Command-line entry point for baking a polygon path into mesh buffers.

Usage:
    python -m hazetri path/to/shape.polypath --depth 0 --output shape.json
"""

import argparse
import json
import sys
from pathlib import Path

from hazetri import log
from hazetri.path_asset import PathPersistence
from hazetri.settings import SettingsManager


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Triangulate a polygon path and write vertex/index buffers"
    )
    parser.add_argument(
        "input",
        type=str,
        help="Path to .polypath file",
    )
    parser.add_argument(
        "--depth", "-z",
        type=float,
        default=None,
        help="Z coordinate of baked vertices (default: from settings, 0.0)",
    )
    parser.add_argument(
        "--counterclockwise", "-c",
        action="store_true",
        help="Wind triangles counterclockwise instead of clockwise",
    )
    parser.add_argument(
        "--settings", "-s",
        type=str,
        default=None,
        help="Settings JSON file",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print debug messages",
    )

    args = parser.parse_args(argv)

    manager = SettingsManager.instance()
    if args.settings is not None:
        manager.load(args.settings)
    if args.verbose:
        log.set_level("DEBUG")

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file does not exist: {input_path}", file=sys.stderr)
        return 1

    try:
        path_model = PathPersistence.load(input_path)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not path_model.triangulate():
        print(f"Error: Cannot triangulate {input_path}", file=sys.stderr)
        return 1

    clockwise = False if args.counterclockwise else None
    buffers = path_model.build_mesh(depth=args.depth, clockwise=clockwise)

    result = {
        "triangles": [[list(tri.a), list(tri.b), list(tri.c)] for tri in path_model.triangles],
        "vertices": [list(v) for v in buffers.vertices],
        "indices": list(buffers.indices),
    }
    text = json.dumps(result, indent=2)

    if args.output is None:
        print(text)
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote {buffers.vertex_count()} vertices, {buffers.triangle_count()} triangles to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

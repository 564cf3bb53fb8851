#!/usr/bin/env python3
"""Re-render a preview from content already saved under data/.

Usage:
    python generate.py                       # Render data/example.json
    python generate.py greenscape-lawn-care  # Render data/greenscape-lawn-care.json

No API call is made and the manifest is not touched.
"""

from __future__ import annotations

import argparse
import sys

from site_preview.errors import PreviewError
from site_preview.loaders import load_content
from site_preview.loaders.content import content_path
from site_preview.render import generate_preview
from site_preview.validation import validate_content


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a preview from saved content JSON")
    parser.add_argument("slug", nargs="?", default="example",
                        help="Slug of the data/{slug}.json file to render (default: example)")
    args = parser.parse_args(argv)

    json_path = content_path(args.slug)
    if not json_path.exists():
        print(f"Error: JSON file not found at {json_path}", file=sys.stderr)
        return 1

    print(f"  -> Reading {json_path}...")
    try:
        content = load_content(json_path)
        print(f"  OK Loaded data for: {content.get('businessName', '?')}")
        validate_content(content)
        output_path = generate_preview(content)
    except PreviewError as e:
        print(f"Error during generation: {e}", file=sys.stderr)
        return 1

    print("\nSuccess! Open the generated file in your browser to view.")
    print(f"Full path: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

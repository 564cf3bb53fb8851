#!/usr/bin/env python3
"""Generate a website preview from a free-text business description.

Usage:
    python ai_generate.py "I own a lawn care business"
    python ai_generate.py Roofing contractor specializing in residential repairs
    python ai_generate.py --mock "I run a small lawn care company"   # no API call

Configuration (.env or environment):
    ANTHROPIC_API_KEY   Anthropic API key (required unless MOCK_AI=true)
    ANTHROPIC_MODEL     Model to request (default claude-sonnet-4-20250514)
    MOCK_AI=true        Use the built-in mock response instead of the API
"""

from __future__ import annotations

import argparse
import sys

from site_preview.errors import PreviewError
from site_preview.pipeline import ai_generate, get_provider

USAGE_EXAMPLES = """Examples:
  python ai_generate.py "I own a lawn care business"
  python ai_generate.py "Roofing contractor specializing in residential repairs"

Configuration:
  - Set ANTHROPIC_API_KEY in .env file for real AI
  - Set MOCK_AI=true in .env to test without API costs
"""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a website preview from a business description",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("description", nargs="*",
                        help="Business description (words are joined with spaces)")
    parser.add_argument("--mock", action="store_true",
                        help="Use the mock provider regardless of MOCK_AI")
    args = parser.parse_args(argv)

    description = " ".join(args.description).strip()
    if not description:
        print("Error: No description provided\n", file=sys.stderr)
        parser.print_help()
        return 1

    provider = get_provider(mock=True if args.mock else None)
    try:
        ai_generate(description, provider=provider)
    except PreviewError as e:
        print(f"\nError during AI generation: {e}", file=sys.stderr)
        if e.hint:
            print(f"Tip: {e.hint}", file=sys.stderr)
        print("Failed to generate preview", file=sys.stderr)
        return 1

    print("\nDone! Open the generated HTML file in your browser to preview.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

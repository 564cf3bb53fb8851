#!/usr/bin/env python3
"""List manifest entries or change the status of one.

Usage:
    python manifest_status.py                               # List all entries
    python manifest_status.py --limit 10                    # Newest 10
    python manifest_status.py --id 3f9a0c1b2d4e --status sent
"""

from __future__ import annotations

import argparse
import sys

from site_preview.errors import PreviewError
from site_preview.manifest import ManifestLog


def format_entry(entry: dict) -> str:
    output = entry.get("output", {})
    return (
        f"  {entry.get('id', '?')}  {(entry.get('generatedAt') or '?')[:10]}  "
        f"{entry.get('status', '?'):<10}  {output.get('businessName', '?')} ({output.get('slug', '?')})"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect or update the generation manifest")
    parser.add_argument("--id", type=str, default="", help="Entry id to update")
    parser.add_argument("--status", type=str, default="", help="New status for --id")
    parser.add_argument("--limit", type=int, default=0, help="Only list the newest N entries")
    args = parser.parse_args(argv)

    manifest = ManifestLog()

    if args.id or args.status:
        if not (args.id and args.status):
            print("Error: --id and --status must be given together", file=sys.stderr)
            return 1
        try:
            entry = manifest.update_status(args.id, args.status)
        except PreviewError as e:
            print(f"Error updating manifest: {e}", file=sys.stderr)
            return 1
        if entry is None:
            print(f"Error: no manifest entry with id {args.id}", file=sys.stderr)
            return 1
        print(f"  OK {entry['id']} -> {entry['status']}")
        return 0

    entries = manifest.get_entries()
    if args.limit > 0:
        entries = entries[:args.limit]
    print(f"{len(entries)} entries in {manifest.path}")
    for entry in entries:
        print(format_entry(entry))
    return 0


if __name__ == "__main__":
    sys.exit(main())

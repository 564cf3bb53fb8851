"""Append-only, newest-first log of preview generations.

The whole manifest lives in one JSON array (generated/manifest.json). Every
change reads the file, edits the list in memory and rewrites the file.

There is no locking. Two processes writing at the same time can interleave
and the later write drops the earlier one's change. Entry ids are random and
not checked against existing ones.
"""

from __future__ import annotations

import json
import secrets
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from site_preview import config
from site_preview.loaders import write_text

STATUS_GENERATED = "generated"


def generate_id() -> str:
    """Return a 12-character hex id from 6 random bytes."""
    return secrets.token_hex(6)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ManifestLog:
    """File-backed repository over the manifest document."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path or config.MANIFEST_PATH)

    def read(self) -> list[dict]:
        """Return all entries. A missing or unreadable file counts as empty."""
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"  Warning: could not read manifest {self.path} ({e}), starting empty")
            return []
        if not isinstance(entries, list):
            print(f"  Warning: manifest {self.path} is not a list, starting empty")
            return []
        return entries

    def write(self, entries: list[dict]) -> None:
        write_text(self.path, json.dumps(entries, indent=2, ensure_ascii=False))

    def add_entry(
        self,
        *,
        description: Optional[str] = None,
        customer_name: Optional[str] = None,
        customer_email: Optional[str] = None,
        customer_phone: Optional[str] = None,
        business_name: Optional[str] = None,
        industry: Optional[str] = None,
        slug: Optional[str] = None,
        output_path: Optional[str] = None,
    ) -> dict:
        """Record a generation at the front of the manifest and return it."""
        entries = self.read()
        entry = {
            "id": generate_id(),
            "generatedAt": _now(),
            "input": {
                "description": description or None,
                "customerName": customer_name or None,
                "customerEmail": customer_email or None,
                "customerPhone": customer_phone or None,
            },
            "output": {
                "businessName": business_name,
                "industry": industry or config.DEFAULT_INDUSTRY,
                "slug": slug,
                "path": None if output_path is None else str(output_path),
            },
            "status": STATUS_GENERATED,
        }
        entries.insert(0, entry)
        self.write(entries)
        return entry

    def get_entries(self) -> list[dict]:
        return self.read()

    def update_status(self, entry_id: str, status: str) -> Optional[dict]:
        """Set status on the first entry with entry_id. None if there is none."""
        entries = self.read()
        for entry in entries:
            if entry.get("id") == entry_id:
                entry["status"] = status
                entry["updatedAt"] = _now()
                self.write(entries)
                return entry
        return None


__all__ = ["ManifestLog", "generate_id", "STATUS_GENERATED"]

"""Read and write structured content as JSON under data/."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from site_preview import config
from site_preview.errors import FilesystemError, ValidationError


def content_path(slug: str, data_dir: Optional[Path] = None) -> Path:
    """Return data/{slug}.json."""
    return Path(data_dir or config.DATA_DIR) / f"{slug}.json"


def write_text(path: Path, text: str) -> Path:
    """Write text to path, creating parent directories. Overwrites.

    Raises:
        FilesystemError: with the OS error message.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FilesystemError(str(e)) from e
    return path


def save_content(content: dict, slug: str, data_dir: Optional[Path] = None) -> Path:
    """Persist content verbatim as data/{slug}.json and return the path."""
    path = content_path(slug, data_dir)
    return write_text(path, json.dumps(content, indent=2, ensure_ascii=False))


def load_content(path: Path) -> dict:
    """Load a content JSON document.

    Raises:
        FilesystemError: the file cannot be read.
        ValidationError: the file is not a JSON object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = json.load(f)
    except OSError as e:
        raise FilesystemError(str(e)) from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Could not parse JSON from {path}: {e}") from e
    if not isinstance(content, dict):
        raise ValidationError(f"Expected a JSON object in {path}, got {type(content).__name__}")
    return content

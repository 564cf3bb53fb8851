"""Load the HTML preview template and fill its {{placeholders}}."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from site_preview import config
from site_preview.errors import FilesystemError


def load_template(path: Optional[Path] = None) -> str:
    """Return the template document as text."""
    path = path or config.TEMPLATE_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise FilesystemError(str(e)) from e


def fill_placeholders(template: str, fields: dict) -> tuple[str, int]:
    """Replace every {{key}} in template with fields[key].

    Values are inserted as-is, without HTML escaping. Placeholders with no
    matching key are left in place.

    Returns:
        (filled_template, number of distinct keys that were replaced)
    """
    replaced = 0
    for key, value in fields.items():
        placeholder = "{{" + key + "}}"
        if placeholder in template:
            template = template.replace(placeholder, "" if value is None else str(value))
            replaced += 1
    return template, replaced

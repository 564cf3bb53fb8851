"""File I/O: content JSON documents and the HTML preview template."""

from site_preview.loaders.content import load_content, save_content, write_text
from site_preview.loaders.templates import load_template, fill_placeholders

__all__ = [
    "load_content",
    "save_content",
    "write_text",
    "load_template",
    "fill_placeholders",
]

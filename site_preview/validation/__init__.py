"""Content validation: structural checks and summary reporting."""

from site_preview.validation.checks import validate_content, REQUIRED_FIELDS
from site_preview.validation.report import format_content_summary

__all__ = ["validate_content", "REQUIRED_FIELDS", "format_content_summary"]

"""Structural checks on generated content before it is saved or rendered."""

from site_preview.errors import ValidationError

REQUIRED_FIELDS = (
    "businessName",
    "headline",
    "services",
    "about",
    "cta",
    "footer",
)

# Nested sections the renderer reads keys from.
SECTION_FIELDS = ("about", "cta", "footer")


def find_missing_fields(content: dict) -> list[str]:
    """Return required top-level fields that are absent, null or empty."""
    return [field for field in REQUIRED_FIELDS if not content.get(field)]


def validate_content(content: dict) -> bool:
    """Check content has the minimum shape the renderer needs.

    Only shape is checked. Industry values, paragraph count and hint length
    are requested in the prompt but not enforced here.

    Raises:
        ValidationError: listing every missing required field, naming
            sections or service entries that are not objects, or an empty
            services / about.paragraphs list.
    """
    missing = find_missing_fields(content)
    if missing:
        raise ValidationError(
            f"AI response missing required fields: {', '.join(missing)}",
            missing=missing,
        )

    services = content["services"]
    if not isinstance(services, list) or len(services) == 0:
        raise ValidationError(
            "AI response must include at least one service", missing=["services"]
        )

    malformed = [field for field in SECTION_FIELDS if not isinstance(content[field], dict)]
    if malformed:
        raise ValidationError(
            f"AI response fields must be JSON objects: {', '.join(malformed)}",
            missing=malformed,
        )

    bad_services = [i for i, service in enumerate(services) if not isinstance(service, dict)]
    if bad_services:
        raise ValidationError(
            f"AI response services must be JSON objects (bad entries: {bad_services})",
            missing=[f"services[{i}]" for i in bad_services],
        )

    paragraphs = content["about"].get("paragraphs")
    if not isinstance(paragraphs, list) or len(paragraphs) == 0:
        raise ValidationError(
            "AI response must include about paragraphs", missing=["about.paragraphs"]
        )

    return True

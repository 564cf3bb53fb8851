"""Render structured content into the static HTML preview.

Nested content is flattened into single-level placeholder keys, which are
then substituted into the template. The flattened key set is everything a
template can rely on:

    businessName, tagline, headline, subheadline, description, industry,
    heroCTA, heroCTAHint, heroSecondary, servicesHeading, servicesSubheading,
    service_{i}_name, service_{i}_description, service_{i}_hint,
    about_heading, about_paragraph_{i}, about_hint,
    cta_heading, cta_subheading, cta_button, cta_hint,
    footer_description, footer_phone, footer_email, footer_hours,
    footer_serviceArea, footer_copyright
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from site_preview import config
from site_preview.loaders import fill_placeholders, load_template, write_text
from site_preview.slug import slugify

TOP_LEVEL_FIELDS = (
    "businessName",
    "tagline",
    "headline",
    "subheadline",
    "description",
    "industry",
    "heroCTA",
    "heroCTAHint",
    "heroSecondary",
    "servicesHeading",
    "servicesSubheading",
)
SERVICE_FIELDS = ("name", "description", "hint")
CTA_FIELDS = ("heading", "subheading", "button", "hint")
FOOTER_FIELDS = ("description", "phone", "email", "hours", "serviceArea", "copyright")


def industry_of(content: dict) -> str:
    return content.get("industry") or config.DEFAULT_INDUSTRY


def flatten_content(content: dict) -> dict[str, str]:
    """Expand nested content into {placeholder_key: text}."""
    flat = {field: content.get(field) for field in TOP_LEVEL_FIELDS}
    flat["industry"] = industry_of(content)

    for i, service in enumerate(content["services"]):
        for field in SERVICE_FIELDS:
            flat[f"service_{i}_{field}"] = service.get(field)

    about = content["about"]
    flat["about_heading"] = about.get("heading")
    for i, paragraph in enumerate(about["paragraphs"]):
        flat[f"about_paragraph_{i}"] = paragraph
    flat["about_hint"] = about.get("hint")

    cta = content["cta"]
    for field in CTA_FIELDS:
        flat[f"cta_{field}"] = cta.get(field)

    footer = content["footer"]
    for field in FOOTER_FIELDS:
        flat[f"footer_{field}"] = footer.get(field)

    return flat


def build_output_path(
    content: dict,
    generated_dir: Optional[Path] = None,
    today: Optional[date] = None,
) -> Path:
    """generated/{industry}/{YYYY-MM-DD}/{slug}/index.html"""
    today = today or date.today()
    slug = slugify(content["businessName"])
    base = Path(generated_dir or config.GENERATED_DIR)
    return base / industry_of(content) / today.isoformat() / slug / "index.html"


def generate_preview(
    content: dict,
    template_path: Optional[Path] = None,
    generated_dir: Optional[Path] = None,
    today: Optional[date] = None,
) -> Path:
    """Render content into the template and write it. Returns the absolute path.

    An existing file at the same path is overwritten.
    """
    print(f"  -> Rendering preview for {content['businessName']}...")
    template = load_template(template_path)

    flat = flatten_content(content)
    html, replaced = fill_placeholders(template, flat)
    print(f"  OK Flattened {len(flat)} values, replaced {replaced} placeholders")

    output_path = build_output_path(content, generated_dir, today).resolve()
    write_text(output_path, html)
    print(f"  OK Generated file: {output_path}")
    return output_path

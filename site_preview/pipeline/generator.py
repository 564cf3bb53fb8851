"""Orchestrate the full preview generation pipeline.

description -> Claude (or mock) -> validate -> data/{slug}.json
            -> generated/{industry}/{date}/{slug}/index.html -> manifest entry

Nothing is written until the content has passed validation, and the manifest
entry is only added after the HTML has been written.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from site_preview import config
from site_preview.loaders import save_content
from site_preview.manifest import ManifestLog
from site_preview.pipeline.prompts import build_system_prompt
from site_preview.pipeline.provider import Provider, get_provider, mock_provide
from site_preview.render import generate_preview, industry_of
from site_preview.slug import slugify
from site_preview.validation import format_content_summary, validate_content


def ai_generate(
    description: str,
    provider: Optional[Provider] = None,
    data_dir: Optional[Path] = None,
    generated_dir: Optional[Path] = None,
    template_path: Optional[Path] = None,
    manifest: Optional[ManifestLog] = None,
    today: Optional[date] = None,
) -> dict:
    """Generate a preview site for one business description.

    Args:
        description: Free-text description of the business.
        provider: Content provider; defaults to get_provider() (MOCK_AI).
        data_dir: Where content JSON goes (default data/).
        generated_dir: Root of rendered output (default generated/).
        template_path: HTML template (default templates/preview-template.html).
        manifest: Manifest log (default generated/manifest.json).
        today: Date used in the output path (default today).

    Returns:
        dict with slug, json_path, output_path, data and manifest_id.
    """
    provider = provider or get_provider()
    manifest = manifest or ManifestLog()
    mock = provider is mock_provide

    print(f"{'='*60}")
    print("AI-Powered Preview Generator")
    print(f"{'='*60}")
    print(f"Description: \"{description}\"")
    print(f"Mode: {'Mock AI' if mock else 'Real AI'}")
    if not mock:
        print(f"Model: {config.ANTHROPIC_MODEL}")
    print()

    # ── 1. Ask for content ──────────────────────────────────────────────
    system_prompt = build_system_prompt()
    content = provider(description, system_prompt)

    # ── 2. Validate ─────────────────────────────────────────────────────
    print("  -> Validating AI response...")
    validate_content(content)
    print("  OK Response validated")
    print(f"\n{format_content_summary(content)}\n")

    # ── 3. Save content JSON ────────────────────────────────────────────
    slug = slugify(content["businessName"])
    print(f"  -> Generated slug: {slug}")
    json_path = save_content(content, slug, data_dir)
    print(f"  OK Saved to {json_path}")

    # ── 4. Render HTML ──────────────────────────────────────────────────
    output_path = generate_preview(
        content,
        template_path=template_path,
        generated_dir=generated_dir,
        today=today,
    )

    # ── 5. Log to manifest ──────────────────────────────────────────────
    # Customer contact fields are filled in once an intake form exists.
    entry = manifest.add_entry(
        description=description,
        customer_name=None,
        customer_email=None,
        customer_phone=None,
        business_name=content["businessName"],
        industry=content.get("industry"),
        slug=slug,
        output_path=str(output_path),
    )
    print(f"  OK Logged to manifest (ID: {entry['id']})")

    print(f"\n{'='*60}")
    print("AI GENERATION COMPLETE")
    print(f"{'='*60}")
    print(f"Business: {content['businessName']}")
    print(f"Industry: {industry_of(content)}")
    print(f"JSON:     {json_path}")
    print(f"HTML:     {output_path}")
    print(f"{'='*60}")

    return {
        "slug": slug,
        "json_path": json_path,
        "output_path": output_path,
        "data": content,
        "manifest_id": entry["id"],
    }

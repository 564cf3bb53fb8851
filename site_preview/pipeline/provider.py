"""Content providers: turn a business description into structured content.

A provider is any callable ``provide(description, system_prompt) -> dict``.
Two ship here: ``mock_provide`` returns a fixed lawn care business for
offline runs, and ``anthropic_provide`` asks Claude. ``get_provider`` picks
one from config.
"""

from __future__ import annotations

import copy
import json
import re
import time
from typing import Callable, Optional

import anthropic

from site_preview import config
from site_preview.errors import ConfigurationError, ProviderError
from site_preview.pipeline.anthropic_retry import call_with_retry

Provider = Callable[[str, str], dict]

API_KEY_HINT = (
    "Copy .env.example to .env and add your Anthropic API key, "
    "or set MOCK_AI=true to test without API calls"
)

_FENCE_OPEN = re.compile(r"^```[\w-]*\s*\n?")
_FENCE_CLOSE = re.compile(r"\n?```\s*$")


# ── Mock provider ─────────────────────────────────────────────────────────

MOCK_CONTENT = {
    "businessName": "GreenScape Lawn Care",
    "tagline": "Professional Lawn Care Since 2010",
    "headline": "GreenScape Lawn Care",
    "subheadline": "Beautiful, Healthy Lawns for Your Home",
    "description": "From weekly mowing to seasonal treatments, we keep your lawn looking its best year-round with reliable service and professional results.",
    "industry": "landscaping",
    "heroCTA": "Get a Free Quote",
    "heroCTAHint": "This could open a simple quote form where customers enter their address, lawn size, and preferred services.",
    "heroSecondary": "View Services",
    "servicesHeading": "Our Services",
    "servicesSubheading": "Complete lawn care solutions for residential properties throughout the area.",
    "services": [
        {
            "name": "Weekly Mowing",
            "description": "Professional mowing, edging, and trimming to keep your lawn neat and healthy all season long.",
            "hint": "This could link to a detailed service page with pricing tiers, schedule options, and before/after photos.",
        },
        {
            "name": "Fertilization Programs",
            "description": "Custom fertilization schedules designed for your grass type and local climate conditions.",
            "hint": "This could open a seasonal program guide showing treatment schedules and expected results for each season.",
        },
        {
            "name": "Spring & Fall Cleanup",
            "description": "Thorough seasonal cleanups including leaf removal, bed prep, and debris clearing.",
            "hint": "This could display a gallery of cleanup projects with seasonal package details and add-on options.",
        },
        {
            "name": "Aeration & Seeding",
            "description": "Core aeration and overseeding services to improve soil health and fill in thin or bare spots.",
            "hint": "This could show timing recommendations, process videos, and results timeline with booking options.",
        },
    ],
    "about": {
        "heading": "Local Expertise. Reliable Service.",
        "paragraphs": [
            "GreenScape Lawn Care has been serving homeowners since 2010. Our team understands local soil conditions, grass types, and seasonal challenges to deliver results that last.",
            "We believe in straightforward pricing, dependable weekly service, and treating every lawn like it's our own. Whether you need basic mowing or a complete care program, we're here to help.",
            "All work is backed by our satisfaction guarantee. Licensed and insured for your peace of mind.",
        ],
        "hint": "This could expand into a full company page with team photos, service area map, certifications, and customer testimonials.",
    },
    "cta": {
        "heading": "Ready for a lawn you'll love?",
        "subheading": "Get a free quote and see how easy great lawn care can be.",
        "button": "Request Free Quote",
        "hint": "This could open a quote form with service selection, or trigger a phone call on mobile devices during business hours.",
    },
    "footer": {
        "description": "Licensed & Insured\nServing Your Local Area",
        "phone": "(555) 234-5678",
        "email": "info@greenscape-lawn.com",
        "hours": "Mon-Fri: 7am - 5pm\nSat: 8am - 2pm",
        "serviceArea": "Serving all of Metro County\nWithin 25 miles of downtown",
        "copyright": "2024 GreenScape Lawn Care. All rights reserved. License #LC-12345.",
    },
}


def mock_provide(
    description: str,
    system_prompt: str,
    delay: Optional[float] = None,
) -> dict:
    """Return the canonical mock content. The description is only logged."""
    if delay is None:
        delay = config.MOCK_DELAY
    print(f"  -> Using mock AI for: {description[:60]!r}")
    time.sleep(delay)
    print("  OK Mock response generated")
    return copy.deepcopy(MOCK_CONTENT)


# ── Anthropic provider ────────────────────────────────────────────────────


def check_api_key(api_key: Optional[str]) -> str:
    """Raise ConfigurationError unless api_key is set to a real value."""
    if not api_key or api_key == config.PLACEHOLDER_API_KEY:
        raise ConfigurationError(
            "Anthropic API key not configured. Please set ANTHROPIC_API_KEY in .env file",
            hint=API_KEY_HINT,
        )
    return api_key


def strip_code_fence(text: str) -> str:
    """Trim text and drop a surrounding ``` / ```json fence if present."""
    text = text.strip()
    if text.startswith("```"):
        text = _FENCE_OPEN.sub("", text)
        text = _FENCE_CLOSE.sub("", text)
    return text


def parse_content(text: str) -> dict:
    """Parse Claude's reply into a content dict."""
    cleaned = strip_code_fence(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ProviderError(f"Could not parse JSON from Claude response: {e}") from e
    if not isinstance(data, dict):
        raise ProviderError(
            f"Expected a JSON object from Claude, got {type(data).__name__}"
        )
    return data


def _response_text(message) -> str:
    for block in message.content or []:
        text = getattr(block, "text", None)
        if text:
            return text
    return ""


def request_content(
    client: anthropic.Anthropic,
    description: str,
    system_prompt: str,
    model: str,
) -> dict:
    """Make one Messages API call and parse the reply. No retries."""
    try:
        message = client.messages.create(
            model=model,
            max_tokens=config.MAX_TOKENS,
            system=system_prompt,
            messages=[{"role": "user", "content": description}],
        )
    except anthropic.APIStatusError as e:
        raise ProviderError(
            f"Anthropic API error ({e.status_code}): {e.message}",
            status_code=e.status_code,
        ) from e
    except anthropic.APIConnectionError as e:
        raise ProviderError(f"Could not reach Anthropic API: {e}") from e
    except anthropic.APIError as e:
        raise ProviderError(f"Anthropic API error: {e.message}") from e

    text = _response_text(message)
    if not text.strip():
        raise ProviderError("No content in Anthropic response")
    return parse_content(text)


def anthropic_provide(
    description: str,
    system_prompt: str,
    client: Optional[anthropic.Anthropic] = None,
    model: Optional[str] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> dict:
    """Ask Claude for structured content, retrying failed attempts.

    A missing or placeholder API key fails before any request is made.
    """
    model = model or config.ANTHROPIC_MODEL
    if client is None:
        api_key = check_api_key(config.ANTHROPIC_API_KEY)
        # The SDK retries on its own by default; call_with_retry owns the policy.
        client = anthropic.Anthropic(api_key=api_key, max_retries=0)

    print(f"  -> Calling Anthropic API ({model})...")
    start = time.time()
    content = call_with_retry(
        lambda: request_content(client, description, system_prompt, model),
        sleep=sleep,
    )
    print(f"  OK AI response received in {time.time() - start:.1f}s")
    return content


# ── Selection ─────────────────────────────────────────────────────────────


def get_provider(mock: Optional[bool] = None) -> Provider:
    """Return mock_provide or anthropic_provide. None means use config.MOCK_AI."""
    if mock is None:
        mock = config.MOCK_AI
    return mock_provide if mock else anthropic_provide

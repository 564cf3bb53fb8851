"""Build the system prompt for Claude website content generation."""

import json

from site_preview.config import INDUSTRIES


# ── Output skeleton ───────────────────────────────────────────────────────

# Empty-valued copy of the StructuredContent shape. Embedded verbatim in the
# system prompt so the model has an exact structure to imitate.
JSON_SCHEMA = {
    "businessName": "",
    "tagline": "",
    "headline": "",
    "subheadline": "",
    "description": "",
    "industry": "",
    "heroCTA": "",
    "heroCTAHint": "",
    "heroSecondary": "",
    "servicesHeading": "",
    "servicesSubheading": "",
    "services": [
        {
            "name": "",
            "description": "",
            "hint": "",
        }
    ],
    "about": {
        "heading": "",
        "paragraphs": ["", "", ""],
        "hint": "",
    },
    "cta": {
        "heading": "",
        "subheading": "",
        "button": "",
        "hint": "",
    },
    "footer": {
        "description": "",
        "phone": "",
        "email": "",
        "hours": "",
        "serviceArea": "",
        "copyright": "",
    },
}

INDUSTRY_DESCRIPTIONS = {
    "plumbing": "for plumbing, pipe repair, drain services",
    "electrical": "for electricians, wiring, electrical services",
    "landscaping": "for lawn care, landscaping, gardening",
    "roofing": "for roofing, roof repair, gutter services",
    "hvac": "for heating, cooling, air conditioning, HVAC",
    "cleaning": "for cleaning services, janitorial, maid services",
    "painting": "for painting, interior/exterior painting",
    "general": "for general contractors or businesses that don't fit the above categories",
}


# ── System prompt ─────────────────────────────────────────────────────────


def _industry_lines() -> str:
    return "\n".join(
        f'  * "{industry}" - {INDUSTRY_DESCRIPTIONS[industry]}' for industry in INDUSTRIES
    )


def build_system_prompt() -> str:
    """Return the system-level instructions for Claude."""
    schema = json.dumps(JSON_SCHEMA, indent=2)
    return f"""You are a professional website content generator. Your task is to create website content for a local business based on the user's description.

INSTRUCTIONS:
1. Analyze the user's description and infer the business type, services, and target audience
2. Detect the industry type from the user's description and include it in the response
3. Generate appropriate content for each section of the website
4. Keep text SHORT, SIMPLE, and CLIENT-FRIENDLY (avoid jargon)
5. Use the businessName to create a professional, memorable company name if not provided
6. Generate 3-4 relevant services with clear, benefit-focused descriptions
7. Write helpful hotspot hint explanations that describe what interactive elements could do
8. Create realistic contact information (use placeholder phone/email if not provided)
9. Keep all text professional but conversational - like a real local business would write

INDUSTRY DETECTION:
- Determine the industry type from the user's business description
- The "industry" field must be one of these values:
{_industry_lines()}
- If the business doesn't clearly fit one of the specific categories, use "general"

HOTSPOT HINTS GUIDELINES:
- Explain what clicking/interacting would do (e.g., "This could open a quote form", "This could link to a gallery")
- Keep hints under 100 characters
- Be specific and actionable

CONTENT GUIDELINES:
- Headline: The business name or main value proposition
- Subheadline: A clear, benefit-focused statement (8-12 words)
- Description: 1-2 sentences explaining what they do and their unique value
- Services: 3-4 core offerings, each with name and 1-2 sentence description
- About: 3 paragraphs - company story, values/approach, credentials/guarantee
- CTA: Action-oriented heading and clear button text
- Footer: Realistic business hours, service area description

OUTPUT FORMAT:
Return ONLY valid JSON matching this exact structure. NO additional text, explanations, or markdown.

{schema}

CRITICAL: Your response must be ONLY the JSON object. Do not include any text before or after the JSON. Do not wrap it in markdown code blocks. Just the raw JSON."""

"""Human-readable summary of validated content."""


def format_content_summary(content: dict) -> str:
    """Format the key facts of a content dict as a short CLI block."""
    lines = [
        "Content Summary:",
        f"  Business: {content['businessName']}",
        f"  Industry: {content.get('industry') or 'general'}",
        f"  Services: {len(content['services'])} items",
        f"  About:    {len(content['about']['paragraphs'])} paragraphs",
        f"  CTA:      \"{content['cta'].get('button', '')}\"",
    ]
    return "\n".join(lines)

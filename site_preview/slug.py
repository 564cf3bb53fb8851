"""Turn a business name into a URL-safe slug."""

import re


def slugify(text: str) -> str:
    """Lower-case, hyphenate whitespace runs, drop anything outside [a-z0-9-].

    Example: "Joe's Plumbing & Co." -> "joes-plumbing-co"

    Slugs are not unique. Two businesses whose names slugify the same share
    data/ and generated/ paths, and the later run overwrites the earlier one.
    """
    slug = text.lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    # "a & b" leaves "a--b" once the ampersand is gone
    slug = re.sub(r"-{2,}", "-", slug)
    return slug

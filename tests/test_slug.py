import re

import pytest

from site_preview.slug import slugify

SLUG_RE = re.compile(r"^[a-z0-9-]*$")


def test_slugify_drops_punctuation_and_collapses_spaces():
    assert slugify("Joe's Plumbing & Co.") == "joes-plumbing-co"


def test_slugify_mock_business_name():
    assert slugify("GreenScape Lawn Care") == "greenscape-lawn-care"


def test_slugify_whitespace_runs_become_one_hyphen():
    assert slugify("Bright \t Spark\n\nElectric") == "bright-spark-electric"


@pytest.mark.parametrize(
    "text",
    ["", "   ", "Café Ünïcode", "A/B Testing!", "100% Clean", "--Already-Slug--", "日本語"],
)
def test_slugify_output_is_url_safe(text):
    assert SLUG_RE.match(slugify(text))


def test_slugify_is_not_unique():
    # Different names can collide; later generations overwrite earlier ones.
    assert slugify("Acme Roofing!") == slugify("acme   roofing")

from datetime import date

from site_preview import config
from site_preview.render import build_output_path, flatten_content, generate_preview


def _write_template(tmp_path, text):
    path = tmp_path / "template.html"
    path.write_text(text, encoding="utf-8")
    return path


def test_flatten_keys(content):
    flat = flatten_content(content)

    assert flat["businessName"] == "GreenScape Lawn Care"
    assert flat["service_0_name"] == "Weekly Mowing"
    assert flat["service_3_hint"].startswith("This could show timing")
    assert flat["about_paragraph_1"].startswith("We believe")
    assert flat["about_heading"] == "Local Expertise. Reliable Service."
    assert flat["cta_button"] == "Request Free Quote"
    assert flat["footer_serviceArea"].startswith("Serving all of Metro County")
    assert "service_4_name" not in flat
    assert "about_paragraph_3" not in flat


def test_flatten_defaults_industry(content):
    del content["industry"]

    assert flatten_content(content)["industry"] == "general"


def test_replaces_every_occurrence_and_keeps_unknown_placeholders(tmp_path, content):
    content["businessName"] = "Acme"
    template = _write_template(
        tmp_path, "<h1>{{businessName}}</h1>{{unknownField}}<p>{{businessName}}</p>"
    )

    output = generate_preview(
        content, template_path=template, generated_dir=tmp_path / "generated"
    )

    html = output.read_text(encoding="utf-8")
    assert html == "<h1>Acme</h1>{{unknownField}}<p>Acme</p>"


def test_values_are_not_html_escaped(tmp_path, content):
    content["tagline"] = "<em>Fast & Friendly</em>"
    template = _write_template(tmp_path, "{{tagline}}")

    output = generate_preview(content, template_path=template, generated_dir=tmp_path)

    assert output.read_text(encoding="utf-8") == "<em>Fast & Friendly</em>"


def test_output_path_layout(tmp_path, content):
    template = _write_template(tmp_path, "x")

    output = generate_preview(
        content,
        template_path=template,
        generated_dir=tmp_path / "generated",
        today=date(2026, 3, 7),
    )

    expected = tmp_path / "generated" / "landscaping" / "2026-03-07" / "greenscape-lawn-care" / "index.html"
    assert output == expected.resolve()
    assert output.is_absolute()
    assert output.exists()


def test_output_path_defaults_to_general(tmp_path, content):
    content["industry"] = ""

    path = build_output_path(content, tmp_path, date(2026, 1, 2))

    assert path.parts[-4:] == ("general", "2026-01-02", "greenscape-lawn-care", "index.html")


def test_existing_output_is_overwritten(tmp_path, content):
    template = _write_template(tmp_path, "{{headline}}")
    first = generate_preview(content, template_path=template, generated_dir=tmp_path)

    content["headline"] = "New Headline"
    second = generate_preview(content, template_path=template, generated_dir=tmp_path)

    assert first == second
    assert second.read_text(encoding="utf-8") == "New Headline"


def test_shipped_template_fills_all_mock_placeholders(tmp_path, content):
    output = generate_preview(
        content, template_path=config.TEMPLATE_PATH, generated_dir=tmp_path
    )

    html = output.read_text(encoding="utf-8")
    assert "{{" not in html
    assert "GreenScape Lawn Care" in html

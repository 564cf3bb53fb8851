import json
import re

from site_preview.manifest import ManifestLog, generate_id


def test_generate_id_is_12_hex_chars():
    assert re.fullmatch(r"[0-9a-f]{12}", generate_id())


def test_add_entry_on_missing_file(tmp_path):
    manifest = ManifestLog(tmp_path / "generated" / "manifest.json")

    entry = manifest.add_entry(
        description="I run a small lawn care company",
        business_name="GreenScape Lawn Care",
        industry="landscaping",
        slug="greenscape-lawn-care",
        output_path="/tmp/index.html",
    )

    entries = manifest.get_entries()
    assert entries == [entry]
    assert entry["status"] == "generated"
    assert entry["input"] == {
        "description": "I run a small lawn care company",
        "customerName": None,
        "customerEmail": None,
        "customerPhone": None,
    }
    assert entry["output"] == {
        "businessName": "GreenScape Lawn Care",
        "industry": "landscaping",
        "slug": "greenscape-lawn-care",
        "path": "/tmp/index.html",
    }
    assert "updatedAt" not in entry


def test_newest_entry_first(tmp_path):
    manifest = ManifestLog(tmp_path / "manifest.json")

    first = manifest.add_entry(description="first")
    second = manifest.add_entry(description="second")

    entries = manifest.get_entries()
    assert len(entries) == 2
    assert entries[0]["id"] == second["id"]
    assert entries[1]["id"] == first["id"]


def test_industry_defaults_to_general(tmp_path):
    manifest = ManifestLog(tmp_path / "manifest.json")

    assert manifest.add_entry(slug="x")["output"]["industry"] == "general"


def test_corrupt_manifest_treated_as_empty(tmp_path):
    path = tmp_path / "manifest.json"
    path.write_text("{not json", encoding="utf-8")
    manifest = ManifestLog(path)

    manifest.add_entry(description="fresh")

    assert len(json.loads(path.read_text(encoding="utf-8"))) == 1


def test_update_status(tmp_path):
    manifest = ManifestLog(tmp_path / "manifest.json")
    older = manifest.add_entry(description="older")
    manifest.add_entry(description="newer")

    updated = manifest.update_status(older["id"], "sent")

    assert updated["status"] == "sent"
    assert "updatedAt" in updated
    stored = {e["id"]: e for e in manifest.get_entries()}
    assert stored[older["id"]]["status"] == "sent"
    assert len(stored) == 2


def test_update_status_unknown_id_leaves_file_unchanged(tmp_path):
    path = tmp_path / "manifest.json"
    manifest = ManifestLog(path)
    manifest.add_entry(description="only")
    before = path.read_bytes()

    assert manifest.update_status("000000000000", "sent") is None
    assert path.read_bytes() == before

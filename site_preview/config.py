"""Central configuration for the preview generation pipeline."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"
GENERATED_DIR = ROOT_DIR / "generated"
MANIFEST_PATH = GENERATED_DIR / "manifest.json"
TEMPLATES_DIR = ROOT_DIR / "templates"
TEMPLATE_PATH = TEMPLATES_DIR / "preview-template.html"

# ── API Keys ───────────────────────────────────────────────────────────────
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
PLACEHOLDER_API_KEY = "your-api-key-here"  # value shipped in .env.example

# ── Claude settings ────────────────────────────────────────────────────────
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
MAX_TOKENS = 2000

# ── Generation mode ────────────────────────────────────────────────────────
MOCK_AI = os.getenv("MOCK_AI", "").lower() == "true"
MOCK_DELAY = 0.5  # seconds, simulated latency of the mock provider

# ── Retry settings ─────────────────────────────────────────────────────────
MAX_ATTEMPTS = 2  # total attempts, including the first
BASE_DELAY = 1.0  # seconds; wait = attempt * BASE_DELAY

# ── Industry classification ────────────────────────────────────────────────
# Values the model may return in "industry". Also the first path segment
# under generated/.
INDUSTRIES = (
    "plumbing",
    "electrical",
    "landscaping",
    "roofing",
    "hvac",
    "cleaning",
    "painting",
    "general",
)
DEFAULT_INDUSTRY = "general"

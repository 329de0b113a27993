"""Jinja2 environment for the web UI (layout shell, analyzer page, result partials)."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

ROOT_DIR = Path(__file__).resolve().parent.parent.parent
TEMPLATES_DIR = ROOT_DIR / "templates"
STATIC_DIR = ROOT_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

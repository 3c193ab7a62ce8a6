"""api/templating.py — Shared Jinja2 environment for server-rendered pages."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from core.config import settings
from schemas.event import format_form_datetime

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["form_datetime"] = format_form_datetime
templates.env.globals["app_name"] = settings.app_name

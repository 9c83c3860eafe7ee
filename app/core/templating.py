"""HTML page rendering with Jinja2 templates from app/templates."""

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

import jinja2
from fastapi.responses import HTMLResponse

if TYPE_CHECKING:
    from app.core.config import Settings

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


@lru_cache
def get_template_env() -> jinja2.Environment:
    """Return the shared Jinja2 environment (autoescaping on for HTML)."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
        autoescape=jinja2.select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_page(
    view: str,
    context: dict[str, Any],
    settings: "Settings",
    status_code: int = 200,
) -> HTMLResponse:
    """Render a named view with the interface defaults merged under the given context."""
    page_context: dict[str, Any] = {
        "iface_title": settings.IFACE_TITLE,
        "base_url": settings.BASE_URL_PREFIX,
        "error": None,
        "notice": None,
    }
    page_context.update(context)
    body = get_template_env().get_template(view).render(**page_context)
    return HTMLResponse(content=body, status_code=status_code)

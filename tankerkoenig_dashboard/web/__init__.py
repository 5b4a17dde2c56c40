"""
Web presentation package.

Serves the single self-refreshing price page and the health probes:
- GET /            HTML page rendered from the PriceStore
- GET /health      liveness probe
- GET /kaithhealth liveness probe polled by the hosting platform at startup
"""

from __future__ import annotations

import jinja2
from aiohttp import web

from tankerkoenig_dashboard.const import DOMAIN

from .keys import DATA_KEY, TEMPLATES_KEY
from .views import dashboard, health, page_context


def create_template_environment() -> jinja2.Environment:
    """Load the HTML templates shipped with the package."""
    return jinja2.Environment(
        loader=jinja2.PackageLoader(DOMAIN, "templates"),
        autoescape=jinja2.select_autoescape(),
    )


def setup_routes(app: web.Application) -> None:
    """Register the page and health routes."""
    app[TEMPLATES_KEY] = create_template_environment()
    app.router.add_get("/", dashboard, name="dashboard")
    app.router.add_get("/health", health, name="health")
    app.router.add_get("/kaithhealth", health, name="kaithhealth")


__all__ = [
    "DATA_KEY",
    "TEMPLATES_KEY",
    "create_template_environment",
    "dashboard",
    "health",
    "page_context",
    "setup_routes",
]

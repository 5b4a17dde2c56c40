"""Typed application keys for the aiohttp app."""

from __future__ import annotations

import jinja2
from aiohttp import web

from tankerkoenig_dashboard.data import TankerkoenigDashboardData

DATA_KEY = web.AppKey("dashboard_data", TankerkoenigDashboardData)
TEMPLATES_KEY = web.AppKey("templates", jinja2.Environment)

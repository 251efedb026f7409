"""Shared helpers for rendering tabbed screens."""
from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse

from hr_records.core.config import get_settings
from hr_records.core.paths import with_root_path
from hr_records.core.templates import templates


def render_screen(
    request: Request,
    template_name: str,
    *,
    active_tab: str,
    page_title: str,
    status_code: int = 200,
    **context: Any,
) -> HTMLResponse:
    """Render ``template_name`` inside the tabbed application shell."""

    settings = get_settings()
    payload: dict[str, Any] = {
        "app_title": settings.app_title,
        "page_title": f"{page_title} • {settings.app_title}",
        "active_tab": active_tab,
        "root": with_root_path(request, ""),
        **context,
    }
    return templates.TemplateResponse(
        request,
        template_name,
        payload,
        status_code=status_code,
    )

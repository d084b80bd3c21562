"""
This module renders page views through the widget's Jinja2 templates.
"""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader

from weather_widget.views.page import PageView

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "page.html.j2"
ELEMENTS_TEMPLATE = "elements.html.j2"

environment = Environment(loader=FileSystemLoader(TEMPLATES_DIR), autoescape=True)
templates = Jinja2Templates(env=environment)


def page_response(
    request: Request, view: PageView, title: str, status_code: int = 200
) -> HTMLResponse:
    """
    Render the page shell around the view's content.

    Args:
        request: Incoming request, required by the template response
        view: Page whose elements fill the content area
        title: Document title
        status_code: HTTP status of the response

    Returns:
        HTMLResponse: Rendered page
    """
    return templates.TemplateResponse(
        request,
        PAGE_TEMPLATE,
        {"view": view, "title": title},
        status_code=status_code,
    )

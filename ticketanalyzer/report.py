"""Rendering of a ``RouteReport`` as console text or as a standalone HTML page."""
from functools import lru_cache
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import RouteReport

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


def format_hours(minutes: int) -> str:
    """270 -> '4:30', -90 -> '-1:30'."""
    sign = '-' if minutes < 0 else ''
    hours, rest = divmod(abs(minutes), 60)
    return f"{sign}{hours}:{rest:02d}"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html.j2']),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters['hours'] = format_hours
    return env


def render_text(report: RouteReport) -> str:
    return _environment().get_template('report.txt.j2').render(report=report)


def render_html(report: RouteReport) -> str:
    rendered = _environment().get_template('report.html.j2').render(report=report)
    soup = BeautifulSoup(rendered, 'lxml')
    return soup.prettify()

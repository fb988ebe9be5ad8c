"""Wrap rendered components in a minimal HTML5 document."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .component import Component

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "page.jinja"


def page_env() -> Environment:
    """Create the Jinja environment used for the page shell."""

    return Environment(
        loader=FileSystemLoader([TEMPLATES_DIR]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_page(fragments: Iterable[Component | str], title: str = "", lang: str = "en") -> str:
    """Render ``fragments`` inside ``<body>``.

    Components are rendered with :meth:`Component.render`. Strings are taken
    as already-rendered markup and inserted verbatim; title and lang are
    escaped by the template.
    """

    markup = [
        Markup(fragment.render() if isinstance(fragment, Component) else fragment)
        for fragment in fragments
    ]
    template = page_env().get_template(PAGE_TEMPLATE)
    return template.render(fragments=markup, title=title, lang=lang)


__all__ = ["PAGE_TEMPLATE", "TEMPLATES_DIR", "page_env", "render_page"]

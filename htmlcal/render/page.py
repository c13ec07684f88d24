# htmlcal/render/page.py
from __future__ import annotations

from html import escape

from .html_shell import HTML_SHELL
from .inline_css import CSS_BLOCK

_MARKERS = ("__LANG__", "__TITLE__", "__CSS_BLOCK__", "__BODY_MARKUP__")


def build_page(fragment: str, *, title: str = "Week calendar", lang: str = "en") -> str:
    # Hardening:
    #   - Shell must contain every marker exactly once.
    #   - Markers are substituted once, in order, so event text that happens
    #     to contain a marker string is never expanded.
    if not isinstance(fragment, str):
        raise TypeError(f"fragment must be str, got {type(fragment).__name__}")

    for marker in _MARKERS:
        n = HTML_SHELL.count(marker)
        if n != 1:
            raise RuntimeError(f"HTML_SHELL must contain {marker} exactly once (found {n})")

    values = {
        "__LANG__": escape(lang.replace("_", "-"), quote=True),
        "__TITLE__": escape(title),
        "__CSS_BLOCK__": CSS_BLOCK,
        "__BODY_MARKUP__": fragment,
    }
    out = []
    rest = HTML_SHELL
    for marker in _MARKERS:
        head, rest = rest.split(marker, 1)
        out.append(head)
        out.append(values[marker])
    out.append(rest)
    return "".join(out)

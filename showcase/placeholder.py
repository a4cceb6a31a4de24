# showcase/placeholder.py
from urllib.parse import quote

from .models import DEFAULT_TITLE

_SVG_TEMPLATE = (
    "<svg xmlns='http://www.w3.org/2000/svg' width='800' height='500'>"
    "<defs><linearGradient id='g' x1='0' x2='1'><stop offset='0%' stop-color='#1fa2ff'/>"
    "<stop offset='50%' stop-color='#12d8fa'/><stop offset='100%' stop-color='#a6ffcb'/></linearGradient></defs>"
    "<rect width='100%' height='100%' fill='#e9eef4'/>"
    "<rect x='20' y='20' width='760' height='460' rx='20' fill='url(#g)' opacity='.08'/>"
    "<text x='50%' y='50%' fill='#0f1222' opacity='.65' text-anchor='middle' dominant-baseline='middle' "
    "font-family='Poppins' font-size='28'>{title}</text></svg>"
)


def _escape_svg_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def placeholder_svg(title: str = DEFAULT_TITLE) -> str:
    """Gradient placeholder card image labelled with `title`, as a data: URI."""
    svg = _SVG_TEMPLATE.format(title=_escape_svg_text(title or DEFAULT_TITLE))
    # quote ' as well so the URI can sit inside a single-quoted JS string
    return "data:image/svg+xml," + quote(svg, safe="-_.!~*()")

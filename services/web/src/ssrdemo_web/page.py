"""HTML document shell for server-rendered markup."""

from __future__ import annotations

from jinja2 import Environment, select_autoescape
from markupsafe import Markup

DEFAULT_TITLE = "React Server Side App"

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
    <head>
        <title>{{ title }}</title>
    </head>
    <body>
        <div id="react-container">{{ markup }}</div>
    </body>
</html>
"""

_env = Environment(autoescape=select_autoescape(default_for_string=True))
_template = _env.from_string(PAGE_TEMPLATE)


def render_page(markup: str, *, title: str = DEFAULT_TITLE) -> str:
    """Embed already-rendered ``markup`` in the page document."""
    return _template.render(title=title, markup=Markup(markup))

"""HTML rendering for the login page and login results."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from formgate.models.auth import LoginOutcome

_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

# Result templates only ever receive the outcome, never submitted values.
_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_login_result(outcome: LoginOutcome) -> str:
    """Render the HTML fragment reporting a login outcome."""
    template = _env.get_template("login_result.html")
    return template.render(outcome=outcome.value, message=outcome.message)


def render_login_form(action: str = "/login") -> str:
    """Render the login form page posting to ``action``."""
    return _env.get_template("login_form.html").render(action=action)

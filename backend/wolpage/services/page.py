"""HTML rendering of the target table."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from wolpage.services.target_list import TargetRecord

_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_page(
    *,
    title: str,
    targets: list[TargetRecord],
    statuses: list[str] | None = None,
    error: str | None = None,
) -> str:
    """Render the page. ``statuses`` lines up with ``targets`` by position."""
    statuses = list(statuses or [])
    statuses += [""] * (len(targets) - len(statuses))

    rows = [
        {"no": i, "target": t, "status": statuses[i - 1]}
        for i, t in enumerate(targets, start=1)
    ]
    template = _get_env().get_template("index.html")
    return template.render(title=title, rows=rows, error=error)

"""Export: article html, sidecar JSON, and the route manifest"""

import json
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mdsite.core.models import Page, RouteParams


MANIFEST_FILE = "routes.json"
TEMPLATE_DIR = Path(__file__).parent / "templates"
ARTICLE_TEMPLATE = "article.html"

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def page_dir(output_dir: Path, route_path: str) -> Path:
    """Directory for a route: output_dir/<route segments>; '/' maps to output_dir."""
    segments = [s for s in route_path.split("/") if s]
    return output_dir.joinpath(*segments)


def build_html(page: Page) -> str:
    """Wrap a page in the generic article template: heading, description, rule, body, entries."""
    return env.get_template(ARTICLE_TEMPLATE).render(page=page)


def build_sidecar(page: Page) -> dict:
    """Page metadata for the presentation layer; the body html lives in index.html."""
    return {
        "path": page.path,
        "metadata": page.metadata,
        "date": page.date.isoformat() if page.date else None,
        "reading_time": page.reading_time.model_dump() if page.reading_time else None,
        "hash": page.hash,
        "entries": [e.model_dump(mode="json") for e in page.entries],
    }


def write_page(page: Page, output_dir: Path) -> tuple[Path, Path]:
    """Write index.html + index.json for a page. Returns (html_path, json_path)."""
    dest_dir = page_dir(output_dir, page.path)
    dest_dir.mkdir(parents=True, exist_ok=True)
    html_path = dest_dir / "index.html"
    json_path = dest_dir / "index.json"
    html_path.write_text(build_html(page), encoding="utf-8")
    json_path.write_text(json.dumps(build_sidecar(page), indent=2, ensure_ascii=False), encoding="utf-8")
    return html_path, json_path


def write_manifest(routes: list[RouteParams], output_dir: Path) -> Path:
    """Write every enumerated route (collection, params, path) to routes.json."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / MANIFEST_FILE
    path.write_text(
        json.dumps([r.model_dump(mode="json") for r in routes], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path

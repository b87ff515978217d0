"""Build orchestration: load -> route -> render -> write"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from mdsite.config import Settings
from mdsite.core.errors import NotFoundError
from mdsite.core.export import write_manifest, write_page
from mdsite.core.models import Page, RouteParams
from mdsite.core.render import render_listing, render_route
from mdsite.core.routes import LISTING_ROUTES, enumerate_routes
from mdsite.core.store import ContentSnapshot, load


logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Summary of one build: the snapshot, its routes, files written, and routes with no document."""
    snapshot: ContentSnapshot
    routes:   list[RouteParams]
    written:  list[tuple[str, Path]] = field(default_factory=list)
    missing:  list[str] = field(default_factory=list)


def run_load(settings: Settings) -> ContentSnapshot:
    """Load the content tree named by settings."""
    return load(
        Path(settings.content_dir),
        words_per_minute=settings.words_per_minute,
        parser_config=settings.parser_config,
        workers=settings.workers,
    )


def render_all(snapshot: ContentSnapshot, routes: list[RouteParams]) -> tuple[list[Page], list[str]]:
    """Render listing pages and every route. Returns (pages, missing_route_paths).

    A route without a backing document is recorded and skipped; it does not stop the build.
    """
    pages = [render_listing(snapshot, path) for path in LISTING_ROUTES]
    missing = []
    for route in routes:
        try:
            pages.append(render_route(snapshot, route))
        except NotFoundError as e:
            logger.warning("Not found: %s", e)
            missing.append(route.path)
    return pages, missing


def _staging_dir(output_dir: Path) -> Path:
    return output_dir.with_name(f".{output_dir.name}.tmp")


def _check_output_dir(output_dir: Path, content_dir: Path) -> None:
    """The output directory is replaced wholesale, so it may not hold the content tree."""
    out, content = output_dir.resolve(), content_dir.resolve()
    if out == content or out in content.parents:
        raise ValueError(f"Output directory {output_dir} must not contain the content directory {content_dir}")


def build_site(settings: Settings) -> BuildResult:
    """Run the full build once and replace output_dir with the result.

    Pages are written to a staging directory that is swapped in only after every
    page is written. Load failures propagate and leave the previous output untouched.
    """
    output_dir = Path(settings.output_dir)
    _check_output_dir(output_dir, Path(settings.content_dir))
    snapshot = run_load(settings)
    routes = enumerate_routes(snapshot)
    pages, missing = render_all(snapshot, routes)

    staging = _staging_dir(output_dir.resolve())
    if staging.exists():
        shutil.rmtree(staging)
    result = BuildResult(snapshot=snapshot, routes=routes, missing=missing)
    for page in pages:
        html_path, _ = write_page(page, staging)
        result.written.append((page.path, output_dir / html_path.relative_to(staging)))
    write_manifest(routes, staging)

    if output_dir.exists():
        shutil.rmtree(output_dir)
    staging.rename(output_dir)
    logger.info("Wrote %d page(s) to %s", len(result.written), output_dir)
    return result

"""CLI command implementations"""

import json
import logging
from typing import Annotated, Optional

import typer

from mdsite.config import Settings, load_config
from mdsite.core.errors import ContentError, NotFoundError
from mdsite.core.models import CollectionType
from mdsite.core.pipeline import build_site, run_load
from mdsite.core.query import exclude_drafts, filter_by_type, find_by_slug_params, sort_by_date
from mdsite.core.render import render_route
from mdsite.core.routes import enumerate_routes
from mdsite.core.store import ContentSnapshot


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _configure_logging(level: str) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("mdsite").setLevel(level)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the log level."""
    overrides = dict(overrides or {})
    if ctx.obj:
        overrides.setdefault("log_level", ctx.obj.get("log_level"))
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    _configure_logging(settings.log_level)
    return settings


def _load(settings: Settings) -> ContentSnapshot:
    try:
        return run_load(settings)
    except FileNotFoundError as e:
        _fail(str(e))
    except ContentError as e:
        _fail(f"Build aborted ({type(e).__name__})", e)


ContentOpt = Annotated[Optional[str], typer.Option("--content-dir", help="Content root directory")]


def build_cmd(
    ctx: typer.Context,
    content: ContentOpt = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Threads used to scan content")] = None,
    wpm: Annotated[Optional[int], typer.Option("--wpm", help="Words per minute for reading time")] = None,
    ):
    """Run the full pipeline: load -> route -> render -> write."""
    settings = _settings(ctx, overrides={
        "content_dir": content, "output_dir": out, "workers": workers, "words_per_minute": wpm,
    })
    try:
        result = build_site(settings)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    except ContentError as e:
        _fail(f"Build aborted ({type(e).__name__})", e)

    for path, html_path in result.written:
        typer.echo(f"  {path} -> {html_path}")
    for path in result.missing:
        typer.echo(f"  not found: {path}", err=True)
    typer.echo(
        f"Built {len(result.written)} page(s) from {len(result.snapshot)} document(s) "
        f"to {settings.output_dir}/"
    )


def check_cmd(ctx: typer.Context, content: ContentOpt = None):
    """Validate every content file without writing output."""
    settings = _settings(ctx, overrides={"content_dir": content})
    snapshot = _load(settings)
    counts = ", ".join(f"{name}={n}" for name, n in snapshot.counts().items())
    typer.echo(f"Validated {len(snapshot)} document(s): {counts}")


def routes_cmd(
    ctx: typer.Context,
    content: ContentOpt = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print routes as JSON")] = False,
    ):
    """List every static route, drafts included."""
    settings = _settings(ctx, overrides={"content_dir": content})
    routes = enumerate_routes(_load(settings))
    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json") for r in routes], indent=2))
        return
    for r in routes:
        typer.echo(f"{r.path}  {r.collection.value}  {json.dumps(r.params)}")


def list_cmd(
    ctx: typer.Context,
    collection: Annotated[CollectionType, typer.Argument(case_sensitive=False, help="Page, Post, Tutorial, or Module")],
    content: ContentOpt = None,
    drafts: Annotated[bool, typer.Option("--drafts", help="Include drafts")] = False,
    ):
    """List documents of one collection, newest first."""
    settings = _settings(ctx, overrides={"content_dir": content})
    docs = filter_by_type(_load(settings), collection)
    if not drafts:
        docs = exclude_drafts(docs)
    if not docs:
        typer.echo(f"No {collection.value} documents found.")
        raise typer.Exit(1)
    for d in sort_by_date(docs):
        date = d.date.isoformat() if d.date else "-"
        flag = " [draft]" if d.draft else ""
        typer.echo(f"{date}  {d.slug}  {d.title} ({d.reading_time.text}){flag}")


def show_cmd(
    ctx: typer.Context,
    collection: Annotated[CollectionType, typer.Argument(case_sensitive=False, help="Page, Post, Tutorial, or Module")],
    params: Annotated[str, typer.Argument(help="slug_as_params, e.g. intro/modules/setup")],
    content: ContentOpt = None,
    ):
    """Render a single document and print its html."""
    settings = _settings(ctx, overrides={"content_dir": content})
    snapshot = _load(settings)
    doc = find_by_slug_params(snapshot, params, collection)
    if doc is None:
        _fail("Not found", NotFoundError(f"No {collection.value} at {params}", path=params))
    page = render_route(snapshot, enumerate_routes([doc])[0])
    typer.echo(f"# {page.title}")
    if page.description:
        typer.echo(page.description)
    typer.echo(page.body)

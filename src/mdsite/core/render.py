"""Page rendering for detail routes and listing pages"""

from typing import Iterable, Optional

from mdsite.core.errors import NotFoundError
from mdsite.core.models import CollectionType, Document, ListingEntry, Page, RouteParams
from mdsite.core.query import exclude_drafts, filter_by_type, find_by_slug_params, modules_for_tutorial, sort_by_date
from mdsite.core.routes import TUTORIAL_PARAM, slug_params_for
from mdsite.core.store import ContentSnapshot


# path -> (title, description)
LISTINGS: dict[str, tuple[str, Optional[str]]] = {
    "/":          ("All the stuff", "Everything I've written"),
    "/blog":      ("Posts", None),
    "/tutorials": ("Tutorials", None),
}


def _entries(docs: Iterable[Document]) -> list[ListingEntry]:
    return [
        ListingEntry(id=d.id, title=d.title, description=d.description, slug=d.slug, date=d.date)
        for d in docs
    ]


def render(document: Document) -> Page:
    """Produce the page artifact for a single resolved document."""
    return Page(
        path=document.slug,
        title=document.title,
        description=document.description,
        body=document.body.html,
        date=document.date,
        reading_time=document.reading_time,
        hash=document.hash,
    )


def render_route(snapshot: ContentSnapshot, route: RouteParams) -> Page:
    """Resolve a route to its document and render it.

    Tutorial pages also list the tutorial's published modules.
    Raises NotFoundError when no document backs the route.
    """
    doc = find_by_slug_params(snapshot, slug_params_for(route), route.collection)
    if doc is None:
        raise NotFoundError(f"No {route.collection.value} for route {route.path}", path=route.path)
    page = render(doc)
    if route.collection is CollectionType.tutorial:
        modules = exclude_drafts(modules_for_tutorial(snapshot, route.params[TUTORIAL_PARAM]))
        page = page.model_copy(update={"entries": _entries(modules)})
    return page


def _listing_docs(snapshot: ContentSnapshot, path: str) -> tuple[Document, ...]:
    published = exclude_drafts(snapshot)
    if path == "/":
        docs = filter_by_type(published, CollectionType.post) + filter_by_type(published, CollectionType.module)
    elif path == "/blog":
        docs = filter_by_type(published, CollectionType.post)
    else:
        docs = filter_by_type(published, CollectionType.tutorial)
    return sort_by_date(docs)


def render_listing(snapshot: ContentSnapshot, path: str) -> Page:
    """Render one of the static listing pages ('/', '/blog', '/tutorials')."""
    if path not in LISTINGS:
        raise NotFoundError(f"No listing page at {path}", path=path)
    title, description = LISTINGS[path]
    return Page(path=path, title=title, description=description, entries=_entries(_listing_docs(snapshot, path)))

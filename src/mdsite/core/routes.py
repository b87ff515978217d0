"""Static route enumeration"""

from typing import Iterable

from mdsite.core.models import CollectionType, Document, RouteParams
from mdsite.core.utils.paths import MODULES_SEGMENT, split_module_params


TUTORIAL_PARAM = "tutorial-name"
MODULE_PARAM = "module"
SLUG_PARAM = "slug"

LISTING_ROUTES: tuple[str, ...] = ("/", "/blog", "/tutorials")


def route_params(doc: Document) -> dict:
    """Dynamic route params for a document, built from its slug_as_params segments in order."""
    params = doc.path.params
    if doc.collection is CollectionType.module:
        tutorial, module = split_module_params(params)
        return {TUTORIAL_PARAM: tutorial, MODULE_PARAM: module}
    if doc.collection is CollectionType.tutorial:
        return {TUTORIAL_PARAM: params[0]}
    return {SLUG_PARAM: list(params)}


def slug_params_for(route: RouteParams) -> str:
    """Rebuild the slug_as_params string a route's params point at."""
    p = route.params
    if route.collection is CollectionType.module:
        return f"{p[TUTORIAL_PARAM]}/{MODULES_SEGMENT}/{p[MODULE_PARAM]}"
    if route.collection is CollectionType.tutorial:
        return p[TUTORIAL_PARAM]
    return "/".join(p[SLUG_PARAM])


def enumerate_routes(docs: Iterable[Document]) -> list[RouteParams]:
    """One route per document, drafts included; listing pages decide visibility."""
    return [
        RouteParams(collection=d.collection, params=route_params(d), path=d.slug)
        for d in docs
    ]

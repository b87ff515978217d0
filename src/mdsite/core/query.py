"""Read-only queries over a document collection"""

from typing import Iterable, Optional, Sequence, Union

from mdsite.core.models import CollectionType, Document
from mdsite.core.utils.paths import MODULES_SEGMENT


def filter_by_type(docs: Iterable[Document], collection: CollectionType) -> tuple[Document, ...]:
    """Return documents of the given collection, in input order."""
    return tuple(d for d in docs if d.collection == collection)


def exclude_drafts(docs: Iterable[Document]) -> tuple[Document, ...]:
    """Return documents not flagged as drafts. Idempotent."""
    return tuple(d for d in docs if not d.draft)


def _normalize_params(params: Union[str, Sequence[str]]) -> str:
    """Accept 'a/b/c' or ['a', 'b', 'c'] and return 'a/b/c'."""
    if isinstance(params, str):
        return params.strip('/')
    return '/'.join(params)


def find_by_slug_params(
    docs: Iterable[Document],
    params: Union[str, Sequence[str]],
    collection: Optional[CollectionType] = None,
    ) -> Optional[Document]:
    """Return the document whose slug_as_params equals params exactly, or None.

    Drafts are matched; draft filtering applies to listings only.
    """
    target = _normalize_params(params)
    for d in docs:
        if collection is not None and d.collection != collection:
            continue
        if d.slug_as_params == target:
            return d
    return None


def sort_by_date(docs: Iterable[Document], newest_first: bool = True) -> tuple[Document, ...]:
    """Order by date (ties by slug); undated documents go last, ordered by slug."""
    docs = list(docs)
    dated = sorted((d for d in docs if d.date is not None), key=lambda d: d.slug)
    dated.sort(key=lambda d: d.date, reverse=newest_first)
    undated = sorted((d for d in docs if d.date is None), key=lambda d: d.slug)
    return tuple(dated + undated)


def modules_for_tutorial(docs: Iterable[Document], tutorial: str) -> tuple[Document, ...]:
    """Return the modules nested under a tutorial, ordered by path."""
    prefix = (tutorial, MODULES_SEGMENT)
    modules = (
        d for d in filter_by_type(docs, CollectionType.module)
        if d.path.params[:2] == prefix
    )
    return tuple(sorted(modules, key=lambda d: d.path.segments))

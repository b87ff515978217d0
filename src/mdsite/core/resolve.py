"""Field resolution: validate front matter per collection and compute derived fields"""

from typing import Optional

import pydantic

from mdsite.core.errors import ValidationError
from mdsite.core.markup import compile_body
from mdsite.core.models import SCHEMAS, Body, CollectionType, Document, FrontMatter
from mdsite.core.parse import RawDocument
from mdsite.core.utils.hashing import sha256
from mdsite.core.utils.paths import MODULES_SEGMENT, ContentPath, split_module_params
from mdsite.core.utils.reading import WORDS_PER_MINUTE, reading_time


COLLECTION_ROOTS: dict[str, CollectionType] = {
    'pages':     CollectionType.page,
    'posts':     CollectionType.post,
    'tutorials': CollectionType.tutorial,
}


def collection_for(path: ContentPath) -> Optional[CollectionType]:
    """Map a content path to its collection by top-level directory, else None.

    Files nested under a tutorial's modules directory are Modules.
    """
    if len(path.segments) < 2:
        return None
    collection = COLLECTION_ROOTS.get(path.root)
    if collection is CollectionType.tutorial and MODULES_SEGMENT in path.params[:-1]:
        return CollectionType.module
    return collection


def _check_shape(path: ContentPath, collection: CollectionType) -> None:
    """Tutorials are a single segment below the root; modules are '<tutorial>/modules/<module>'."""
    if collection is CollectionType.module:
        try:
            split_module_params(path.params)
        except ValueError as e:
            raise ValidationError(f"{path}: {e}", path=str(path)) from e
    elif collection is CollectionType.tutorial and len(path.params) != 1:
        raise ValidationError(
            f"{path}: tutorial must sit directly under tutorials/, got {path.slug_as_params!r}",
            path=str(path),
        )


def _error_fields(err: pydantic.ValidationError) -> str:
    """Summarize pydantic errors as 'field: message' pairs."""
    return "; ".join(
        f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}" for e in err.errors()
    )


def validate_fields(raw: RawDocument, collection: CollectionType) -> FrontMatter:
    """Validate front matter against the collection schema. Raises ValidationError."""
    try:
        return SCHEMAS[collection].model_validate(raw.frontmatter)
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"{raw.path}: invalid {collection.value} front matter ({_error_fields(e)})",
            path=str(raw.path),
        ) from e


def resolve(
    raw: RawDocument,
    collection: CollectionType,
    words_per_minute: int = WORDS_PER_MINUTE,
    parser_config: str = 'gfm-like',
    ) -> Document:
    """Build an enriched Document from a parsed file. Deterministic given path and body."""
    _check_shape(raw.path, collection)
    fields = validate_fields(raw, collection)
    html = compile_body(raw.markdown, parser_config, str(raw.path))
    return Document(
        id=str(raw.path),
        collection=collection,
        path=raw.path,
        title=fields.title,
        description=fields.description,
        draft=fields.draft,
        date=getattr(fields, 'date', None),
        body=Body(raw=raw.markdown, html=html),
        reading_time=reading_time(raw.markdown, words_per_minute),
        hash=sha256(raw.raw),
    )

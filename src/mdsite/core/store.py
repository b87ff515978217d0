"""Document store: scan the content tree into an immutable snapshot"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Iterator

from mdsite.core.errors import ValidationError
from mdsite.core.models import CollectionType, Document
from mdsite.core.parse import discover_files, parse_file
from mdsite.core.query import filter_by_type
from mdsite.core.resolve import collection_for, resolve
from mdsite.core.utils.paths import ContentPath
from mdsite.core.utils.reading import WORDS_PER_MINUTE


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentSnapshot:
    """All documents from one build, in content-path order. Never mutated."""
    root:      Path
    documents: tuple[Document, ...]

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def by_collection(self, collection: CollectionType) -> tuple[Document, ...]:
        return filter_by_type(self.documents, collection)

    def counts(self) -> dict[str, int]:
        """Document count per collection name, in collection declaration order."""
        c = Counter(d.collection for d in self.documents)
        return {ct.value: c[ct] for ct in CollectionType}


def _load_one(
    entry: tuple[Path, CollectionType],
    content_root: Path,
    words_per_minute: int,
    parser_config: str,
    ) -> Document:
    source, collection = entry
    raw = parse_file(source, content_root)
    return resolve(raw, collection, words_per_minute, parser_config)


def _check_unique(documents: list[Document]) -> None:
    """No two documents of one collection may share a raw path or a slug."""
    seen: dict[tuple[CollectionType, str], str] = {}
    for d in documents:
        for key in ((d.collection, d.raw_path), (d.collection, d.slug)):
            if key in seen:
                raise ValidationError(
                    f"{d.raw_path}: duplicate {d.collection.value} {key[1]!r} (also {seen[key]})",
                    path=d.raw_path,
                )
            seen[key] = d.raw_path


def load(
    content_root: Path,
    words_per_minute: int = WORDS_PER_MINUTE,
    parser_config: str = 'gfm-like',
    workers: int = 1,
    ) -> ContentSnapshot:
    """Scan content_root, validate and resolve every document, and return a snapshot.

    Raises ValidationError or ParseError on the first bad document; no partial
    snapshot is returned. Files outside a known collection directory are skipped.
    """
    root = Path(content_root)
    if not root.is_dir():
        raise FileNotFoundError(f"Content directory not found: {root}")

    entries: list[tuple[Path, CollectionType]] = []
    for source in discover_files(root):
        path = ContentPath.parse(source.relative_to(root))
        collection = collection_for(path)
        if collection is None:
            logger.warning("Skipping %s: not under a collection directory", path)
            continue
        entries.append((source, collection))

    work = partial(
        _load_one, content_root=root,
        words_per_minute=words_per_minute, parser_config=parser_config,
    )
    if workers > 1 and len(entries) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            documents = list(pool.map(work, entries))
    else:
        documents = [work(e) for e in entries]

    _check_unique(documents)
    snapshot = ContentSnapshot(root=root, documents=tuple(documents))
    logger.info("Loaded %d document(s) from %s: %s", len(snapshot), root, snapshot.counts())
    return snapshot

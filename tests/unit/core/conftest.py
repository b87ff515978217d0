"""Shared fixtures for core unit tests"""

import datetime as dt

import pytest

from mdsite.core.models import Body, CollectionType, Document
from mdsite.core.utils.paths import ContentPath
from mdsite.core.utils.reading import reading_time


def make_doc(
    raw_path: str,
    collection: CollectionType = CollectionType.post,
    title: str = "Title",
    draft: bool = False,
    date: dt.date = None,
    body: str = "",
    description: str = None,
    ) -> Document:
    """Build a resolved Document directly, bypassing the filesystem."""
    return Document(
        id=raw_path,
        collection=collection,
        path=ContentPath.parse(raw_path),
        title=title,
        description=description,
        draft=draft,
        date=date,
        body=Body(raw=body, html=f"<p>{body}</p>\n" if body else ""),
        reading_time=reading_time(body),
        hash="0" * 64,
    )


@pytest.fixture(name="docs")
def docs_fixture():
    """A mixed collection: posts (one draft), a page, a tutorial, and two modules."""
    return (
        make_doc("posts/hello.mdx", date=dt.date(2024, 1, 1), title="Hello"),
        make_doc("posts/wip.mdx", date=dt.date(2024, 3, 1), title="WIP", draft=True),
        make_doc("posts/older.mdx", date=dt.date(2023, 6, 1), title="Older"),
        make_doc("pages/about.mdx", CollectionType.page, title="About"),
        make_doc("tutorials/intro.mdx", CollectionType.tutorial, date=dt.date(2024, 2, 1), title="Intro"),
        make_doc("tutorials/intro/modules/setup.mdx", CollectionType.module, title="Setup"),
        make_doc("tutorials/intro/modules/later.mdx", CollectionType.module, title="Later", draft=True),
        make_doc("tutorials/other/modules/one.mdx", CollectionType.module, title="One"),
    )


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    return make_doc

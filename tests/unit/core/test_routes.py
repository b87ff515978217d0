"""Unit tests for core/routes.py"""

from mdsite.core.models import CollectionType
from mdsite.core.query import exclude_drafts
from mdsite.core.routes import enumerate_routes, route_params, slug_params_for


def test_one_route_per_document_including_drafts(docs):
    """Drafts are routable; route count equals document count."""
    routes = enumerate_routes(docs)
    assert len(routes) == len(docs)
    assert len(routes) > len(exclude_drafts(docs))
    assert [r.path for r in routes] == [d.slug for d in docs]


def test_module_route_params(make_doc):
    doc = make_doc("tutorials/intro/modules/setup.mdx", CollectionType.module)
    assert doc.slug_as_params == "intro/modules/setup"
    route = enumerate_routes([doc])[0]
    assert route.params == {"tutorial-name": "intro", "module": "setup"}
    assert route.path == "/tutorials/intro/modules/setup"
    assert route.collection is CollectionType.module


def test_tutorial_route_params(make_doc):
    doc = make_doc("tutorials/intro.mdx", CollectionType.tutorial)
    assert route_params(doc) == {"tutorial-name": "intro"}


def test_post_route_params_keep_segment_order(make_doc):
    doc = make_doc("posts/2024/01/new-year.mdx")
    assert route_params(doc) == {"slug": ["2024", "01", "new-year"]}


def test_slug_params_round_trip(docs):
    """Route params map back to the document's slug_as_params."""
    for doc, route in zip(docs, enumerate_routes(docs)):
        assert slug_params_for(route) == doc.slug_as_params


def test_empty_collection():
    assert enumerate_routes([]) == []

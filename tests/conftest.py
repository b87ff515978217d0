"""Root test configuration: helpers for building content trees"""

import datetime as dt
from pathlib import Path

import pytest
import yaml


def write_content(root: Path, rel: str, frontmatter: dict = None, body: str = "") -> Path:
    """Write a content file with an optional YAML front matter block."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    text = body
    if frontmatter is not None:
        header = yaml.safe_dump(frontmatter, sort_keys=False, allow_unicode=True)
        text = f"---\n{header}---\n\n{body}"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(name="write")
def write_fixture():
    return write_content


@pytest.fixture(name="content_root")
def content_root_fixture(tmp_path):
    """A small site: one page, a published and a draft post, a tutorial with two modules."""
    root = tmp_path / "content"
    write_content(root, "pages/about.mdx", {"title": "About", "description": "Who I am"}, "# About\n\nHi.\n")
    write_content(
        root, "posts/hello.mdx",
        {"title": "Hello", "date": dt.date(2024, 1, 1), "draft": False},
        "word " * 400,
    )
    write_content(
        root, "posts/wip.mdx",
        {"title": "Work in progress", "date": dt.date(2024, 3, 1), "draft": True},
        "Not ready.\n",
    )
    write_content(
        root, "tutorials/intro.mdx",
        {"title": "Intro", "date": dt.date(2024, 2, 1), "description": "Getting started"},
        "Welcome.\n",
    )
    write_content(root, "tutorials/intro/modules/setup.mdx", {"title": "Setup"}, "## Install\n\nRun it.\n")
    write_content(root, "tutorials/intro/modules/later.mdx", {"title": "Later", "draft": True}, "Soon.\n")
    return root

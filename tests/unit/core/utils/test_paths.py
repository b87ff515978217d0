"""Unit tests for core/utils/paths.py"""

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from mdsite.core.utils.paths import ContentPath, split_module_params, strip_extension


@pytest.mark.parametrize("name,expected", [
    ("hello.mdx", "hello"),
    ("hello.md", "hello"),
    ("v1.2-notes.mdx", "v1.2-notes"),
    ("noext", "noext"),
])
def test_strip_extension(name, expected):
    """strip_extension removes only the final suffix."""
    assert strip_extension(name) == expected


@pytest.mark.parametrize("raw_path", [
    "posts/hello.mdx",
    "pages/about.md",
    "posts/2024/year-review.mdx",
    "tutorials/intro/modules/setup.mdx",
])
def test_slug_is_root_slash_plus_stripped_path(raw_path):
    """slug == '/' + raw path with the extension stripped."""
    path = ContentPath.parse(raw_path)
    assert path.slug == "/" + raw_path.rsplit(".", 1)[0]


def test_slug_as_params_drops_first_segment():
    """slug_as_params removes the collection directory and the extension."""
    path = ContentPath.parse("tutorials/intro/modules/setup.mdx")
    assert path.slug_as_params == "intro/modules/setup"
    assert path.params == ("intro", "modules", "setup")
    assert path.root == "tutorials"


def test_parse_accepts_pure_paths():
    """PurePath inputs are normalized to POSIX segments on any platform."""
    assert ContentPath.parse(PurePosixPath("posts/a.mdx")).segments == ("posts", "a.mdx")
    assert ContentPath.parse(PureWindowsPath("posts\\a.mdx")).segments == ("posts", "a.mdx")


def test_str_round_trips_raw_path():
    assert str(ContentPath.parse("posts/hello.mdx")) == "posts/hello.mdx"


@pytest.mark.parametrize("bad", ["", "/posts/a.mdx", "posts/../a.mdx", "posts/./a.mdx"])
def test_parse_rejects_invalid_paths(bad):
    """Empty, absolute, and dot-segment paths are rejected."""
    with pytest.raises(ValueError):
        ContentPath.parse(bad)


def test_split_module_params_valid():
    assert split_module_params(("intro", "modules", "setup")) == ("intro", "setup")


@pytest.mark.parametrize("params", [
    ("intro", "setup"),
    ("intro", "lessons", "setup"),
    ("intro", "modules", "deep", "setup"),
    ("intro",),
])
def test_split_module_params_rejects_other_shapes(params):
    """Anything other than '<tutorial>/modules/<module>' is invalid."""
    with pytest.raises(ValueError, match="Module path"):
        split_module_params(params)

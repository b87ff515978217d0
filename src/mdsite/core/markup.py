"""Body compilation through markdown-it; the output is opaque to the rest of the pipeline"""

from functools import lru_cache

from markdown_it import MarkdownIt

from mdsite.core.errors import ParseError


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Build (once per preset) a MarkdownIt instance."""
    return MarkdownIt(preset, options_update={"linkify": False})


def compile_body(markdown: str, preset: str = "gfm-like", path: str = None) -> str:
    """Render a markdown body to html. Raises ParseError if the compiler rejects it."""
    try:
        return _make_parser(preset).render(markdown)
    except Exception as e:
        raise ParseError(f"{path or '<body>'}: failed to compile body: {e}", path=path) from e

"""Content file discovery and front matter extraction"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from mdsite.core.errors import ParseError, ValidationError
from mdsite.core.utils.paths import ContentPath


FRONTMATTER_RE = re.compile(r'\A---[ \t]*\n(?:(.*?)\n)?---[ \t]*(?:\n|\Z)', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


@dataclass(frozen=True)
class RawDocument:
    """A content file split into front matter and body; not yet validated."""
    path:        ContentPath       # relative to the content root
    source:      Path
    raw:         str               # full file content (includes front matter)
    markdown:    str               # body only
    frontmatter: dict[str, Any]


def _strip_frontmatter(text: str, path: str = None) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1) or "") or {}
    except yaml.YAMLError as e:
        raise ParseError(f"{path}: invalid YAML front matter: {e}", path=path) from e
    except (ValueError, TypeError) as e:
        # yaml builds dates eagerly; 2024-13-45 fails here rather than in the schema
        raise ValidationError(f"{path}: invalid value in front matter: {e}", path=path) from e
    if not isinstance(fm, dict):
        raise ParseError(
            f"{path}: invalid YAML front matter: expected a mapping, got {type(fm).__name__}", path=path
        )
    return fm, text[m.end():]


def discover_files(root: Path) -> list[Path]:
    """Return .md/.mdx files under root, ordered by path segments."""
    files = (p for p in root.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)
    return sorted(files, key=lambda p: p.relative_to(root).parts)


def parse_file(source: Path, content_root: Path) -> RawDocument:
    """Read a content file and split off its front matter."""
    path = ContentPath.parse(source.relative_to(content_root))
    try:
        raw = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: not valid UTF-8: {e}", path=str(path)) from e
    frontmatter, body = _strip_frontmatter(raw, str(path))
    return RawDocument(path=path, source=source, raw=raw, markdown=body, frontmatter=frontmatter)

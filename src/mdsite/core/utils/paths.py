"""Path-segment model for content files and the routes derived from them"""

from pathlib import PurePath, PurePosixPath

from pydantic import BaseModel, ConfigDict, field_validator


MODULES_SEGMENT = "modules"


def strip_extension(name: str) -> str:
    """Drop the final extension from a file name ('hello.mdx' -> 'hello')."""
    stem = PurePosixPath(name).stem
    return stem or name


class ContentPath(BaseModel):
    """A content file location relative to the content root, as ordered segments.

    The first segment names the collection directory (posts, pages, tutorials);
    the remaining segments carry the routing hierarchy. All slug values are
    computed from ``segments`` and never stored separately.
    """
    model_config = ConfigDict(frozen=True)

    segments: tuple[str, ...]

    @field_validator("segments")
    @classmethod
    def _valid_segments(cls, segments: tuple[str, ...]) -> tuple[str, ...]:
        if not segments:
            raise ValueError("Content path must have at least one segment")
        for seg in segments:
            if not seg or seg in (".", "..") or "/" in seg or "\\" in seg:
                raise ValueError(f"Invalid path segment {seg!r} in {segments!r}")
        return segments

    @classmethod
    def parse(cls, path: "str | PurePath") -> "ContentPath":
        """Build from a relative path string or PurePath, using either separator."""
        text = path.as_posix() if isinstance(path, PurePath) else str(path)
        text = text.replace("\\", "/")
        if text.startswith("/"):
            raise ValueError(f"Content path must be relative: {text!r}")
        return cls(segments=tuple(seg for seg in text.split("/") if seg))

    def __str__(self) -> str:
        return "/".join(self.segments)

    @property
    def root(self) -> str:
        return self.segments[0]

    @property
    def route_segments(self) -> tuple[str, ...]:
        """All segments with the file extension stripped from the last one."""
        return self.segments[:-1] + (strip_extension(self.segments[-1]),)

    @property
    def params(self) -> tuple[str, ...]:
        """Route segments below the collection directory."""
        return self.route_segments[1:]

    @property
    def flattened(self) -> str:
        return "/".join(self.route_segments)

    @property
    def slug(self) -> str:
        return "/" + self.flattened

    @property
    def slug_as_params(self) -> str:
        return "/".join(self.params)


def split_module_params(params: tuple[str, ...]) -> tuple[str, str]:
    """Return (tutorial, module) for '<tutorial>/modules/<module>' params.

    Raises ValueError for any other shape.
    """
    if len(params) != 3 or params[1] != MODULES_SEGMENT or not params[0] or not params[2]:
        joined = "/".join(params)
        raise ValueError(f"Module path must be '<tutorial>/{MODULES_SEGMENT}/<module>', got {joined!r}")
    return params[0], params[2]

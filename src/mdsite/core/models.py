"""Document schemas, the resolved document model, and page artifacts"""

import datetime as dt
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from mdsite.core.utils.paths import ContentPath


class CollectionType(str, Enum):
    """Content categories; each has its own front matter schema and routing root"""
    page = "Page"
    post = "Post"
    tutorial = "Tutorial"
    module = "Module"


# --- front matter schemas (one per collection) ---

class FrontMatter(BaseModel):
    """Fields shared by every collection. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    draft: bool = False

    @field_validator("date", mode="before", check_fields=False)
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        # YAML yields datetime for timestamps; keep the calendar date.
        if isinstance(value, dt.datetime):
            return value.date()
        return value


class PageFields(FrontMatter):
    date: Optional[dt.date] = None


class PostFields(FrontMatter):
    date: dt.date


class TutorialFields(FrontMatter):
    date: dt.date


class ModuleFields(FrontMatter):
    date: Optional[dt.date] = None


SCHEMAS: dict[CollectionType, type[FrontMatter]] = {
    CollectionType.page:     PageFields,
    CollectionType.post:     PostFields,
    CollectionType.tutorial: TutorialFields,
    CollectionType.module:   ModuleFields,
}


# --- resolved documents ---

class ReadingTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    minutes: int = Field(..., ge=0)
    words:   int = Field(..., ge=0)
    text:    str


class Body(BaseModel):
    """Raw markdown plus the compiler's rendered output; the html is treated as opaque."""
    model_config = ConfigDict(frozen=True)

    raw:  str
    html: str


class Document(BaseModel):
    """A validated, enriched content document. Immutable for the duration of a build."""
    model_config = ConfigDict(frozen=True)

    id:           str
    collection:   CollectionType
    path:         ContentPath
    title:        str
    description:  Optional[str] = None
    draft:        bool = False
    date:         Optional[dt.date] = None
    body:         Body
    reading_time: ReadingTime
    hash:         str                   # sha256 of the full source file

    @computed_field
    @property
    def raw_path(self) -> str:
        return str(self.path)

    @computed_field
    @property
    def slug(self) -> str:
        return self.path.slug

    @computed_field
    @property
    def slug_as_params(self) -> str:
        return self.path.slug_as_params


# --- routing and rendering artifacts ---

class RouteParams(BaseModel):
    """One static route: the dynamic params a detail page needs plus its URL path."""
    model_config = ConfigDict(frozen=True)

    collection: CollectionType
    params:     dict[str, Union[str, list[str]]]
    path:       str


class ListingEntry(BaseModel):
    """Summary of a document as shown on a listing page."""
    id:          str
    title:       str
    description: Optional[str] = None
    slug:        str
    date:        Optional[dt.date] = None


class Page(BaseModel):
    """Rendered page artifact handed to the presentation layer."""
    path:         str
    title:        str
    description:  Optional[str] = None
    body:         str = ""              # rendered html
    date:         Optional[dt.date] = None
    reading_time: Optional[ReadingTime] = None
    hash:         Optional[str] = None  # source hash; None for listing pages
    entries:      list[ListingEntry] = []

    @property
    def metadata(self) -> dict[str, str]:
        """Head metadata: title always, description when present."""
        meta = {"title": self.title}
        if self.description:
            meta["description"] = self.description
        return meta

import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    level: Literal[2, 3]


class PostRecord(BaseModel):
    # Unknown front matter keys (tags, etc.) are kept as extra fields.
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    date: datetime.date
    title: str
    subtitle: Optional[str] = None
    seriesName: Optional[str] = None
    seriesSubtitle: Optional[str] = None
    sequence: Optional[int] = None
    featured: Optional[float] = None
    image: Optional[str] = None
    imageAltText: Optional[str] = None
    imageWidth: Optional[Union[int, str]] = None
    imageHeight: Optional[Union[int, str]] = None
    photographer: Optional[str] = None
    photographerLink: Optional[str] = None

    @model_validator(mode="after")
    def _series_members_need_sequence(self):
        if self.seriesName and self.sequence is None:
            raise ValueError("sequence is required when seriesName is set")
        return self


class PostDetail(PostRecord):
    contentHtml: str
    headings: List[Heading] = Field(default_factory=list)


class SeriesGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    seriesName: str
    seriesSubtitle: Optional[str] = None
    date: datetime.date
    posts: List[PostRecord]


ListingItem = Union[SeriesGroup, PostRecord]

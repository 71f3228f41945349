import datetime
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class Metadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    date: str = ""
    tags: List[str] = Field(default_factory=list)
    summary: str = ""


class Found(BaseModel):
    """A file that carries a metadata block, split into header and body."""

    model_config = ConfigDict(frozen=True)

    metadata: Metadata
    body: str = ""


class Absent(BaseModel):
    """A file without a metadata block. Not an error: the file is not a post."""

    model_config = ConfigDict(frozen=True)


ParseResult = Union[Found, Absent]


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    summary: str = ""
    date: str
    tags: List[str] = Field(default_factory=list)
    filename: str
    slug: str
    published: datetime.datetime

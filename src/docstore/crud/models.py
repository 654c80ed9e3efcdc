"""Record shapes held by the store: authors, documents and search filters"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Author(BaseModel):
    """Immutable author value embedded in a Document"""
    model_config = ConfigDict(frozen=True)
    id: str
    name: str = ""


class Document(BaseModel):
    """A stored document; id stays empty until the store assigns one"""
    id: str = Field(default="", description="Empty until first save; never changed afterwards")
    title: str
    content: str
    author: Author
    created: Optional[datetime] = Field(default=None, description="Set by the caller, never by the store")


class SearchRequest(BaseModel):
    """Filter criteria: OR within a list, AND across fields, empty means match all"""
    title_prefixes:    list[str] = Field(default_factory=list)
    contains_contents: list[str] = Field(default_factory=list)
    author_ids:        list[str] = Field(default_factory=list)
    created_from:      Optional[datetime] = None    # exclusive lower bound
    created_to:        Optional[datetime] = None    # exclusive upper bound

    @field_validator("title_prefixes", "contains_contents", "author_ids", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

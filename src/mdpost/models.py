"""Pure data models for post generation.

No I/O here. The scanner fills a ``ScanResult``; the CLI combines it with
the prompted title and slug into a ``Post`` that the publisher writes.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ScanResult(BaseModel):
    """Original lines of a markdown draft and its prose word count."""

    lines: list[str] = Field(default_factory=list)
    word_count: int = Field(default=0, ge=0)


class Post(BaseModel):
    """A single blog post, built once per run and written once."""

    title: str
    author: str
    slug: str
    timestamp: datetime = Field(default_factory=datetime.now)
    word_count: int = Field(default=0, ge=0)
    lines: list[str] = Field(default_factory=list)

    @property
    def filename(self) -> str:
        return f"{self.slug}.md"

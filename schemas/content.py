from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BlogPost(BaseModel):
    """Frontmatter de um post do blog (coleção ``posts``)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    published_at: date = Field(
        ...,
        validation_alias=AliasChoices("publishedAt", "published_at"),
        serialization_alias="publishedAt",
    )
    description: str
    is_publish: bool = Field(
        ...,
        validation_alias=AliasChoices("isPublish", "is_publish"),
        serialization_alias="isPublish",
    )
    is_draft: bool = Field(
        False,
        validation_alias=AliasChoices("isDraft", "is_draft"),
        serialization_alias="isDraft",
    )
    lang: str
    tags: Optional[list[str]] = None


class PostEntry(BaseModel):
    """Post carregado do disco: identificador, frontmatter validado e corpo markdown."""
    id: str
    slug: str
    data: BlogPost
    body: str = ""

    @property
    def is_visible(self) -> bool:
        return self.data.is_publish and not self.data.is_draft

    def summary(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            **self.data.model_dump(mode="json", by_alias=True),
        }

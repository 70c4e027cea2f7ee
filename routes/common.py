from __future__ import annotations

from typing import Any

from fastapi import Query

from core.config import get_settings
from services.i18n import Lang, get_lang_from_url
from services.posts import PostRepository


def get_page_lang(
    path: str = Query("/", description="Caminho da página, ex.: /br/projects"),
) -> Lang:
    """Dependência que resolve o idioma a partir do caminho da página."""
    return get_lang_from_url(path)


def get_post_repository() -> PostRepository:
    settings = get_settings()
    return PostRepository(settings.content_dir, ttl_seconds=settings.posts_cache_ttl_seconds)


def ok(data: Any) -> dict[str, Any]:
    return {"ok": True, "data": data}

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from services.i18n import Lang, use_translations
from services.posts import PostRepository, filter_by_tags, tag_counts
from .common import get_page_lang, get_post_repository, ok

router = APIRouter()


@router.get("/v1/posts")
def list_posts(
    lang: Lang = Depends(get_page_lang),
    tags: Optional[List[str]] = Query(None, description="Filtra posts com qualquer uma das tags"),
    include_drafts: bool = Query(False),
    repo: PostRepository = Depends(get_post_repository),
) -> dict[str, Any]:
    """Listagem do blog no idioma da página, com contagem de tags para o filtro."""
    t = use_translations(lang.value)
    posts = repo.list_posts(lang.value, include_drafts=include_drafts)
    selected = filter_by_tags(posts, tags or [])
    return ok({
        "lang": lang.value,
        "description": t("blog.description"),
        "total": len(selected),
        "total_label": t("blog.total_posts"),
        "tags": tag_counts(posts),
        "empty_message": None if selected else t("blog.filter.noResults.title"),
        "posts": [p.summary() for p in selected],
    })


@router.get("/v1/posts/{lang}/{slug:path}")
def get_post(
    lang: str,
    slug: str,
    include_drafts: bool = Query(False),
    repo: PostRepository = Depends(get_post_repository),
) -> dict[str, Any]:
    post = repo.get_post(f"{lang}/{slug}", include_drafts=include_drafts)
    if post is None:
        raise HTTPException(status_code=404, detail="Post não encontrado.")
    t = use_translations(post.data.lang)
    return ok({
        **post.summary(),
        "body": post.body,
        "back_label": t("common.back"),
    })

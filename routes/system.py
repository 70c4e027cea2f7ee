from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import escape

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from core.config import get_settings
from services.i18n import Lang, localize_path
from services.posts import PostRepository
from .common import get_post_repository

router = APIRouter()

SITE_PAGES = ("/", "/about", "/projects", "/posts", "/contact")


def get_git_commit_hash() -> Optional[str]:
    """Obtém o hash do commit git atual."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "HEAD"],
                cwd=Path(__file__).parent.parent,
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return None


@router.get("/")
async def root():
    """Endpoint raiz para verificações de uptime."""
    return {
        "ok": True,
        "service": "portfolio-api",
        "version": "1.0.0",
        "commit": get_git_commit_hash(),
        "env": {"log_level": os.getenv("LOG_LEVEL", "INFO")},
    }


@router.get("/health")
async def health_check():
    """Endpoint simples de health check."""
    return {"ok": True}


def build_sitemap_urls(site_url: str, repo: PostRepository) -> list[str]:
    urls = []
    for lang in Lang:
        for page in SITE_PAGES:
            urls.append(site_url + localize_path(page, lang.value))
        for post in repo.list_posts(lang.value):
            urls.append(site_url + localize_path(f"/posts/{post.slug}", lang.value))
    return urls


@router.get("/sitemap.xml")
def sitemap(repo: PostRepository = Depends(get_post_repository)) -> Response:
    """Sitemap com as páginas de cada idioma e os posts publicados."""
    urls = build_sitemap_urls(get_settings().site_url, repo)
    body = "".join(f"<url><loc>{escape(u)}</loc></url>" for u in urls)
    xml = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        f"{body}</urlset>"
    )
    return Response(content=xml, media_type="application/xml")

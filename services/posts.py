from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from core.cache import TTLCache, cache as default_cache
from core.errors import ContentValidationError
from schemas.content import BlogPost, PostEntry

logger = logging.getLogger("portfolio-api")

POST_EXTENSIONS = (".md", ".mdx")
FRONTMATTER_DELIMITER = "---"


def split_frontmatter(text: str) -> tuple[str, str]:
    """Separa o bloco YAML inicial (entre linhas ``---``) do corpo markdown."""
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return "", text
    for idx in range(1, len(lines)):
        if lines[idx].strip() == FRONTMATTER_DELIMITER:
            return "".join(lines[1:idx]), "".join(lines[idx + 1:])
    return "", text


def parse_post(post_id: str, text: str) -> PostEntry:
    """Valida o frontmatter de um post; erros viram ``ContentValidationError``."""
    raw_frontmatter, body = split_frontmatter(text)
    try:
        data = yaml.safe_load(raw_frontmatter) if raw_frontmatter else {}
    except yaml.YAMLError as exc:
        raise ContentValidationError(post_id, [], detail=f"YAML inválido: {exc}") from exc
    if not isinstance(data, dict):
        raise ContentValidationError(post_id, [], detail="frontmatter precisa ser um objeto")

    try:
        frontmatter = BlogPost.model_validate(data)
    except ValidationError as exc:
        fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
        raise ContentValidationError(post_id, fields, detail=exc.errors()[0]["msg"]) from exc

    # o id precisa ser <lang>/<slug...>, igual à rota de detalhe e ao sitemap
    directory, _, slug = post_id.partition("/")
    if not slug or directory != frontmatter.lang:
        raise ContentValidationError(
            post_id,
            ["lang"],
            detail=f"post deve ficar em posts/{frontmatter.lang}/",
        )

    return PostEntry(id=post_id, slug=slug, data=frontmatter, body=body)


class PostRepository:
    """Coleção de posts markdown em ``<content_dir>/posts``."""

    def __init__(
        self,
        content_dir: Path,
        *,
        cache: Optional[TTLCache] = None,
        ttl_seconds: int = 300,
    ) -> None:
        self.posts_dir = Path(content_dir) / "posts"
        self._cache = cache if cache is not None else default_cache
        self._ttl_seconds = ttl_seconds

    @property
    def _cache_key(self) -> str:
        return f"posts:{self.posts_dir.resolve()}"

    def _load_all(self) -> list[PostEntry]:
        if not self.posts_dir.is_dir():
            logger.warning("posts_dir_missing", extra={"path": str(self.posts_dir)})
            return []

        entries: list[PostEntry] = []
        for path in sorted(self.posts_dir.rglob("*")):
            if path.suffix not in POST_EXTENSIONS or not path.is_file():
                continue
            post_id = path.relative_to(self.posts_dir).with_suffix("").as_posix()
            entries.append(parse_post(post_id, path.read_text(encoding="utf-8")))

        logger.info("posts_loaded", extra={"path": str(self.posts_dir), "count": len(entries)})
        return entries

    def all(self) -> list[PostEntry]:
        return self._cache.get_or_load(self._cache_key, self._load_all, self._ttl_seconds)

    def reload(self) -> list[PostEntry]:
        self._cache.invalidate(self._cache_key)
        return self.all()

    def list_posts(self, lang: str, *, include_drafts: bool = False) -> list[PostEntry]:
        """Posts de um idioma, mais recentes primeiro."""
        posts = [
            p for p in self.all()
            if p.data.lang == lang and (include_drafts or p.is_visible)
        ]
        return sorted(posts, key=lambda p: p.data.published_at, reverse=True)

    def get_post(self, post_id: str, *, include_drafts: bool = False) -> Optional[PostEntry]:
        """Post pelo id; rascunhos e não publicados só com ``include_drafts``."""
        for post in self.all():
            if post.id == post_id:
                return post if include_drafts or post.is_visible else None
        return None


def tag_counts(posts: Iterable[PostEntry]) -> dict[str, int]:
    counter: Counter[str] = Counter()
    for post in posts:
        counter.update(post.data.tags or [])
    return dict(sorted(counter.items(), key=lambda item: (-item[1], item[0])))


def filter_by_tags(posts: Iterable[PostEntry], tags: Iterable[str]) -> list[PostEntry]:
    """Mantém posts com pelo menos uma das tags selecionadas; sem tags, mantém todos."""
    selected = {t for t in tags if t}
    if not selected:
        return list(posts)
    return [p for p in posts if selected.intersection(p.data.tags or [])]

from datetime import date
from pathlib import Path

import pytest

from core.cache import TTLCache
from core.errors import ContentValidationError
from services.posts import (
    PostRepository,
    filter_by_tags,
    parse_post,
    split_frontmatter,
    tag_counts,
)

POST_TEMPLATE = """---
title: {title}
publishedAt: {published}
description: Uma descrição
isPublish: {publish}
isDraft: {draft}
lang: {lang}
tags: {tags}
---

Corpo do post.
"""


def write_post(root: Path, post_id: str, *, title="Post", published="2024-01-01",
               publish="true", draft="false", lang=None, tags="[]") -> Path:
    path = root / "posts" / f"{post_id}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        POST_TEMPLATE.format(
            title=title,
            published=published,
            publish=publish,
            draft=draft,
            lang=lang or post_id.split("/")[0],
            tags=tags,
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def repo(tmp_path):
    write_post(tmp_path, "en/older", title="Older", published="2023-05-01", tags="[python, i18n]")
    write_post(tmp_path, "en/newer", title="Newer", published="2024-02-01", tags="[python]")
    write_post(tmp_path, "en/draft", title="Draft", draft="true")
    write_post(tmp_path, "en/hidden", title="Hidden", publish="false")
    write_post(tmp_path, "br/primeiro", title="Primeiro", tags="[astro]")
    return PostRepository(tmp_path, cache=TTLCache(), ttl_seconds=60)


def test_split_frontmatter():
    fm, body = split_frontmatter("---\ntitle: x\n---\nhello\n")
    assert fm == "title: x\n"
    assert body == "hello\n"

    fm, body = split_frontmatter("no frontmatter")
    assert fm == ""
    assert body == "no frontmatter"


def test_parse_post_accepts_schema_and_defaults():
    post = parse_post(
        "br/meu-post",
        "---\ntitle: T\npublishedAt: 2024-03-10\ndescription: D\nisPublish: true\nlang: br\nextra: ignored\n---\nbody",
    )
    assert post.slug == "meu-post"
    assert post.data.published_at == date(2024, 3, 10)
    assert post.data.is_draft is False
    assert post.data.tags is None
    assert post.body == "body"


def test_parse_post_reports_offending_fields():
    with pytest.raises(ContentValidationError) as excinfo:
        parse_post("en/bad", "---\ntitle: T\ndescription: D\nisPublish: maybe\nlang: en\n---\n")
    err = excinfo.value
    assert err.source == "en/bad"
    assert "publishedAt" in err.fields
    assert "isPublish" in err.fields


def test_parse_post_rejects_invalid_yaml():
    with pytest.raises(ContentValidationError):
        parse_post("en/bad", "---\ntitle: [unclosed\n---\n")


def test_parse_post_requires_locale_directory_matching_lang():
    text = "---\ntitle: T\npublishedAt: 2024-03-10\ndescription: D\nisPublish: true\nlang: br\n---\n"
    with pytest.raises(ContentValidationError) as excinfo:
        parse_post("en/wrong-dir", text)
    assert excinfo.value.fields == ["lang"]

    with pytest.raises(ContentValidationError):
        parse_post("top-level", text)

    nested = parse_post("br/2024/aninhado", text)
    assert nested.slug == "2024/aninhado"


def test_get_post_hides_unpublished_and_drafts(repo):
    assert repo.get_post("en/draft") is None
    assert repo.get_post("en/hidden") is None
    assert repo.get_post("en/draft", include_drafts=True).data.title == "Draft"
    assert repo.get_post("en/newer").data.title == "Newer"


def test_list_posts_filters_and_sorts(repo):
    titles = [p.data.title for p in repo.list_posts("en")]
    assert titles == ["Newer", "Older"]

    with_drafts = {p.data.title for p in repo.list_posts("en", include_drafts=True)}
    assert {"Draft", "Hidden"} <= with_drafts

    assert [p.data.title for p in repo.list_posts("br")] == ["Primeiro"]


def test_get_post_by_id(repo):
    post = repo.get_post("br/primeiro")
    assert post is not None
    assert post.slug == "primeiro"
    assert repo.get_post("br/nao-existe") is None


def test_collection_is_cached_until_reload(repo, tmp_path):
    assert len(repo.list_posts("br")) == 1
    write_post(tmp_path, "br/segundo", title="Segundo")
    assert len(repo.list_posts("br")) == 1
    repo.reload()
    assert len(repo.list_posts("br")) == 2


def test_missing_posts_dir_is_empty(tmp_path):
    repo = PostRepository(tmp_path / "nowhere", cache=TTLCache())
    assert repo.all() == []


def test_tag_counts_and_filter(repo):
    posts = repo.list_posts("en")
    assert tag_counts(posts) == {"python": 2, "i18n": 1}
    assert [p.data.title for p in filter_by_tags(posts, ["i18n"])] == ["Older"]
    assert len(filter_by_tags(posts, [])) == 2

import pytest

from data.about import about
from data.ui import ui
from services.i18n import (
    DEFAULT_LANG,
    Lang,
    freeze_table,
    get_lang_from_url,
    get_slug_from_url,
    localize_path,
    resolve_table,
    use_translations,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("/br/projects", Lang.BR),
        ("br/projects", Lang.BR),
        ("/en/about", Lang.EN),
        ("https://example.com/br/posts/x", Lang.BR),
        ("/about", DEFAULT_LANG),
        ("/", DEFAULT_LANG),
        ("", DEFAULT_LANG),
        ("/xx/post-1", DEFAULT_LANG),
        ("/BR/projects", DEFAULT_LANG),
        (None, DEFAULT_LANG),
        ("//br/x", DEFAULT_LANG),
        ("/br?x=1", Lang.BR),
        ("/br#top", Lang.BR),
        ("http://[::1/br", DEFAULT_LANG),
    ],
)
def test_get_lang_from_url(url, expected):
    assert get_lang_from_url(url) == expected


def test_lookup_uses_requested_locale_when_present():
    t = use_translations("br")
    assert t("nav.home") == "Início"
    assert use_translations("en")("nav.home") == "Home"


def test_lookup_falls_back_to_default_locale():
    t = use_translations("br")
    # chave definida apenas em inglês
    assert t("skills.title") == "Skills"
    assert t("about.skills.frontend") == "Frontend"


def test_lookup_concrete_fallback_scenario():
    table = {"en": {"nav.home": "Home"}, "br": {}}
    t = use_translations("br", table)
    assert t("nav.home") == "Home"


def test_lookup_empty_value_falls_back():
    table = {"en": {"k": "default"}, "br": {"k": ""}}
    assert use_translations("br", table)("k") == "default"


def test_lookup_missing_everywhere_returns_none():
    assert use_translations("br")("does.not.exist") is None
    assert use_translations("xx")("nav.home") == "Home"
    assert use_translations("br", {})("nav.home") is None


def test_lookup_is_deterministic():
    t = use_translations("br", about)
    first = t("frontend.skills")
    second = t("frontend.skills")
    assert first == second
    assert "React" in first
    assert ui["br"]["nav.home"] == "Início"


def test_lookup_with_about_table():
    assert use_translations("br", about)("skills.title") == "Habilidades Técnicas"
    assert use_translations("en", about)("connect.title") == "Let's Connect"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("br/projects", "projects"),
        ("en/my-post", "my-post"),
        ("xx/my-post", "my-post"),
        ("projects", None),
    ],
)
def test_get_slug_from_url(url, expected):
    assert get_slug_from_url(url) == expected


def test_path_resolves_lang_and_slug_together():
    assert get_lang_from_url("br/projects") == Lang.BR
    assert get_slug_from_url("br/projects") == "projects"
    assert get_lang_from_url("projects") == Lang.EN
    assert get_slug_from_url("projects") is None


def test_frozen_tables_are_read_only():
    table = freeze_table({"en": {"items": ["a", "b"]}})
    assert table["en"]["items"] == ("a", "b")
    with pytest.raises(TypeError):
        table["en"]["items"] = ()
    with pytest.raises(TypeError):
        ui["en"]["nav.home"] = "changed"


def test_resolve_table_applies_fallback():
    resolved = resolve_table("br", ui)
    assert resolved["nav.home"] == "Início"
    assert resolved["skills.title"] == "Skills"
    assert set(ui["en"]).issubset(resolved)


@pytest.mark.parametrize(
    "path, lang, expected",
    [
        ("/projects", "en", "/projects"),
        ("/projects", "br", "/br/projects"),
        ("/", "br", "/br/"),
        ("/", "en", "/"),
        ("about", "xx", "/about"),
    ],
)
def test_localize_path(path, lang, expected):
    assert localize_path(path, lang) == expected


def test_lang_renders_as_tag():
    assert str(Lang.BR) == "br"
    assert f"/{Lang.BR}/" == "/br/"

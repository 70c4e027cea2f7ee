from __future__ import annotations

"""
Este módulo centraliza a lógica de internacionalização (i18n) do site.

O idioma ativo vem do primeiro segmento do caminho da página (``/br/...``).
Qualquer segmento que não seja um idioma suportado cai no idioma padrão,
e chaves ausentes no idioma ativo caem no valor do idioma padrão.
"""

from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional, TypeVar
from urllib.parse import urlsplit

V = TypeVar("V")

TranslationTable = Mapping[str, Mapping[str, V]]


class Lang(str, Enum):
    """Idiomas suportados pelo site."""
    EN = "en"
    BR = "br"

    def __str__(self) -> str:
        return self.value


DEFAULT_LANG = Lang.EN

LANGUAGE_NAMES = {
    Lang.EN: "English",
    Lang.BR: "Português",
}

_SUPPORTED = {lang.value for lang in Lang}


def freeze_table(table: Mapping[str, Mapping[str, object]]) -> Mapping[str, Mapping[str, object]]:
    """Congela uma tabela de traduções: linhas somente leitura e listas como tuplas."""
    frozen = {}
    for lang, row in table.items():
        frozen[lang] = MappingProxyType(
            {key: tuple(value) if isinstance(value, list) else value for key, value in row.items()}
        )
    return MappingProxyType(frozen)


def is_supported_lang(value: Optional[str]) -> bool:
    return value in _SUPPORTED


def get_languages() -> dict[str, str]:
    return {lang.value: name for lang, name in LANGUAGE_NAMES.items()}


def relative_path(url: Optional[str]) -> str:
    """Caminho de uma URL (sem query nem fragmento), sem a primeira barra."""
    try:
        path = urlsplit(url or "").path
    except ValueError:
        # netloc malformado, ex.: "http://[::1/br"
        return ""
    return path[1:] if path.startswith("/") else path


def get_lang_from_url(url: Optional[str]) -> Lang:
    """Resolve o idioma pelo primeiro segmento do caminho; nunca falha."""
    first = relative_path(url).split("/", 1)[0]
    if is_supported_lang(first):
        return Lang(first)
    return DEFAULT_LANG


def get_slug_from_url(url: str) -> Optional[str]:
    """Retorna o segundo segmento de ``<idioma>/<slug>``, sem validar o idioma."""
    parts = url.split("/")
    if len(parts) < 2:
        return None
    return parts[1]


def use_translations(
    lang: str,
    translations: Optional[TranslationTable[V]] = None,
) -> Callable[[str], Optional[V]]:
    """Cria a função de lookup ``t(key)`` presa a um idioma e a uma tabela.

    Sem ``translations`` a tabela ``ui`` é usada. Valores vazios ou ausentes
    no idioma pedido caem no idioma padrão; ausente nos dois retorna ``None``.
    """
    if translations is None:
        from data.ui import ui as translations

    row = translations.get(lang) or {}
    fallback = translations.get(DEFAULT_LANG.value) or {}

    def t(key: str) -> Optional[V]:
        return row.get(key) or fallback.get(key)

    return t


def resolve_table(lang: str, translations: TranslationTable[V]) -> dict[str, V]:
    """Materializa a tabela inteira de um idioma, já com o fallback aplicado."""
    t = use_translations(lang, translations)
    keys = dict.fromkeys(translations.get(DEFAULT_LANG.value, {}))
    keys.update(dict.fromkeys(translations.get(lang, {})))
    resolved: dict[str, V] = {}
    for key in keys:
        value = t(key)
        if value is not None:
            resolved[key] = value
    return resolved


def localize_path(path: str, lang: str) -> str:
    """Prefixa um caminho do site com o idioma (o idioma padrão não tem prefixo)."""
    clean = "/" + path.strip("/")
    if lang == DEFAULT_LANG.value or not is_supported_lang(lang):
        return clean
    if clean == "/":
        return f"/{lang}/"
    return f"/{lang}{clean}"

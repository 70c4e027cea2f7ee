from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import APIRouter, Depends, HTTPException, Query

from data.about import about
from data.ui import ui
from services.i18n import (
    DEFAULT_LANG,
    Lang,
    get_lang_from_url,
    get_languages,
    get_slug_from_url,
    relative_path,
    resolve_table,
    use_translations,
)
from .common import get_page_lang, ok

router = APIRouter()
logger = logging.getLogger("portfolio-api")

TABLES: Mapping[str, Mapping[str, Mapping[str, Any]]] = {
    "ui": ui,
    "about": about,
}


def _get_table(name: str) -> Mapping[str, Mapping[str, Any]]:
    table = TABLES.get(name)
    if table is None:
        raise HTTPException(status_code=404, detail=f"Tabela de traduções desconhecida: {name}.")
    return table


@router.get("/v1/i18n/languages")
async def i18n_languages() -> dict[str, Any]:
    return ok({"languages": get_languages(), "default": DEFAULT_LANG.value})


@router.get("/v1/i18n/resolve")
async def i18n_resolve(
    path: str = Query(..., description="Caminho ou URL da página"),
) -> dict[str, Any]:
    """Resolve idioma e slug de um caminho no formato ``<idioma>/<slug>``."""
    return ok({
        "lang": get_lang_from_url(path).value,
        "slug": get_slug_from_url(relative_path(path)),
    })


@router.get("/v1/i18n/{table}")
async def i18n_table(table: str, lang: Lang = Depends(get_page_lang)) -> dict[str, Any]:
    translations = _get_table(table)
    return ok({
        "lang": lang.value,
        "table": table,
        "strings": resolve_table(lang.value, translations),
    })


@router.get("/v1/i18n/{table}/{key}")
async def i18n_lookup(table: str, key: str, lang: Lang = Depends(get_page_lang)) -> dict[str, Any]:
    t = use_translations(lang.value, _get_table(table))
    value = t(key)
    if value is None:
        logger.warning("translation_missing", extra={"lang": lang.value, "key": key})
        raise HTTPException(status_code=404, detail=f"Chave de tradução não encontrada: {key}.")
    return ok({"lang": lang.value, "key": key, "value": value})

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends

from data.about import about, get_experiences
from data.bento_items import get_bento_items
from data.presentation import presentation
from data.projects import projects
from services.i18n import Lang, localize_path, use_translations
from .common import get_page_lang, ok

router = APIRouter()

NAV_ITEMS = (
    ("nav.home", "/"),
    ("nav.about", "/about"),
    ("nav.projects", "/projects"),
    ("nav.blog", "/posts"),
    ("nav.contact", "/contact"),
)


def build_navigation(lang: str) -> list[dict[str, str]]:
    t = use_translations(lang)
    return [{"label": t(key), "href": localize_path(href, lang)} for key, href in NAV_ITEMS]


def _page(lang: Lang, **sections: Any) -> dict[str, Any]:
    return ok({"lang": lang.value, "nav": build_navigation(lang.value), **sections})


@router.get("/v1/pages/home")
async def home_page(lang: Lang = Depends(get_page_lang)) -> dict[str, Any]:
    """Grade bento da página inicial."""
    t = use_translations(lang.value)
    items = []
    for item in get_bento_items(t):
        payload = item.to_payload()
        if item.link.startswith("/"):
            payload["link"] = localize_path(item.link, lang.value)
        items.append(payload)
    return _page(lang, bento=items)


@router.get("/v1/pages/about")
async def about_page(lang: Lang = Depends(get_page_lang)) -> dict[str, Any]:
    t = use_translations(lang.value)
    ta = use_translations(lang.value, about)
    timeline = get_experiences(lang.value)
    return _page(
        lang,
        title=t("about.title"),
        description=t("about.description"),
        skills={
            "title": ta("skills.title"),
            "subtitle": ta("skills.subtitle"),
            "frontend": {"label": ta("skills.frontend"), "items": ta("frontend.skills")},
            "backend": {"label": ta("skills.backend"), "items": ta("backend.skills")},
        },
        experience={
            "title": timeline["title"],
            "subtitle": timeline["subtitle"],
            "responsibilities_label": t("experience.responsibilities"),
            "items": [asdict(item) for item in timeline["items"]],
        },
        education={
            "title": t("education.technologist.title"),
            "institution": t("education.technologist.institution"),
            "period": t("education.technologist.period"),
            "description": t("education.technologist.description"),
            "subjects": t("education.technologist.subjects"),
        },
        connect={
            "title": ta("connect.title"),
            "subtitle": ta("connect.subtitle"),
            "professional_network": ta("connect.professional_network"),
            "open_source_projects": ta("connect.open_source_projects"),
            "direct_contact": ta("connect.direct_contact"),
            "cta": ta("connect.connect_with_me"),
        },
    )


@router.get("/v1/pages/projects")
async def projects_page(lang: Lang = Depends(get_page_lang)) -> dict[str, Any]:
    t = use_translations(lang.value)
    return _page(
        lang,
        title=t("projects.title"),
        description=t("projects.description"),
        projects=[project.to_payload(lang.value) for project in projects],
    )


@router.get("/v1/pages/contact")
async def contact_page(lang: Lang = Depends(get_page_lang)) -> dict[str, Any]:
    t = use_translations(lang.value)
    return _page(
        lang,
        title=t("footer.title"),
        description=t("contact.description"),
        mail=presentation.mail,
        socials=[asdict(s) for s in presentation.socials],
        quick_info={
            "title": t("contact.quickInfo"),
            "location": {"label": t("contact.location"), "value": t("contact.locationValue")},
            "languages": {"label": t("contact.languages"), "value": t("contact.languagesValue")},
            "availability": {"label": t("contact.availability"), "value": t("contact.availabilityValue")},
        },
    )


@router.get("/v1/presentation")
async def presentation_data() -> dict[str, Any]:
    return ok(presentation.to_payload())

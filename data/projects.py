from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from services.i18n import DEFAULT_LANG

_PROJECT_IMAGES = {
    "expo-router-auth": "/1.gif",
    "photos-gallery": "/2.png",
    "laravel-payments-api": "/5.png",
    "biblioteca-de-zines": "/4.gif",
    "caju": "/3.png",
    "app-generator": "/6.png",
    "local-first": "/7.gif",
}


@dataclass(frozen=True)
class Project:
    title: str
    techs: tuple[str, ...]
    link: str
    description: Mapping[str, str]
    is_coming_soon: bool = False
    image: Optional[str] = None

    def description_for(self, lang: str) -> str:
        return self.description.get(lang) or self.description.get(DEFAULT_LANG.value, "")

    def to_payload(self, lang: str) -> dict:
        return {
            "title": self.title,
            "techs": list(self.techs),
            "link": self.link,
            "description": self.description_for(lang),
            "is_coming_soon": self.is_coming_soon,
            "image": self.image,
        }


def _project(title: str, techs: list[str], link: str, image_key: str, en: str, br: str) -> Project:
    return Project(
        title=title,
        techs=tuple(techs),
        link=link,
        image=_PROJECT_IMAGES[image_key],
        description=MappingProxyType({"en": en, "br": br}),
    )


projects: tuple[Project, ...] = (
    _project(
        "App Asset Generator",
        ["Astro", "React", "Tailwind CSS", "TypeScript"],
        "https://github.com/lumamontes/app-asset-generator",
        "app-generator",
        en="A web-based tool to generate app assets (icons, splash screens, and favicons) from emojis or images with custom backgrounds.",
        br="Uma ferramenta web para gerar assets de aplicativos (ícones, splash screens e favicons) a partir de emojis ou imagens com fundos personalizados.",
    ),
    _project(
        "LocalSync RN",
        ["React Native", "Legend State", "TypeScript"],
        "https://github.com/lumamontes/local-first-legend-state",
        "local-first",
        en="A local-first React Native app built with Legend State, featuring offline functionality and automatic synchronization.",
        br="Um aplicativo React Native local-first construído com Legend State, com funcionalidade offline e sincronização automática.",
    ),
    _project(
        "Expo Router Auth",
        ["React Native", "Expo Router", "TypeScript"],
        "https://github.com/lumamontes/expo-router-auth",
        "expo-router-auth",
        en="A React Native app showcasing an authentication flow.",
        br="Um aplicativo React Native demonstrando um fluxo de autenticação.",
    ),
    _project(
        "Image Gallery",
        ["Next.js", "Contentful", "TypeScript"],
        "https://github.com/lumamontes/photos-gallery",
        "photos-gallery",
        en="A photo gallery built with Next.js, showcasing image collections with a CMS integration.",
        br="Uma galeria de fotos construída com Next.js, exibindo coleções de imagens com integração CMS.",
    ),
    _project(
        "Laravel Payments API",
        ["PHP", "Laravel", "Sanctum", "PHPUnit"],
        "https://github.com/lumamontes/laravel-payments-api",
        "laravel-payments-api",
        en="An API for managing invoices and transactions in a financial system.",
        br="Uma API para gerenciar faturas e transações financeiras",
    ),
    _project(
        "Biblioteca de Zines",
        ["TypeScript", "Next.js", "Tailwind CSS"],
        "https://github.com/lumamontes/biblioteca-de-zines",
        "biblioteca-de-zines",
        en="An archive and sharing platform for zines by independent artists.",
        br="Uma plataforma para arquivar e compartilhar zines de artistas independentes.",
    ),
    _project(
        "Caju Replica App",
        ["TypeScript", "Expo", "React Native", "SQLite"],
        "https://github.com/lumamontes/caju",
        "caju",
        en="A React Native app replicating functionalities of the Caju application.",
        br="Um aplicativo React Native replicando funcionalidades do aplicativo Caju.",
    ),
)

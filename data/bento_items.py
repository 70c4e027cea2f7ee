from __future__ import annotations

from dataclasses import asdict, dataclass
from html import escape
from typing import Callable, Literal, Optional

BentoSize = Literal["small", "medium", "large"]
BentoTheme = Literal["terminal", "pixel", "crt", "default"]

TranslationFunction = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class BentoItem:
    title: str
    description: str
    link: str
    size: BentoSize
    icon: Optional[str] = None
    theme: Optional[BentoTheme] = None
    custom_content: Optional[str] = None
    component: Optional[str] = None

    def to_payload(self) -> dict:
        return asdict(self)


def _paragraph_block(text: Optional[str], spacing: str = "space-y-3") -> str:
    return (
        f'<div class="{spacing} h-full flex flex-col">'
        f'<p class="text-sm opacity-75 leading-relaxed flex-1">{escape(text or "")}</p>'
        "</div>"
    )


def get_bento_items(t: TranslationFunction) -> list[BentoItem]:
    """Monta a grade da página inicial a partir de uma função de tradução."""
    return [
        BentoItem(
            title=t("presentation.title"),
            description=t("presentation.description"),
            icon="◉",
            link="#",
            size="large",
            theme="terminal",
            component="HeroBentoItem",
        ),
        BentoItem(
            title=t("about.me"),
            description=t("about.me.description"),
            icon="⚡",
            link="#",
            size="medium",
            theme="default",
            component="AboutMeBentoItem",
        ),
        BentoItem(
            title=t("nav.projects"),
            description=t("projects.description"),
            icon="◈",
            link="/projects",
            size="small",
            theme="pixel",
            custom_content=_paragraph_block(t("projects.description")),
        ),
        BentoItem(
            title=t("radio.title"),
            description=t("radio.description"),
            link="#",
            size="medium",
        ),
        BentoItem(
            title=t("nav.experience"),
            description=t("experience.small_description"),
            icon="◦",
            link="/about",
            size="small",
            theme="default",
        ),
        BentoItem(
            title=t("coffe.title"),
            description=t("coffe.description"),
            icon="☕",
            link="#",
            size="small",
            theme="pixel",
            component="CoffeeBentoItem",
        ),
        BentoItem(
            title=t("nav.blog"),
            description=t("blog.description"),
            icon="◊",
            link="/posts",
            size="medium",
            theme="crt",
            custom_content=_paragraph_block(t("blog.description"), spacing="space-y-4"),
        ),
        BentoItem(
            title=t("nav.contact"),
            description=t("footer.title"),
            icon="◈",
            link="/contact",
            size="small",
            theme="pixel",
            custom_content=(
                '<div class="space-y-3 h-full flex flex-col">'
                f'{escape(t("about.connect.title") or "")}'
                "</div>"
            ),
        ),
        BentoItem(
            title=t("currently.learning"),
            description=t("currently.learning.description"),
            icon="📚",
            link="#",
            size="small",
            theme="terminal",
            component="LearningBentoItem",
        ),
    ]

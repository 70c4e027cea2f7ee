from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Social:
    label: str
    link: str


@dataclass(frozen=True)
class Presentation:
    mail: str
    title: str
    description: str
    socials: tuple[Social, ...]

    def to_payload(self) -> dict:
        return asdict(self)


presentation = Presentation(
    mail="lumagoesmontes@gmail.com",
    title="Hi, I’m Luma 👋",
    description=(
        "Hi! My name is Luma. I'm a software developer from Macapá - Amapá, Brazil. "
        "I work at Proesc, building solutions to helping improve educational needs from "
        "educational instituications in multi-disciplinary projects."
    ),
    socials=(
        Social(label="Email", link="mailto:lumagoesmontes@gmail.com"),
        Social(label="Linkedin", link="https://www.linkedin.com/in/lumamontes/"),
        Social(label="Github", link="https://github.com/lumamontes"),
    ),
)

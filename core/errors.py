from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from uuid import uuid4


HTTP_TO_SITE_CODE = {
    400: "SITE-400",
    404: "SITE-404",
    422: "SITE-422",
    500: "SITE-500",
}


@dataclass(frozen=True)
class SiteError:
    error_id: str
    error_code: str
    message: str
    retryable: bool

    def to_response(self) -> dict:
        return {
            "id": self.error_id,
            "code": self.error_code,
            "message": self.message,
            "retryable": self.retryable,
        }


def build_error(status_code: int, message: str, *, retryable: bool = False) -> SiteError:
    return SiteError(
        error_id=f"err_{uuid4().hex[:12]}",
        error_code=HTTP_TO_SITE_CODE.get(status_code, "SITE-500"),
        message=message,
        retryable=retryable,
    )


class ContentValidationError(Exception):
    """Post com frontmatter inválido; identifica o arquivo e os campos problemáticos."""

    def __init__(self, source: str, fields: Sequence[str], detail: str = "") -> None:
        self.source = source
        self.fields = list(fields)
        self.detail = detail
        message = f"Frontmatter inválido em {source}: {', '.join(self.fields) or 'documento'}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

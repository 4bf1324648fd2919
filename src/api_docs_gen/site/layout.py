"""Site-wide layout options for the documentation front-end shell."""

import json
from pathlib import Path

from pydantic import BaseModel

from api_docs_gen.config import DocsSettings


class NavLogo(BaseModel):
    src: str
    alt: str


class LayoutOptions(BaseModel):
    """Nav title and branding consumed by the docs layout."""

    title: str
    logo: NavLogo | None = None


def base_options(settings: DocsSettings) -> LayoutOptions:
    logo = NavLogo(src=settings.logo, alt=settings.site_title) if settings.logo else None
    return LayoutOptions(title=settings.site_title, logo=logo)


def write_layout(path: Path, options: LayoutOptions) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"nav": options.model_dump(exclude_none=True)}
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

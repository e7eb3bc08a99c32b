"""Page payload handed to the template layer."""

from dataclasses import dataclass, field

from displaymd.sidebar import NavEntry


@dataclass(frozen=True)
class Page:
    title: str
    content: str
    sidebar: list[NavEntry] = field(default_factory=list)


def assemble_page(title: str, content: str, sidebar: list[NavEntry]) -> Page:
    """Bundle title, raw content and navigation; content is not transformed."""
    return Page(title=title, content=content, sidebar=list(sidebar))

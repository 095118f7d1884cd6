from __future__ import annotations

import enum
import html
import logging
from dataclasses import dataclass
from typing import Optional

from ...core.i18n import DEFAULT_LOCALE, MessageCatalog


log = logging.getLogger(__name__)

WINDOW_TITLE = "EXIF Paranoia"
TAILWIND_CDN = "https://cdn.tailwindcss.com"

DRAG_HERE_KEY = "blank-slate-drag-here"
SELECT_FOLDER_KEY = "blank-slate-select-folder"


class Theme(str, enum.Enum):
    LIGHT = "light"
    DARK = "dark"


def theme_class(theme: Optional[Theme]) -> Optional[str]:
    """CSS class forcing ``theme`` on the document; ``None`` follows the system theme."""
    return theme.value if theme is not None else None


def lookup(catalog: MessageCatalog, key: str) -> str:
    # UI keys ship with the resources; a miss is a content bug, so show the key
    text = catalog.get(key)
    if text is None:
        log.warning("Missing translation for %s in %s", key, catalog)
        return key
    return text


@dataclass(frozen=True)
class BlankSlate:
    locale: str
    drag_here: str
    select_folder: str
    theme: Optional[Theme] = None

    @classmethod
    def from_catalog(cls, catalog: MessageCatalog, theme: Optional[Theme] = None) -> "BlankSlate":
        locale = catalog.locale or DEFAULT_LOCALE
        return cls(
            locale=str(locale),
            drag_here=lookup(catalog, DRAG_HERE_KEY),
            select_folder=lookup(catalog, SELECT_FOLDER_KEY),
            theme=theme,
        )


def render_head(view: BlankSlate, debug: bool = False) -> str:
    head = [
        '<meta charset="utf-8">',
        f"<title>{html.escape(WINDOW_TITLE)}</title>",
        f'<script src="{TAILWIND_CDN}"></script>',
    ]
    cls = theme_class(view.theme)
    if cls:
        head.append(
            "<script>tailwind.config = { darkMode: 'class' }; "
            f"document.documentElement.classList.add('{cls}')</script>"
        )
    if not debug:
        head.append(
            "<script>document.addEventListener('contextmenu', "
            "(e) => e.preventDefault())</script>"
        )
    return "\n".join(head)


def render_page(view: BlankSlate, debug: bool = False) -> str:
    """The whole placeholder screen as an HTML document."""
    lang = html.escape(view.locale, quote=True)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        f"{render_head(view, debug=debug)}\n"
        "</head>\n"
        "<body>\n"
        f'<main class="container mx-auto bg-white dark:bg-slate-800" lang="{lang}">\n'
        '  <div class="grid h-screen content-center text-slate-900 dark:text-white">\n'
        '    <div class="text-center cursor-default select-none">\n'
        f'      <p class="text-lg">{html.escape(view.drag_here)}</p>\n'
        f'      <p class="text-base text-slate-500 dark:text-slate-400">{html.escape(view.select_folder)}</p>\n'
        "    </div>\n"
        "  </div>\n"
        "</main>\n"
        "</body>\n"
        "</html>\n"
    )

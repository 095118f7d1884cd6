from __future__ import annotations

from .view import BlankSlate, Theme, render_page, theme_class

__all__ = ["BlankSlate", "Theme", "render_page", "theme_class"]

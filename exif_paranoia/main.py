from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import Settings, get_settings
from .core.errors import InvalidLocaleError, LocalizationError
from .core.i18n import MessageCatalog, get_message_catalog, pick_locale
from .core.langid import LocaleTag
from .core.logging_config import setup_logging
from .features.blank_slate import BlankSlate, Theme, render_page


def _locale_arg(value: str) -> LocaleTag:
    try:
        return LocaleTag.parse(value)
    except InvalidLocaleError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exif-paranoia",
        description="Shows the EXIF Paranoia drop-files placeholder screen",
    )
    themes = parser.add_mutually_exclusive_group()
    themes.add_argument(
        "--light-theme",
        action="store_true",
        help="Ignores system theme and uses light theme",
    )
    themes.add_argument(
        "--dark-theme",
        action="store_true",
        help="Ignores system theme and uses dark theme",
    )
    parser.add_argument("-l", "--locale", type=_locale_arg, help="Explicitly sets the locale")
    parser.add_argument("-o", "--output", type=Path, help="Write the page to a file instead of stdout")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def pick_theme(args: argparse.Namespace, settings: Settings) -> Optional[Theme]:
    if args.light_theme:
        return Theme.LIGHT
    if args.dark_theme:
        return Theme.DARK
    return Theme(settings.THEME) if settings.THEME else None


def make_catalog(args: argparse.Namespace, settings: Settings, log: logging.Logger) -> MessageCatalog:
    requested = pick_locale(args.locale or settings.locale_override, fallback=settings.default_locale)
    log.debug("Requested locale: %s", requested)
    return get_message_catalog(
        requested,
        root=settings.RESOURCES_DIR,
        filename=settings.RESOURCE_FILENAME,
        default=settings.default_locale,
        logger=log.getChild("i18n"),
    )


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    debug = args.debug or settings.DEBUG
    log = setup_logging(debug=debug, log_file=settings.LOG_FILE)
    log.debug("App options: %s", vars(args))

    try:
        catalog = make_catalog(args, settings, log)
    except LocalizationError as e:
        # Nothing has been rendered yet; a broken deployment stops here
        log.debug("Start-up failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    view = BlankSlate.from_catalog(catalog, theme=pick_theme(args, settings))
    page = render_page(view, debug=debug)
    if args.output:
        args.output.write_text(page, encoding="utf-8")
        log.info("Wrote %s (%s)", args.output, view.locale)
    else:
        sys.stdout.write(page)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .langid import LocaleTag


log = logging.getLogger(__name__)


def filter_matches(requested: Sequence[LocaleTag], available: Iterable[LocaleTag]) -> List[LocaleTag]:
    """Return every available locale matching the requested ones, best matches first.

    For each requested tag the available tags are tried with progressively
    looser rules: exact match, available tag as a range, likely-subtag
    maximised request, variants dropped, region dropped and re-maximised,
    then any region of the same language. An available tag is returned at
    most once.
    """
    supported: List[LocaleTag] = []
    remaining = sorted(set(available), key=str)

    def take(req: LocaleTag, self_as_range: bool, other_as_range: bool) -> None:
        nonlocal remaining
        left = []
        for locale in remaining:
            if locale.matches(req, self_as_range, other_as_range):
                supported.append(locale)
            else:
                left.append(locale)
        remaining = left

    for req in requested:
        # 1) exact match
        take(req, False, False)
        # 2) available locales as ranges: "en" serves "en-GB"
        take(req, True, False)
        # 3) maximised request: "en" -> "en-Latn-US"
        maximized = req.maximize()
        if maximized != req:
            req = maximized
            take(req, True, False)
        # 4) variants as ranges
        req = req.without_variants()
        take(req, True, True)
        # 5) likely region for the bare language
        req = req.without_region()
        maximized = req.maximize()
        if maximized != req:
            req = maximized
            take(req, True, False)
        # 6) any region
        req = req.without_region()
        take(req, True, True)

    return supported


def negotiate_languages(
    requested: Sequence[LocaleTag],
    available: Iterable[LocaleTag],
    default: Optional[LocaleTag] = None,
) -> List[LocaleTag]:
    """Filtering negotiation with ``default`` as the last-resort candidate.

    The default is only used when nothing else matched, and only if it is
    itself available.
    """
    available = set(available)
    supported = filter_matches(requested, available)
    if not supported and default is not None and default in available:
        log.debug("No match for %s, falling back to %s", [str(r) for r in requested], default)
        supported.append(default)
    return supported

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from babel.core import get_global, parse_locale

from .errors import InvalidLocaleError


# Only letters, digits and the two subtag separators are accepted; babel would
# otherwise quietly strip ".encoding" and "@modifier" suffixes.
_TAG_CHARS_RE = re.compile(r"^[A-Za-z0-9]+(?:[-_][A-Za-z0-9]+)*$")

UNDETERMINED = "und"


@dataclass(frozen=True)
class LocaleTag:
    """A normalised language identifier (``en``, ``en-GB``, ``sr-Latn-RS``).

    Two tags are equal iff their normalised subtags are equal, so parsing
    ``EN_gb`` and ``en-GB`` gives the same tag.
    """

    language: str
    script: Optional[str] = None
    region: Optional[str] = None
    variants: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, text: str) -> "LocaleTag":
        if not isinstance(text, str) or not _TAG_CHARS_RE.match(text):
            raise InvalidLocaleError(text)
        try:
            lang, region, script, variant = parse_locale(text.replace("_", "-"), sep="-")[:4]
        except ValueError as e:
            raise InvalidLocaleError(text) from e
        if not lang.isascii() or not (2 <= len(lang) <= 3 or 5 <= len(lang) <= 8):
            raise InvalidLocaleError(text)
        variants = (variant.lower(),) if variant else ()
        return cls(language=lang, script=script, region=region, variants=variants)

    @classmethod
    def from_posix(cls, value: Optional[str]) -> Optional["LocaleTag"]:
        """Parse a POSIX locale value such as ``fr_FR.UTF-8``; ``None`` if unusable."""
        if not value:
            return None
        value = value.split("@", 1)[0].split(".", 1)[0]
        try:
            return cls.parse(value)
        except InvalidLocaleError:
            return None

    def __str__(self) -> str:
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "-".join(parts)

    def without_variants(self) -> "LocaleTag":
        return replace(self, variants=())

    def without_region(self) -> "LocaleTag":
        return replace(self, region=None)

    def maximize(self) -> "LocaleTag":
        """Fill in script and region from CLDR likely subtags (``en`` -> ``en-Latn-US``).

        Returns ``self`` unchanged when no likely subtags are known.
        """
        likely = get_global("likely_subtags")
        lang = self.language
        candidates = []
        if self.script and self.region:
            candidates.append(f"{lang}_{self.script}_{self.region}")
        if self.region:
            candidates.append(f"{lang}_{self.region}")
        if self.script:
            candidates.append(f"{lang}_{self.script}")
        candidates.append(lang)

        for key in candidates:
            found = likely.get(key)
            if found:
                break
        else:
            return self

        _, region, script, _ = parse_locale(found)[:4]
        return replace(self, script=self.script or script, region=self.region or region)

    def matches(self, other: "LocaleTag", self_as_range: bool = False, other_as_range: bool = False) -> bool:
        """Compare subtag by subtag; a missing subtag on a side used as a range matches anything."""

        def subtag_matches(a: Optional[str], b: Optional[str]) -> bool:
            return (self_as_range and a is None) or (other_as_range and b is None) or a == b

        language_ok = (
            (self_as_range and self.language == UNDETERMINED)
            or (other_as_range and other.language == UNDETERMINED)
            or self.language == other.language
        )
        variants_ok = (
            (self_as_range and not self.variants)
            or (other_as_range and not other.variants)
            or self.variants == other.variants
        )
        return (
            language_ok
            and subtag_matches(self.script, other.script)
            and subtag_matches(self.region, other.region)
            and variants_ok
        )

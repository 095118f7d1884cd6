from __future__ import annotations

from typing import List

from exif_paranoia.core.langid import LocaleTag
from exif_paranoia.core.negotiation import filter_matches, negotiate_languages


EN = LocaleTag("en")


def tags(*names: str) -> List[LocaleTag]:
    return [LocaleTag.parse(name) for name in names]


def test_exact_match_comes_before_base_language() -> None:
    result = negotiate_languages(tags("en-GB"), tags("en", "en-GB", "fr"), EN)
    assert result == tags("en-GB", "en")


def test_base_language_serves_regional_request() -> None:
    assert negotiate_languages(tags("fr-CA"), tags("fr", "en"), EN) == tags("fr")


def test_likely_region_preferred_over_other_regions() -> None:
    result = filter_matches(tags("fr-CA"), tags("fr", "fr-FR", "en"))
    assert result == tags("fr", "fr-FR")


def test_any_region_of_the_same_language_matches() -> None:
    assert filter_matches(tags("en-US"), tags("en-GB", "fr")) == tags("en-GB")


def test_variant_request_matches_plain_region() -> None:
    assert filter_matches(tags("de-DE-1996"), tags("de-DE", "fr")) == tags("de-DE")


def test_each_available_locale_returned_once() -> None:
    result = filter_matches(tags("en-GB", "en"), tags("en", "en-GB"))
    assert result == tags("en-GB", "en")


def test_default_used_when_nothing_matches() -> None:
    assert negotiate_languages(tags("de"), tags("fr", "en"), EN) == [EN]


def test_default_not_appended_when_something_matched() -> None:
    assert negotiate_languages(tags("fr"), tags("fr", "en"), EN) == tags("fr")


def test_default_requires_availability() -> None:
    assert negotiate_languages(tags("de"), tags("fr"), EN) == []
    assert negotiate_languages(tags("de"), [], EN) == []


def test_no_default() -> None:
    assert negotiate_languages(tags("de"), tags("en")) == []

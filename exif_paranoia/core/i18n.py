from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Set, Tuple, Union

from babel import default_locale
from fluent.runtime import FluentBundle
from fluent.syntax import FluentParser, ast as FTL

from .errors import InvalidLocaleError, MessageNotFoundError, ResourceLoadError, ResourceParseError
from .langid import LocaleTag
from .negotiation import negotiate_languages


log = logging.getLogger(__name__)

FTL_RESOURCES_DIR = "res"
FTL_RESOURCE_FILENAME = "messages.ftl"
DEFAULT_LOCALE = LocaleTag("en")
POSIX_VARIANT = "posix"

PathLike = Union[str, os.PathLike]


class MessageCatalog:
    """Read-only message lookup over the resources of a negotiated locale chain.

    ``locales`` is the negotiated order, most preferred first. When several
    resources define the same message the one from the earliest locale wins.
    """

    def __init__(
        self,
        locales: Sequence[LocaleTag] = (),
        resources: Sequence[FTL.Resource] = (),
        use_isolating: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._locales: Tuple[LocaleTag, ...] = tuple(locales)
        self._log = logger or log
        # The bundle needs at least one locale for plural rules and number formats
        bundle_locales = [str(tag) for tag in self._locales]
        if str(DEFAULT_LOCALE) not in bundle_locales:
            bundle_locales.append(str(DEFAULT_LOCALE))
        self._bundle = FluentBundle(bundle_locales, use_isolating=use_isolating)
        self._resource_count = 0
        for resource in resources:
            self._bundle.add_resource(resource)
            self._resource_count += 1

    @property
    def locales(self) -> Tuple[LocaleTag, ...]:
        return self._locales

    @property
    def locale(self) -> Optional[LocaleTag]:
        """The most preferred locale, or ``None`` for an empty catalog."""
        return self._locales[0] if self._locales else None

    @property
    def resource_count(self) -> int:
        return self._resource_count

    def has_message(self, key: str) -> bool:
        return self._bundle.has_message(key)

    def get(self, key: str, **args: Any) -> Optional[str]:
        """Format message ``key``; ``None`` if no resource defines a value for it."""
        if not self._bundle.has_message(key):
            return None
        message = self._bundle.get_message(key)
        if message.value is None:
            return None
        text, errors = self._bundle.format_pattern(message.value, args or None)
        for err in errors:
            self._log.warning("Error formatting message %s: %s", key, err)
        return str(text)

    def format(self, key: str, **args: Any) -> str:
        text = self.get(key, **args)
        if text is None:
            raise MessageNotFoundError(key)
        return text

    def __repr__(self) -> str:
        return f"MessageCatalog(locales={[str(tag) for tag in self._locales]!r})"


def list_available_locales(root: Optional[PathLike] = None, logger: Optional[logging.Logger] = None) -> Set[LocaleTag]:
    """Locales with a sub-directory under the resources root.

    A missing or unreadable root gives an empty set; entries whose names are
    not canonical language tags (``en-GB``, not ``en_gb``) are skipped.
    """
    logger = logger or log
    root = Path(root if root is not None else FTL_RESOURCES_DIR)
    try:
        names = os.listdir(root)
    except OSError as e:
        logger.debug("Cannot read resources directory %s: %s", root, e)
        return set()

    available: Set[LocaleTag] = set()
    for name in names:
        try:
            tag = LocaleTag.parse(name)
        except InvalidLocaleError:
            logger.debug("Skipping %s: not a locale identifier", name)
            continue
        # Resource paths are built from the canonical form, so the name must be it
        if str(tag) != name:
            logger.debug("Skipping %s: directory should be named %s", name, tag)
            continue
        available.add(tag)
    return available


def resource_path(root: PathLike, locale: LocaleTag, filename: str = FTL_RESOURCE_FILENAME) -> Path:
    """``<root>/<locale>/<filename>``, refusing anything that resolves outside ``root``."""
    root = Path(root)
    path = root / str(locale) / filename
    if not path.resolve().is_relative_to(root.resolve()):
        raise ResourceLoadError(path, "path escapes the resources directory")
    return path


def parse_resource(source: str, path: PathLike) -> FTL.Resource:
    """Parse FTL ``source``; any junk entry makes the whole resource invalid."""
    resource = FluentParser().parse(source)
    errors: List[str] = []
    for entry in resource.body:
        if not isinstance(entry, FTL.Junk):
            continue
        for annotation in entry.annotations:
            offset = annotation.span.start if annotation.span else entry.span.start
            line, column = _line_column(source, offset)
            errors.append(f"{line}:{column}: {annotation.code}: {annotation.message}")
    if errors:
        raise ResourceParseError(path, errors)
    return resource


def load_resource(path: Path) -> FTL.Resource:
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadError(path, str(e)) from e
    return parse_resource(source, path)


def get_message_catalog(
    requested: LocaleTag,
    root: Optional[PathLike] = None,
    filename: Optional[str] = None,
    default: Optional[LocaleTag] = None,
    logger: Optional[logging.Logger] = None,
) -> MessageCatalog:
    """Negotiate ``requested`` against the locales on disk and load their resources.

    Raises ResourceLoadError or ResourceParseError when a negotiated locale's
    resource is missing, unreadable or malformed.
    """
    logger = logger or log
    root = Path(root if root is not None else FTL_RESOURCES_DIR)
    filename = filename or FTL_RESOURCE_FILENAME
    default = default or DEFAULT_LOCALE

    available = list_available_locales(root, logger=logger)
    logger.debug("Available locales: %s", sorted(str(tag) for tag in available))
    supported = negotiate_languages([requested], available, default)
    logger.debug("Supported locales: %s", [str(tag) for tag in supported])

    resources = []
    for locale in supported:
        path = resource_path(root, locale, filename)
        logger.debug("Loading Fluent resource: %s", path)
        resources.append(load_resource(path))
    return MessageCatalog(supported, resources, logger=logger)


def pick_locale(override: Optional[LocaleTag] = None, fallback: LocaleTag = DEFAULT_LOCALE) -> LocaleTag:
    """Explicit override first, then the environment's message locale, then ``fallback``."""
    if override is not None:
        return override
    env_locale = environment_locale()
    if env_locale is not None:
        return env_locale
    return fallback


def environment_locale() -> Optional[LocaleTag]:
    """The OS message locale, or ``None`` when it is unset or C/POSIX."""
    tag = LocaleTag.from_posix(default_locale("LC_MESSAGES"))
    # babel reports C and POSIX (and so an unconfigured machine) as en_US_POSIX
    if tag is None or POSIX_VARIANT in tag.variants:
        return None
    return tag


def _line_column(source: str, offset: int) -> Tuple[int, int]:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column

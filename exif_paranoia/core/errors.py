from __future__ import annotations

from pathlib import Path
from typing import List, Union


class LocalizationError(Exception):
    """Base class for locale negotiation and resource loading failures."""


class InvalidLocaleError(LocalizationError, ValueError):
    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"Invalid locale identifier: {text!r}")


class ResourceLoadError(LocalizationError):
    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        self.path = Path(path)
        message = f"Failed to load Fluent resource: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ResourceParseError(LocalizationError):
    def __init__(self, path: Union[str, Path], errors: List[str]) -> None:
        self.path = Path(path)
        self.errors = list(errors)
        super().__init__(
            f"Failed to parse Fluent resource: {self.path}\n\n" + "\n".join(self.errors)
        )


class MessageNotFoundError(LocalizationError, LookupError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Failed to get message: {key}")

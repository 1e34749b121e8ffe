"""Image name parts and their naming rules.

An image name is made of up to four parts: ``[REGISTRY/][NAMESPACE/]REPOSITORY[:TAG]``.
Each part can be built from any non-empty string; whether it is well formed is
checked on demand with ``is_valid()`` or ``validate()``, and ``make_valid()``
rewrites the value in place into the closest conforming form.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from .errors import InvalidNamePartError

logger = logging.getLogger(__name__)

SCHEMA_SEPARATOR = "://"

NAMESPACE_MIN_LENGTH = 2
NAMESPACE_MAX_LENGTH = 255
TAG_MAX_LENGTH = 128

_WHITESPACE_PATTERN = re.compile(r"\s+", re.ASCII)

# Namespace: lowercase alphanumerics, underscore and hyphen.
_NAMESPACE_PATTERN = re.compile(r"[a-z0-9_-]+")
_NAMESPACE_INVALID_CHARS = re.compile(r"[^a-z0-9_-]")

# Repository: as namespace, plus dots.
_REPOSITORY_PATTERN = re.compile(r"[a-z0-9_.-]+")
_REPOSITORY_INVALID_CHARS = re.compile(r"[^a-z0-9_.-]")

# Tag: first char must be alphanumeric, any case.
_TAG_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9_.-]*")
_TAG_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")
_TAG_LEADING_SEPARATORS = re.compile(r"^[-_.]+")


def spaces_to_hyphens(value: str) -> str:
    """Replace each run of whitespace with a single hyphen."""
    return _WHITESPACE_PATTERN.sub("-", value)


class NamePart(ABC):
    """A single part of an image name.

    Subclasses implement ``validate`` and ``make_valid``; ``is_valid`` is derived
    from ``validate`` so the two never disagree.
    """

    kind = "part"

    def __init__(self, value: str):
        if not value:
            raise InvalidNamePartError("Illegal use of empty/null name part")
        self.value = value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamePart):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    # make_valid changes the value in place.
    __hash__ = None

    @abstractmethod
    def validate(self) -> None:
        """Raise InvalidNamePartError naming the first rule the value breaks."""

    def is_valid(self) -> bool:
        """Return whether the value follows every rule for this part."""
        try:
            self.validate()
        except InvalidNamePartError:
            return False
        return True

    @abstractmethod
    def make_valid(self) -> NamePart:
        """Rewrite the value in place towards a valid one and return self."""

    def _replace(self, value: str) -> None:
        if value != self.value:
            logger.debug(f"Repaired {self.kind} {self.value!r} -> {value!r}")
        self.value = value


class RegistryName(NamePart):
    """Registry host, optionally with port and path. Only a URL schema is rejected."""

    kind = "registry"

    def validate(self) -> None:
        if SCHEMA_SEPARATOR in self.value:
            raise InvalidNamePartError("Invalid registry: Registry must not contain a schema")

    def make_valid(self) -> RegistryName:
        index = self.value.rfind(SCHEMA_SEPARATOR)
        if index > -1:
            self._replace(self.value[index + len(SCHEMA_SEPARATOR) :])
        return self


class NamespaceName(NamePart):
    """Namespace (user or organisation) under the registry."""

    kind = "namespace"

    def validate(self) -> None:
        if not NAMESPACE_MIN_LENGTH <= len(self.value) <= NAMESPACE_MAX_LENGTH:
            raise InvalidNamePartError(
                f"Invalid namespace: Namespace must be between {NAMESPACE_MIN_LENGTH} "
                f"and {NAMESPACE_MAX_LENGTH} characters"
            )
        if self.value.startswith("-") or self.value.endswith("-"):
            raise InvalidNamePartError("Invalid namespace: Namespace must not begin or end with a hyphen")
        if "--" in self.value:
            raise InvalidNamePartError("Invalid namespace: Namespace must not contain consecutive hyphens")
        if not _NAMESPACE_PATTERN.fullmatch(self.value):
            raise InvalidNamePartError("Invalid namespace: Namespace must match [a-z0-9_-]")

    def make_valid(self) -> NamespaceName:
        value = self.value[:NAMESPACE_MAX_LENGTH]
        if not _NAMESPACE_PATTERN.fullmatch(value):
            value = _NAMESPACE_INVALID_CHARS.sub("", spaces_to_hyphens(value).lower())
        while "--" in value:
            value = value.replace("--", "-")
        value = value.strip("-")
        value = value.ljust(NAMESPACE_MIN_LENGTH, "0")
        self._replace(value)
        return self


class RepositoryName(NamePart):
    """Repository (image) name."""

    kind = "repository"

    def validate(self) -> None:
        if not _REPOSITORY_PATTERN.fullmatch(self.value):
            raise InvalidNamePartError("Invalid repository: Repository must match [a-z0-9_.-]")

    def make_valid(self) -> RepositoryName:
        if not self.is_valid():
            self._replace(_REPOSITORY_INVALID_CHARS.sub("", spaces_to_hyphens(self.value).lower()))
        return self


class TagName(NamePart):
    """Tag following the last colon of an image name."""

    kind = "tag"

    def validate(self) -> None:
        if not _TAG_PATTERN.fullmatch(self.value):
            raise InvalidNamePartError("Invalid tag: Tag must match [a-zA-Z0-9][a-zA-Z0-9_.-]*")
        if len(self.value) > TAG_MAX_LENGTH:
            raise InvalidNamePartError(f"Invalid tag: Tag must be between 1 and {TAG_MAX_LENGTH} characters")

    def make_valid(self) -> TagName:
        value = _TAG_LEADING_SEPARATORS.sub("", self.value[:TAG_MAX_LENGTH])
        if not _TAG_PATTERN.fullmatch(value):
            value = _TAG_INVALID_CHARS.sub("", spaces_to_hyphens(value))
            # Dropping characters can expose a new leading separator.
            value = _TAG_LEADING_SEPARATORS.sub("", value)
        self._replace(value)
        return self

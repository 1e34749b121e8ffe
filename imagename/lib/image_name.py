"""Compose, validate and repair full image names."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .errors import InvalidNamePartError
from .parts import NamePart, NamespaceName, RegistryName, RepositoryName, TagName
from .splitter import split_image_name

logger = logging.getLogger(__name__)


class ImageName:
    """An image name ``[REGISTRY/][NAMESPACE/]REPOSITORY[:TAG]`` built from optional parts.

    Accessors return None for a part that was never set. Calling part methods on
    that None (e.g. ``image.repository.make_valid()``) raises AttributeError; a
    missing part is deliberately different from a part holding an invalid value.

    The ``with_*`` methods replace a part on this instance and return the same
    instance, so every reference to it sees the change::

        image = ImageName("library/ubuntu")
        assert image.with_registry("docker.io") is image
    """

    def __init__(self, image_name: Optional[str] = None):
        """Create an image name, split from ``image_name`` when one is given.

        Args:
            image_name: Full image name. None or an empty string leaves every part unset.

        Raises:
            MalformedImageNameError: If a non-empty name cannot be split at all.
        """
        self._registry: Optional[RegistryName] = None
        self._namespace: Optional[NamespaceName] = None
        self._repository: Optional[RepositoryName] = None
        self._tag: Optional[TagName] = None
        if not image_name:
            return

        parts = split_image_name(image_name)
        if parts.registry is not None:
            self._registry = RegistryName(parts.registry)
        if parts.namespace is not None:
            self._namespace = NamespaceName(parts.namespace)
        self._repository = RepositoryName(parts.repository)
        if parts.tag is not None:
            self._tag = TagName(parts.tag)

    @classmethod
    def parse(cls, image_name: Optional[str]) -> ImageName:
        """Split ``image_name`` into a new ImageName."""
        return cls(image_name)

    @property
    def registry(self) -> Optional[RegistryName]:
        return self._registry

    @property
    def namespace(self) -> Optional[NamespaceName]:
        return self._namespace

    @property
    def repository(self) -> Optional[RepositoryName]:
        return self._repository

    @property
    def tag(self) -> Optional[TagName]:
        return self._tag

    def with_registry(self, registry: Union[str, RegistryName]) -> ImageName:
        self._registry = _as_part(registry, RegistryName)
        return self

    def with_namespace(self, namespace: Union[str, NamespaceName]) -> ImageName:
        self._namespace = _as_part(namespace, NamespaceName)
        return self

    def with_repository(self, repository: Union[str, RepositoryName]) -> ImageName:
        self._repository = _as_part(repository, RepositoryName)
        return self

    def with_tag(self, tag: Union[str, TagName]) -> ImageName:
        self._tag = _as_part(tag, TagName)
        return self

    def __str__(self) -> str:
        path = "/".join(str(part) for part in (self._registry, self._namespace, self._repository) if part is not None)
        if self._tag is not None:
            return f"{path}:{self._tag}"
        return path

    def __repr__(self) -> str:
        return f"ImageName({str(self)!r})"

    def is_valid(self) -> bool:
        """Return whether a repository is set and every part that is set is valid."""
        if self._repository is None or not self._repository.is_valid():
            return False
        return all(part is None or part.is_valid() for part in (self._tag, self._namespace, self._registry))

    def make_valid(self) -> ImageName:
        """Repair every part that is set, in place. A missing repository is not added."""
        for part in (self._registry, self._namespace, self._repository, self._tag):
            if part is not None:
                part.make_valid()
        logger.debug(f"Repaired image name: {self}")
        return self

    def validate(self) -> None:
        """Raise InvalidNamePartError describing the first broken rule.

        Parts are checked in the order repository, tag, namespace, registry.
        """
        if self._repository is None:
            raise InvalidNamePartError("Invalid image name: Repository cannot be null")
        self._repository.validate()
        for part in (self._tag, self._namespace, self._registry):
            if part is not None:
                part.validate()


def _as_part(value, part_type: type[NamePart]):
    if isinstance(value, part_type):
        return value
    return part_type(value)

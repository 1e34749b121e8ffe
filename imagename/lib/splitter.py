"""Split a raw image name into its registry, namespace, repository and tag strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import MalformedImageNameError
from .parts import SCHEMA_SEPARATOR

logger = logging.getLogger(__name__)

LOCALHOST = "localhost"


@dataclass(frozen=True)
class ImageNameParts:
    """Raw, unvalidated strings for each part of an image name."""

    repository: str
    registry: Optional[str] = None
    namespace: Optional[str] = None
    tag: Optional[str] = None


def _split_path(value: str) -> list[str]:
    """Split on '/' dropping trailing empty segments."""
    if "/" not in value:
        return [value]
    segments = value.split("/")
    while segments and not segments[-1]:
        segments.pop()
    return segments


def _looks_like_registry(segment: str) -> bool:
    return "." in segment or ":" in segment or segment == LOCALHOST


def split_image_name(image_name: str) -> ImageNameParts:
    """Split an image name into its parts without validating any of them.

    The name has the shape ``[REGISTRY/][NAMESPACE/]REPOSITORY[:TAG]``:

    - A schema prefix (``https://``) stays attached to the first segment.
    - With two segments the first one is a registry only if it contains a dot or
      a colon, or is ``localhost``; otherwise it is a namespace.
    - With more than three segments everything before the last two is the registry.
    - The tag follows the last colon of the last segment, unless that colon is the
      first character.

    Args:
        image_name: Non-empty image name.

    Returns:
        The raw parts. Empty registry, namespace or tag strings are reported as None.

    Raises:
        MalformedImageNameError: If the name has no segments at all (e.g. only slashes).
    """
    schema_index = image_name.rfind(SCHEMA_SEPARATOR)
    if schema_index > -1:
        prefix_end = schema_index + len(SCHEMA_SEPARATOR)
        segments = _split_path(image_name[prefix_end:]) or [""]
        segments[0] = image_name[:prefix_end] + segments[0]
    else:
        segments = _split_path(image_name)

    if not segments:
        raise MalformedImageNameError(f"Cannot parse image name: {image_name!r}")

    registry: Optional[str] = None
    namespace: Optional[str] = None
    if len(segments) == 2:
        if _looks_like_registry(segments[0]):
            registry = segments[0]
        else:
            namespace = segments[0]
    elif len(segments) == 3:
        registry, namespace = segments[0], segments[1]
    elif len(segments) > 3:
        registry = "/".join(segments[:-2])
        namespace = segments[-2]

    repository = segments[-1]
    tag: Optional[str] = None
    colon_index = repository.rfind(":")
    # A leading colon stays in the repository so it is never left empty.
    if colon_index > 0:
        repository, tag = repository[:colon_index], repository[colon_index + 1 :]

    parts = ImageNameParts(
        repository=repository,
        registry=registry or None,
        namespace=namespace or None,
        tag=tag or None,
    )
    logger.debug(f"Split {image_name!r} into {len(segments)} segment(s): {parts}")
    return parts

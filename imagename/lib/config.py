"""Tagging configuration for committed build images."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class TaggingConfig:
    """How a committed build image is named and tagged.

    Attributes:
        repository_name: Full image name to tag with. Falls back to the job name when unset.
        image_tags: Tags separated by commas, semicolons or colons.
        tag_latest: Also tag the image as 'latest'.
        tag_build_number: Always tag with the build number, not only when no tags are given.
    """

    repository_name: Optional[str] = None
    image_tags: str = ""
    tag_latest: bool = False
    tag_build_number: bool = False


_FIELD_NAMES = frozenset(f.name for f in fields(TaggingConfig))


def load_tagging_config(path: Path) -> TaggingConfig:
    """Load and parse a tagging configuration YAML file.

    ``image_tags`` may be given as a separated string or as a list of strings.

    Args:
        path: Path to the configuration YAML file.

    Returns:
        Parsed tagging configuration. An empty file gives the defaults.

    Raises:
        ValueError: If the file is not a mapping, has unknown keys or wrongly typed values.
    """
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in tagging config {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Tagging config must be a YAML mapping: {path}")

    unknown = sorted(str(key) for key in data if key not in _FIELD_NAMES)
    if unknown:
        raise ValueError(f"Unknown keys in tagging config {path}: {', '.join(unknown)}")

    repository_name = data.get("repository_name")
    if repository_name is not None and not isinstance(repository_name, str):
        raise ValueError(f"'repository_name' must be a string: {path}")

    image_tags = data.get("image_tags") or ""
    if isinstance(image_tags, list):
        if not all(isinstance(tag, str) for tag in image_tags):
            raise ValueError(f"'image_tags' must be a string or a list of strings: {path}")
        image_tags = ",".join(image_tags)
    elif not isinstance(image_tags, str):
        raise ValueError(f"'image_tags' must be a string or a list of strings: {path}")

    for flag in ("tag_latest", "tag_build_number"):
        if not isinstance(data.get(flag, False), bool):
            raise ValueError(f"'{flag}' must be a boolean: {path}")

    return TaggingConfig(
        repository_name=repository_name,
        image_tags=image_tags,
        tag_latest=data.get("tag_latest", False),
        tag_build_number=data.get("tag_build_number", False),
    )

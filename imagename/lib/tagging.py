"""Work out the repository and tags applied to an image committed from a build."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .config import TaggingConfig

logger = logging.getLogger(__name__)

LATEST_TAG = "latest"

_IMAGE_TAGS_SEPARATOR = re.compile(r"[,;:]")
_WHITESPACE_CHAR = re.compile(r"\s", re.ASCII)
_JOB_NAME_INVALID_CHARS = re.compile(r"[^/a-z0-9_.-]")
_BUILD_NUMBER_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


@dataclass(frozen=True)
class CommitTagPlan:
    """Repository and ordered tags for a committed image."""

    repository: str
    tags: tuple[str, ...]

    def references(self) -> list[str]:
        """Return each ``repository:tag`` reference in tag order."""
        return [f"{self.repository}:{tag}" for tag in self.tags]


def job_name_to_repository(job_name: str) -> str:
    """Turn a job display name into a repository name.

    Lowercases, replaces each whitespace character with an underscore and drops
    anything outside ``[/a-z0-9_.-]``.
    """
    return _JOB_NAME_INVALID_CHARS.sub("", _WHITESPACE_CHAR.sub("_", job_name.lower()))


def sanitize_build_number(build_number: str) -> str:
    """Turn a build display name (e.g. '#42') into a tag-friendly string."""
    return _BUILD_NUMBER_INVALID_CHARS.sub("", _WHITESPACE_CHAR.sub("_", build_number))


def split_image_tags(image_tags: str) -> list[str]:
    """Split tags separated by commas, semicolons or colons, dropping blank entries."""
    return [tag.strip() for tag in _IMAGE_TAGS_SEPARATOR.split(image_tags) if tag.strip()]


def plan_commit_tags(config: TaggingConfig, job_name: str, build_number: str) -> CommitTagPlan:
    """Plan the repository and tags for an image committed at the end of a build.

    The repository is ``config.repository_name``, or the sanitized job name when
    that is blank. Tags are the configured ones, then 'latest' when
    ``tag_latest`` is set, then the sanitized build number when no tag was
    configured or ``tag_build_number`` is set. Duplicates keep their first position.

    Args:
        config: Tagging configuration.
        job_name: Display name of the job, used when no repository name is configured.
        build_number: Display name of the build.

    Returns:
        The planned repository and tags.
    """
    repository = (config.repository_name or "").strip() or job_name_to_repository(job_name)
    logger.info(f"Tagging with repository: {repository}")

    tags = split_image_tags(config.image_tags)
    if config.tag_latest:
        tags.append(LATEST_TAG)
    if not tags or config.tag_build_number:
        build_tag = sanitize_build_number(build_number)
        if build_tag:
            tags.append(build_tag)

    unique_tags = tuple(dict.fromkeys(tags))
    for tag in unique_tags:
        logger.info(f"Tagging with: {tag}")
    return CommitTagPlan(repository=repository, tags=unique_tags)

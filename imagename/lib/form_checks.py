"""Field checks for user-entered repository names and tag lists.

Each check returns a FormValidation instead of raising, carrying the validation
message verbatim so it can be shown next to the field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import ImageNameError
from .image_name import ImageName
from .parts import TagName

OK = "ok"
ERROR = "error"

_TAG_LIST_SEPARATOR = re.compile(r",+")


@dataclass(frozen=True)
class FormValidation:
    """Outcome of a field check."""

    kind: str
    message: Optional[str] = None

    @classmethod
    def ok(cls, message: Optional[str] = None) -> FormValidation:
        return cls(OK, message)

    @classmethod
    def error(cls, message: str) -> FormValidation:
        return cls(ERROR, message)

    @property
    def is_ok(self) -> bool:
        return self.kind == OK


def check_repository_name(repository_name: Optional[str]) -> FormValidation:
    """Check a full image name entered as the repository for committed images.

    An empty value is accepted. When the name has a registry part, the ok result
    mentions it.
    """
    if not repository_name:
        return FormValidation.ok()
    try:
        image_name = ImageName(repository_name)
        image_name.validate()
    except ImageNameError as e:
        return FormValidation.error(str(e))
    if image_name.registry is not None:
        return FormValidation.ok(f"Using registry: {image_name.registry}")
    return FormValidation.ok()


def check_image_tags(image_tags: Optional[str]) -> FormValidation:
    """Check a comma separated list of tags, reporting the first invalid one."""
    if not image_tags:
        return FormValidation.ok()
    for tag in _TAG_LIST_SEPARATOR.split(image_tags):
        if not tag:
            continue
        try:
            TagName(tag).validate()
        except ImageNameError as e:
            return FormValidation.error(str(e))
    return FormValidation.ok()

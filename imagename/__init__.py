"""Parse, validate and repair container image names."""

from .lib.errors import ImageNameError, InvalidNamePartError, MalformedImageNameError
from .lib.form_checks import FormValidation, check_image_tags, check_repository_name
from .lib.image_name import ImageName
from .lib.parts import NamePart, NamespaceName, RegistryName, RepositoryName, TagName
from .lib.splitter import ImageNameParts, split_image_name

__all__ = [
    "ImageName",
    "ImageNameParts",
    "split_image_name",
    "NamePart",
    "RegistryName",
    "NamespaceName",
    "RepositoryName",
    "TagName",
    "ImageNameError",
    "MalformedImageNameError",
    "InvalidNamePartError",
    "FormValidation",
    "check_repository_name",
    "check_image_tags",
]

"""Errors raised while parsing and validating image names."""


class ImageNameError(ValueError):
    """Base class for image name errors."""


class MalformedImageNameError(ImageNameError):
    """Raised when a non-empty image name cannot be split into parts at all."""


class InvalidNamePartError(ImageNameError):
    """Raised when an image name part breaks a naming rule.

    The message names the rule that failed and is meant to be shown to the user as-is.
    """

"""Custom exceptions for magedeps."""


class MageDepsError(Exception):
    """Base exception for all magedeps errors."""


class ExtractionError(MageDepsError):
    """Raised when a mage-init fragment cannot yield dependency names.

    *fragment* is the raw source text as it appeared in the template.
    """

    def __init__(self, fragment: str, reason: str):
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"{reason}: {fragment!r}")


class FragmentSyntaxError(ExtractionError):
    """Raised when a wrapped fragment is not valid JavaScript."""


class ShapeMismatchError(ExtractionError):
    """Raised when valid JavaScript does not have the expected object shape."""

"""Errors raised while acquiring prospectus documents."""


class HelpdeskError(Exception):
    """Base class for helpdesk pipeline errors."""


class AcquisitionFailure(HelpdeskError):
    """The document could not be made available to the pipeline."""


class UnsupportedFormat(AcquisitionFailure):
    """The identifier does not resolve to a supported document type."""


class TooLarge(AcquisitionFailure):
    """The document payload exceeds the configured byte limit."""

    def __init__(self, identifier: str, size: int, limit: int) -> None:
        super().__init__(
            f"Document {identifier} is {size} bytes, above the {limit} byte limit."
        )
        self.identifier = identifier
        self.size = size
        self.limit = limit


class EmptyDocument(HelpdeskError):
    """Acquisition succeeded but produced no text."""

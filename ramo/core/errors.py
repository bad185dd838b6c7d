class RamoError(Exception):
    """Base class for every recoverable error surfaced by ramo."""


class FieldFetchError(RamoError):
    """The record/field source could not deliver the raw text."""


class PayloadParseError(RamoError):
    """The raw text is not valid JSON."""


class ClipboardError(RamoError):
    """A clipboard writer failed to copy the text."""

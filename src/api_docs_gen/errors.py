"""Exceptions raised by the documentation pipeline."""


class DocsGenError(Exception):
    """Base class for errors that abort a generation run."""


class SpecSourceError(DocsGenError):
    """Raised when the spec source location cannot be read."""


class SpecFormatError(DocsGenError):
    """Raised when the spec content cannot be parsed into a mapping."""

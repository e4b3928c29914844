"""Exceptions raised by the conversion pipeline."""


class ConversionError(Exception):
    """Base class for every failure inside a conversion call."""


class DecodeError(ConversionError):
    """Input is unreadable, in an unsupported format, or corrupt."""


class ResizeError(ConversionError):
    """Requested target size is not a positive width and height."""


class WriteError(ConversionError):
    """The destination could not be written."""


class BannerError(ConversionError):
    """A banner could not be rasterized."""

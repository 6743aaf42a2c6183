"""
Custom exceptions for the text example loader.
"""

class TextLoaderError(Exception):
    """Base class for every error raised while loading a text dataset."""
    pass

class ArgumentError(TextLoaderError, ValueError):
    """Raised when the caller supplies an invalid configuration."""
    pass

class RangeError(TextLoaderError):
    """Raised when a configured column index is outside the allowed range."""
    pass

class FormatError(TextLoaderError):
    """Raised when a header, label map or data line is malformed."""
    pass

class InvariantViolation(TextLoaderError):
    """Raised when the data file no longer matches what was probed at load time."""
    pass

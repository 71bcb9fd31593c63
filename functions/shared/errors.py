"""
Error types raised by the image metadata function
"""


class ImageMetadataError(Exception):
    """Base class for every failure that aborts an invocation"""


class MissingConfiguration(ImageMetadataError):
    """A required environment variable is not set"""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"can not read environment variable {variable}")


class DecodeAnomaly(ImageMetadataError):
    """
    The input stream did not decode cleanly into an event.

    The decoder returns this instead of raising it; the handler decides
    whether it is fatal.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"could not decode event input: {reason}")


class StorageError(ImageMetadataError):
    """Database connection or statement failure. The driver error is chained as __cause__"""

# mediacompat/domain/errors.py
from __future__ import annotations


class MediaCompatError(Exception):
    """Base class for errors raised by the metadata converters."""


class InvalidUriFormat(MediaCompatError, ValueError):
    """
    A string stored where a URI is expected could not be parsed.
    Raised to the caller as-is; a conversion that hits it returns nothing.
    """

    def __init__(self, value: object, reason: str = "malformed uri") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")

"""Exceptions raised by the APFID parsers and formatters."""

from __future__ import annotations


class ApfidError(ValueError):
    """Base class for all APFID errors."""


class InvalidFormatError(ApfidError):
    """An AlphaFold sub-identifier does not start with the ``AF`` token."""


class InvalidIdentifierError(ApfidError):
    """No grammar matched, or the match lacks an experiment or chain id."""


class UnsupportedVersionError(ApfidError):
    """A grammar version outside {1, 2} was requested."""

    def __init__(self, version: object):
        super().__init__(f"Unsupported version: {version}")
        self.version = version


class ApfidDeprecationWarning(DeprecationWarning):
    """Emitted by the legacy string constructor."""

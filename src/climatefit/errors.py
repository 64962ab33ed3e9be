"""Exception types raised by the pipeline.

Missing input files surface as the built-in FileNotFoundError.
"""

from __future__ import annotations


class ObservationParseError(ValueError):
    """Source CSV is malformed: wrong columns, bad rows, or non-numeric values."""


class NoCandidateError(LookupError):
    """A search had no rows left to choose from."""

"""
Exception types raised across the processing pipeline.
"""

from typing import Dict


class InvalidVideoURL(ValueError):
    """The submitted URL does not contain a YouTube video ID."""


class TranscriptUnavailable(Exception):
    """A transcript strategy could not produce usable text."""


class LLMOutputError(Exception):
    """The model's reply could not be turned into records."""


class PersistenceError(Exception):
    """A database insert failed."""


class AllAttemptsFailed(Exception):
    """Every attempt in a fallback chain failed."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        detail = "; ".join(f"{name}: {error}" for name, error in errors.items())
        super().__init__(f"All attempts failed ({detail})")

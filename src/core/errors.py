"""Exceptions raised by the word engine.

Invalid letters or words are never errors: they produce empty results.
"""


class WordEngineError(Exception):
    """Base class for word engine errors."""


class DataUnavailable(WordEngineError):
    """The dictionary source is missing or cannot be read."""


class PreconditionViolated(WordEngineError, ValueError):
    """A caller skipped a required check, e.g. subtracting letters that aren't there."""

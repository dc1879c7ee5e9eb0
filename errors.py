class WordLadderError(Exception):
    """Base class for errors raised by the word ladder engine."""


class DictionarySourceError(WordLadderError):
    """Raw word list is missing, unreadable or empty. Aborts the build."""


class ArtifactFormatError(WordLadderError):
    """A persisted dictionary artifact does not have the expected shape."""


class StoreUnavailable(WordLadderError):
    """A dictionary artifact exists but could not be read from storage."""

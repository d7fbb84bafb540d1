"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class WordSourceError(WordSearchError):
    """Raised when a word source cannot deliver candidate words."""


class PlacementError(WordSearchError):
    """Raised when a word cannot be written at the requested position."""


class GenerationError(WordSearchError):
    """Raised when every retry of the puzzle build has been exhausted."""

    def __init__(self, message: str, retry_count: int = 0, word_count: int = 0) -> None:
        super().__init__(message)
        self.retry_count = retry_count
        self.word_count = word_count


class GenerationCancelled(WordSearchError):
    """Raised when a build is abandoned because a newer game superseded it."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""

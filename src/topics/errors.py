from __future__ import annotations

"""Error types raised by the topic pattern core."""


class TopicError(RuntimeError):
    """Base class for topic pattern errors."""
    pass


class PatternCompileError(TopicError):
    """Raised when a selection cannot be compiled into a pattern."""
    pass


class EmptySelectionError(PatternCompileError):
    """Raised when compiling a selection with no groups."""
    pass


class EmptyNameError(PatternCompileError):
    """Raised when compiling with a blank pattern name."""
    pass


class InvalidTokenError(TopicError):
    """Raised when selecting a token index outside the current text."""
    pass


class PatternConsistencyError(TopicError):
    """Reported when a pattern without groups reaches the matcher."""
    pass


class TopicStoreError(TopicError):
    """Raised when topic persistence fails."""
    pass


class StoreWriteError(TopicStoreError):
    """Raised when the backing store rejects a save or delete."""
    pass


class StoreReadError(TopicStoreError):
    """Raised when persisted topics cannot be read."""
    pass

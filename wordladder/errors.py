"""
Engine Errors
=============

Every failure the engine reports carries a short message and a
classification tag. Rendering the message is left to the caller.

- configuration: dictionary missing, unreadable or empty; bad config file
- validation: a word was rejected (length, membership, adjacency)
- state: operation invoked on a session or dictionary that cannot serve it
"""


class WordLadderError(Exception):
    """Base class for all engine errors."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ConfigurationError(WordLadderError):
    """Dictionary or configuration could not be loaded. Fatal for the engine."""

    kind = "configuration"


class ValidationError(WordLadderError):
    """A word was rejected. The session is left untouched."""

    kind = "validation"


class StateError(WordLadderError):
    """Operation not allowed in the current state."""

    kind = "state"

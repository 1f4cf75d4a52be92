"""
errors.py

Exceptions raised by the scoring core. All of them are ValueErrors so callers
that only know about bad input can still catch them.
"""


class InfoGuessError(ValueError):
    """Base class for every error raised by infoguess."""


class DecodeError(InfoGuessError):
    """A dictionary entry has the wrong length or a symbol outside the alphabet."""


class EmptyDictionaryError(InfoGuessError):
    """Scoring was requested over a dictionary with no words."""


class IndexOutOfRangeError(InfoGuessError):
    """A predicate index fell outside the reserved predicate space."""

"""Exception types raised by the untangle core.

Everything a caller is expected to recover from (bad parameters, bad
description or move strings, a missing solution) derives from
:class:`UntangleError`, itself a ``ValueError``.  Internal consistency
violations are plain ``ValueError`` / ``RuntimeError`` raised by the model
constructors and the graph handle.
"""

from __future__ import annotations


class UntangleError(ValueError):
    """Base class for recoverable untangle errors."""


class ParameterError(UntangleError):
    """Puzzle parameters are out of range (e.g. fewer than four points)."""


class DescriptionError(UntangleError):
    """A puzzle description string failed validation."""


class DescriptionSyntaxError(DescriptionError):
    pass


class DescriptionRangeError(DescriptionError):
    pass


class MoveSyntaxError(UntangleError):
    """A move string could not be applied; no part of it takes effect."""


class NoKnownSolution(UntangleError):
    pass


class PuzzleFileError(UntangleError):
    """A saved puzzle file does not match the expected layout."""


class GenerationError(RuntimeError):
    """The forced-crossing shuffle ran out of attempts."""

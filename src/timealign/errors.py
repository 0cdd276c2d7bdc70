from __future__ import annotations


class TimealignError(Exception):
    """Base class for every error raised by timealign."""


class InvalidTimelineError(TimealignError, ValueError):
    """Raised when a timeline is empty, unsorted or has repeated dates."""


class OutOfRangeError(TimealignError, ValueError):
    """Raised when a requested start/end date falls outside the timeline."""


class AlignmentError(TimealignError, ValueError):
    """Raised when the reference window cannot be aligned with the timeline."""


class InvalidReferenceError(TimealignError, ValueError):
    """Raised when the reference window or band set is unusable."""


class InvalidDateFormatError(TimealignError, ValueError):
    """Raised when a value cannot be interpreted as a calendar date."""


class IndexOutOfBoundsError(TimealignError, IndexError):
    """Raised when a flat index range exceeds the feature table width."""


class InternalConsistencyError(TimealignError, RuntimeError):
    """Raised when a window date is missing from its own source timeline."""

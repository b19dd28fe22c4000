# events/exceptions.py
"""
Custom exceptions for the events application.

Domain-specific exceptions raised by the camp application
workflow. Validation problems are not exceptions: they are
collected as messages and reported to the user.
"""


class EventError(Exception):
    """
    Base class for event-related errors.
    """


class CampApplicationError(EventError):
    """
    Raised when a camp application cannot be processed at all.

    Used for events which are neither camps nor campy courses.
    """


class CampApplicationPdfError(CampApplicationError):
    """
    Raised when the camp application PDF cannot be rendered.
    """

# census/exceptions.py
"""
Custom exceptions for the census application.
"""


class CensusError(Exception):
    """
    Base class for census-related errors.
    """


class CensusNotOpenError(CensusError):
    """
    Raised when member counts are created while no census is open.
    """


class MemberCountsExistError(CensusError):
    """
    Raised when an Abteilung is counted twice in the same year.
    """

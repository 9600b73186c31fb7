"""
Exceptions raised by Junk Shop Ledger
"""
from __future__ import annotations


class JunkShopError(Exception):
    """Base class for application errors"""


class StoreError(JunkShopError):
    """Record store could not read or write records"""


class SaveRejected(JunkShopError):
    """A save was refused before reaching the store; form data is untouched"""


class DuplicateSubmissionError(SaveRejected):
    """The same rows were already saved in this session"""


class EmptyRecordError(SaveRejected):
    """No row has a material or a positive weight and price"""


class ZeroTotalError(SaveRejected):
    """Grand total is 0 and the operator has not confirmed saving anyway"""

    def __init__(self, message: str = "Total is 0. Save anyway?"):
        super().__init__(message)


class SaveInProgressError(SaveRejected):
    """Another save from this session has not finished yet"""


class LockedError(SaveRejected):
    """Unlock code was missing or wrong"""

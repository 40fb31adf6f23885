"""
Exceptions for the ledgertx SDK.
"""


class LedgerTxError(Exception):
    """Base exception for ledgertx SDK errors."""
    pass


class EpochRangeError(LedgerTxError, ValueError):
    """Raised when a transaction's epoch window is empty or too wide."""

    def __init__(self, message: str, start_epoch: int = None, end_epoch: int = None):
        self.start_epoch = start_epoch
        self.end_epoch = end_epoch
        super().__init__(message)


class SignatureSourceError(LedgerTxError, TypeError):
    """Raised when a signature source cannot produce a usable signature."""
    pass


class CompilationError(LedgerTxError):
    """Raised by a compiler when a transaction part cannot be compiled."""
    pass

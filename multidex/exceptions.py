"""
Domain exceptions for multidex.

Every failure raised by quoting, swapping or token operations derives from
DexError, so callers can catch the whole family at once and still tell the
kinds apart. Nothing in this package retries; errors go straight to the
immediate caller.
"""

from typing import Optional


class DexError(Exception):
    """Base error for all chain-facing operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PreconditionError(DexError):
    """Operation invoked before its one-time setup (contract not bound, decimals unresolved)."""

    def __init__(self, message: str = "Required setup has not been performed"):
        super().__init__(message)


class NumericConversionError(DexError):
    """Amount cannot be represented as an on-chain base-unit integer."""

    def __init__(self, message: str = "Amount cannot be converted to base units"):
        super().__init__(message)


class RemoteCallError(DexError):
    """Chain client call failed, reverted or hit a transport error."""

    def __init__(self, message: str = "Remote contract call failed"):
        super().__init__(message)


class MethodEncodingError(RemoteCallError):
    """Method name or argument count does not match the contract ABI."""

    def __init__(self, message: str = "Contract method could not be encoded"):
        super().__init__(message)


class DeadlineError(DexError):
    """Swap deadline could not be computed."""

    def __init__(self, message: str = "Invalid swap deadline"):
        super().__init__(message)


class TransactionFailedError(DexError):
    """Transaction returned no receipt, or its receipt reports a failed status."""

    def __init__(self, message: str = "Transaction failed", tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message)


class DataExtractionError(DexError):
    """A successful receipt did not yield the expected swap data."""

    def __init__(self, message: str = "Could not extract swap data from receipt"):
        super().__init__(message)


class OutputNotFoundError(DataExtractionError):
    """No log emitted by the output token was found in the receipt."""

    def __init__(self, message: str = "Output amount not found in transaction logs"):
        super().__init__(message)


class SwapLogError(DataExtractionError):
    """A matching log was found but could not be decoded."""

    def __init__(self, message: str = "Log does not have enough topics/data for parsing swap"):
        super().__init__(message)


class AbiLoadError(DexError):
    """ABI resource is missing or is not a list of ABI entries."""

    def __init__(self, message: str = "ABI could not be loaded"):
        super().__init__(message)

"""
ChainClient Abstract Base Class

The capability every exchange and token talks through. Transport, signing and
nonce sequencing live behind this interface; the trading core only needs to
call contract methods, submit transactions and read receipts.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple


@dataclass(frozen=True)
class TxLog:
    """One event log emitted by a confirmed transaction."""

    address: str
    topics: Tuple[bytes, ...] = ()
    data: bytes = b""


@dataclass(frozen=True)
class TxReceipt:
    """Post-confirmation record of a transaction."""

    transaction_hash: str
    status: int
    block_number: Optional[int] = None
    logs: Tuple[TxLog, ...] = field(default_factory=tuple)
    gas_used: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status == 1


@dataclass(frozen=True)
class PendingTransaction:
    """Handle for a submitted, not yet confirmed, transaction."""

    tx_hash: str


class ChainClient(ABC):
    """
    Async access to one EVM chain.

    A read-only client only needs call(); a signing client must also support
    send(), which implies owning an account and sequencing its nonces.
    Implementations must be safe for concurrent use from many tasks.
    """

    @property
    def can_sign(self) -> bool:
        """True if send() can submit transactions."""
        return False

    @abstractmethod
    async def call(
        self,
        address: str,
        abi: Sequence[Dict[str, Any]],
        method: str,
        args: Sequence[Any],
    ) -> Any:
        """
        Execute a read-only contract call.

        Returns:
            Decoded result (single value, or tuple/list for multiple outputs)
        """
        pass

    @abstractmethod
    async def send(
        self,
        address: str,
        abi: Sequence[Dict[str, Any]],
        method: str,
        args: Sequence[Any],
    ) -> PendingTransaction:
        """Sign and submit a state-changing contract call."""
        pass

    @abstractmethod
    async def wait_for_confirmations(
        self,
        pending: PendingTransaction,
        confirmations: int = 1,
    ) -> Optional[TxReceipt]:
        """
        Wait until the transaction has the given number of confirmations.

        Returns:
            The receipt, or None if the transaction was dropped / never mined
        """
        pass

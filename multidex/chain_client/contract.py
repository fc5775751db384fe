"""
Contract handle: one deployed contract bound to a ChainClient.

Validates method names and arity against the ABI before anything goes on the
wire, and maps every client failure that is not already a DexError onto
RemoteCallError.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from web3 import Web3

from multidex.abi import function_names
from multidex.chain_client.base import ChainClient, PendingTransaction, TxReceipt
from multidex.exceptions import DexError, MethodEncodingError, RemoteCallError

logger = logging.getLogger(__name__)


def checksum_address(address: str) -> str:
    """Checksum an address argument, rejecting malformed input as an encoding failure."""
    try:
        return Web3.to_checksum_address(address)
    except (TypeError, ValueError) as e:
        raise MethodEncodingError(f"Invalid address argument {address!r}: {e}") from e


class ContractHandle:
    def __init__(self, client: ChainClient, address: str, abi: Sequence[Dict[str, Any]]):
        self.client = client
        self.address = address
        self.abi = list(abi)

        # method name -> accepted argument counts (overloads allowed)
        self._arities: Dict[str, List[int]] = {}
        for entry in self.abi:
            if entry.get("type") == "function" and "name" in entry:
                self._arities.setdefault(entry["name"], []).append(len(entry.get("inputs", [])))

    def __repr__(self) -> str:
        return f"ContractHandle(address={self.address})"

    def has_method(self, method: str) -> bool:
        return method in self._arities

    def connect(self, client: ChainClient) -> "ContractHandle":
        """Same contract, different client (e.g. a signing one)."""
        return ContractHandle(client, self.address, self.abi)

    def _check_method(self, method: str, args: Sequence[Any]):
        arities = self._arities.get(method)
        if arities is None:
            available = ", ".join(sorted(set(function_names(self.abi)))) or "none"
            raise MethodEncodingError(
                f"Method '{method}' not found in ABI for {self.address} (available: {available})"
            )
        if len(args) not in arities:
            raise MethodEncodingError(
                f"Method '{method}' expects {' or '.join(map(str, arities))} arguments, got {len(args)}"
            )

    async def call(self, method: str, *args: Any) -> Any:
        self._check_method(method, args)
        try:
            return await self.client.call(self.address, self.abi, method, args)
        except DexError:
            raise
        except Exception as e:
            logger.error(f"Contract call failed: address={self.address}, method={method}, error={e}")
            raise RemoteCallError(f"Call to '{method}' on {self.address} failed: {e}") from e

    async def send(self, method: str, *args: Any) -> PendingTransaction:
        self._check_method(method, args)
        try:
            return await self.client.send(self.address, self.abi, method, args)
        except DexError:
            raise
        except Exception as e:
            logger.error(f"Transaction submission failed: address={self.address}, method={method}, error={e}")
            raise RemoteCallError(f"Sending '{method}' to {self.address} failed: {e}") from e

    async def confirm(self, pending: PendingTransaction, confirmations: int = 1) -> Optional[TxReceipt]:
        try:
            return await self.client.wait_for_confirmations(pending, confirmations)
        except DexError:
            raise
        except Exception as e:
            logger.error(f"Waiting for confirmation failed: tx_hash={pending.tx_hash}, error={e}")
            raise RemoteCallError(f"Confirmation of {pending.tx_hash} failed: {e}") from e

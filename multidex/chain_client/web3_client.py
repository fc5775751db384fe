"""
Web3.py-backed ChainClient

Architecture:
- Uses Web3.py over HTTP for blockchain interaction
- Blocking web3 calls run in worker threads (asyncio.to_thread)
- Transactions are signed locally with an eth_account private key
- Nonces are sequenced per client so concurrent sends don't collide

Usage:
    reader = Web3ChainClient(rpc_url="https://bsc-dataseed.binance.org", chain=Chain.BSC)
    signer = Web3ChainClient(rpc_url=..., private_key="0x...", chain=Chain.BSC)
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from eth_account import Account
from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import TimeExhausted
from web3.middleware import ExtraDataToPOAMiddleware

from multidex.chain_client.base import ChainClient, PendingTransaction, TxLog, TxReceipt
from multidex.chains import Chain
from multidex.config import Settings
from multidex.config import settings as default_settings
from multidex.exceptions import PreconditionError

logger = logging.getLogger(__name__)


class Web3ChainClient(ChainClient):
    """
    ChainClient implementation on top of a synchronous Web3 instance.

    A client created without a private key is read-only: call() and
    wait_for_confirmations() work, send() raises PreconditionError.
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        private_key: Optional[str] = None,
        chain: Optional[Chain] = None,
        w3: Optional[Web3] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            rpc_url: RPC endpoint URL (ignored when w3 is given)
            private_key: Wallet private key (0x prefixed hex string) for signing
            chain: Chain this client talks to (bookkeeping only)
            w3: Pre-built Web3 instance
            settings: Timeouts and gas configuration (defaults to module settings)
        """
        self.settings = settings or default_settings
        self.chain = chain

        if w3 is None:
            if not rpc_url:
                raise ValueError("Web3ChainClient requires rpc_url or w3")
            w3 = Web3(Web3.HTTPProvider(
                rpc_url,
                request_kwargs={"timeout": self.settings.rpc_request_timeout_secs},
            ))
            # BSC and Polygon are PoA chains with oversized extraData
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
        self.w3 = w3

        self.account = Account.from_key(private_key) if private_key else None
        self.address: Optional[ChecksumAddress] = self.account.address if self.account else None

        self._contracts: Dict[str, Tuple[List[Dict[str, Any]], Any]] = {}
        self._nonce_lock = asyncio.Lock()
        self._next_nonce: Optional[int] = None

        logger.info(
            f"Web3ChainClient initialized: chain={chain.name if chain else 'unknown'}, "
            f"signing={self.account is not None}, wallet={self.address}"
        )

    @property
    def can_sign(self) -> bool:
        return self.account is not None

    def _contract(self, address: str, abi: Sequence[Dict[str, Any]]):
        checksum = Web3.to_checksum_address(address)
        abi = list(abi)
        cached = self._contracts.get(checksum)
        # Same address with a different ABI gets a fresh contract object
        if cached is None or cached[0] != abi:
            cached = (abi, self.w3.eth.contract(address=checksum, abi=abi))
            self._contracts[checksum] = cached
        return cached[1]

    async def call(
        self,
        address: str,
        abi: Sequence[Dict[str, Any]],
        method: str,
        args: Sequence[Any],
    ) -> Any:
        contract = self._contract(address, abi)
        return await asyncio.to_thread(
            lambda: getattr(contract.functions, method)(*args).call()
        )

    def _sign_and_send(self, contract, method: str, args: Sequence[Any], nonce: int) -> bytes:
        tx_params = {
            "from": self.address,
            "nonce": nonce,
            "gasPrice": self.w3.eth.gas_price,
        }
        if self.settings.gas_limit:
            tx_params["gas"] = self.settings.gas_limit

        txn = getattr(contract.functions, method)(*args).build_transaction(tx_params)
        signed_txn = self.account.sign_transaction(txn)
        return self.w3.eth.send_raw_transaction(signed_txn.raw_transaction)

    async def send(
        self,
        address: str,
        abi: Sequence[Dict[str, Any]],
        method: str,
        args: Sequence[Any],
    ) -> PendingTransaction:
        if self.account is None:
            raise PreconditionError("Chain client has no signing account; pass private_key to send transactions")

        contract = self._contract(address, abi)

        async with self._nonce_lock:
            if self._next_nonce is None:
                self._next_nonce = await asyncio.to_thread(
                    lambda: self.w3.eth.get_transaction_count(self.address, "pending")
                )
            nonce = self._next_nonce
            try:
                tx_hash = await asyncio.to_thread(
                    lambda: self._sign_and_send(contract, method, args, nonce)
                )
            except Exception:
                # Re-read from the node next time; the local counter may be stale
                self._next_nonce = None
                raise
            self._next_nonce = nonce + 1

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"Transaction sent: method={method}, to={address}, nonce={nonce}, tx_hash={tx_hash_hex}")
        return PendingTransaction(tx_hash=tx_hash_hex)

    async def wait_for_confirmations(
        self,
        pending: PendingTransaction,
        confirmations: int = 1,
    ) -> Optional[TxReceipt]:
        tx_hash = HexBytes(pending.tx_hash)
        try:
            receipt = await asyncio.to_thread(
                lambda: self.w3.eth.wait_for_transaction_receipt(
                    tx_hash,
                    timeout=self.settings.receipt_timeout_secs,
                    poll_latency=self.settings.confirmation_poll_interval_secs,
                )
            )
        except TimeExhausted:
            logger.warning(
                f"No receipt for {pending.tx_hash} after {self.settings.receipt_timeout_secs}s"
            )
            return None

        if confirmations > 1:
            target_block = receipt["blockNumber"] + confirmations - 1
            while True:
                current_block = await asyncio.to_thread(lambda: self.w3.eth.block_number)
                if current_block >= target_block:
                    break
                await asyncio.sleep(self.settings.confirmation_poll_interval_secs)

        return self._to_receipt(receipt, pending.tx_hash)

    @staticmethod
    def _to_receipt(receipt, fallback_hash: str) -> TxReceipt:
        """Convert a web3 AttributeDict receipt into a TxReceipt"""
        logs = tuple(
            TxLog(
                address=log["address"],
                topics=tuple(bytes(HexBytes(topic)) for topic in log.get("topics", [])),
                data=bytes(HexBytes(log.get("data", b""))),
            )
            for log in receipt.get("logs", [])
        )
        raw_hash = receipt.get("transactionHash")
        return TxReceipt(
            transaction_hash=Web3.to_hex(raw_hash) if raw_hash is not None else fallback_hash,
            status=receipt.get("status", 0),
            block_number=receipt.get("blockNumber"),
            logs=logs,
            gas_used=receipt.get("gasUsed", 0),
        )

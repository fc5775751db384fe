"""
Fungible (ERC-20) token handle.

Holds identity (chain, address, symbol), lazily resolves decimals from the
chain on first initialize(), and passes the four standard ERC-20 operations
straight through to the token contract. Amounts for approve / allowance /
balance_of / transfer are integer base units; no decimal scaling happens here.
"""

import asyncio
import logging
from decimal import Decimal
from typing import Optional

from web3 import Web3

from multidex.abi import ERC20_ABI_RESOURCE, AbiSource, load_abi
from multidex.chain_client.base import ChainClient, PendingTransaction
from multidex.chain_client.contract import ContractHandle, checksum_address
from multidex.chains import Chain
from multidex.exceptions import PreconditionError, RemoteCallError
from multidex.units import Amount, from_base_units, to_base_units

logger = logging.getLogger(__name__)


class FungibleToken:
    """
    One ERC-20 token on one chain.

    Usage:
        usdc = FungibleToken(Chain.BASE, client, "0x8335...", "USDC")
        await usdc.initialize()     # reads decimals() once
        raw = await usdc.balance_of(wallet)
        human = usdc.from_base_units(raw)
    """

    def __init__(
        self,
        chain: Chain,
        client: ChainClient,
        address: str,
        symbol: str,
        decimals: Optional[int] = None,
        abi: AbiSource = ERC20_ABI_RESOURCE,
    ):
        self.chain = chain
        self.client = client
        self.address = Web3.to_checksum_address(address)
        self.symbol = symbol
        self._decimals = decimals
        self._abi_source = abi
        self._token_contract: Optional[ContractHandle] = None
        self._init_lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"FungibleToken({self.symbol}, chain={self.chain.name}, address={self.address})"

    @property
    def chain_id(self) -> int:
        return self.chain.chain_id

    @property
    def decimals(self) -> Optional[int]:
        """Resolved decimal count, or None until initialize() has read it."""
        return self._decimals

    @property
    def is_initialized(self) -> bool:
        return self._token_contract is not None and self._decimals is not None

    def require_decimals(self) -> int:
        if self._decimals is None:
            raise PreconditionError(f"Decimals for {self.symbol} not resolved; call initialize() first")
        return self._decimals

    @property
    def token_contract(self) -> ContractHandle:
        if self._token_contract is None:
            raise PreconditionError(f"Token contract for {self.symbol} not created; call initialize() first")
        return self._token_contract

    async def initialize(self):
        """
        Bind the token contract and resolve decimals if they were not supplied.

        Safe to call repeatedly and concurrently: the handle is created once
        and decimals are read from the chain at most once.

        Raises:
            RemoteCallError: decimals() could not be read
        """
        async with self._init_lock:
            if self._token_contract is None:
                self._token_contract = ContractHandle(self.client, self.address, load_abi(self._abi_source))

            if self._decimals is None:
                try:
                    decimals = await self._token_contract.call("decimals")
                except RemoteCallError as e:
                    raise RemoteCallError(f"Failed to call 'decimals' method for {self.symbol}: {e.message}") from e
                try:
                    self._decimals = int(decimals)
                except (TypeError, ValueError) as e:
                    raise RemoteCallError(
                        f"Unexpected 'decimals' result for {self.symbol}: {decimals!r}"
                    ) from e
                logger.info(f"Resolved decimals for {self.symbol}: {self._decimals}")

    def to_base_units(self, amount: Amount) -> int:
        return to_base_units(amount, self.require_decimals())

    def from_base_units(self, value: int) -> Decimal:
        return from_base_units(value, self.require_decimals())

    # ========================================
    # ERC-20 PASS-THROUGH
    # ========================================

    async def approve(self, spender: str, amount: int) -> PendingTransaction:
        return await self.token_contract.send("approve", checksum_address(spender), amount)

    async def allowance(self, owner: str, spender: str) -> int:
        result = await self.token_contract.call(
            "allowance",
            checksum_address(owner),
            checksum_address(spender),
        )
        return int(result)

    async def balance_of(self, owner: str) -> int:
        result = await self.token_contract.call("balanceOf", checksum_address(owner))
        return int(result)

    async def transfer(self, recipient: str, amount: int) -> PendingTransaction:
        return await self.token_contract.send("transfer", checksum_address(recipient), amount)

"""
Exchange: shared trading behaviour for Uniswap V2 style router contracts.

Every supported DEX exposes the same router interface (getAmountsIn,
getAmountsOut, swapExactTokensForTokens) at a different address, possibly
with a slightly different ABI. One Exchange class covers all of them; a
concrete DEX is just an ExchangeConfig entry.

Lifecycle:
    exchange = Exchange(ExchangeConfig("PancakeSwap", router_address), client)
    await exchange.initialize()          # loads the ABI, binds the router once
    price = await exchange.get_token_price(pair, Decimal("1"))
    received = await exchange.swap_token(pair, Decimal("1"), signer, wallet, 300)

Known limitation: swap_token submits with amountOutMin = 0, so no slippage
protection is enforced at this layer. Callers that need it must quote first
and decide for themselves.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple

from web3 import Web3

from multidex.abi import UNISWAP_V2_ROUTER_ABI_RESOURCE, AbiSource, load_abi
from multidex.chain_client.base import ChainClient
from multidex.chain_client.contract import ContractHandle, checksum_address
from multidex.chains import Chain
from multidex.config import settings
from multidex.exceptions import (
    DeadlineError,
    DexError,
    NumericConversionError,
    PreconditionError,
    RemoteCallError,
    TransactionFailedError,
)
from multidex.exchanges.swap_log import SwapLogParser, find_output_amount, parse_swap_log
from multidex.tokens.pair import TokenPair
from multidex.tokens.token import FungibleToken
from multidex.units import Amount, from_base_units, to_base_units

logger = logging.getLogger(__name__)

# Fixed policy: swaps wait for exactly one confirmation
SWAP_CONFIRMATIONS = 1

# Router functions quoting and swapping rely on
ROUTER_METHODS = ("getAmountsIn", "getAmountsOut", "swapExactTokensForTokens")


@dataclass(frozen=True)
class ExchangeConfig:
    """Everything that distinguishes one DEX router from another."""

    name: str
    router_address: str
    abi: AbiSource = field(default=UNISWAP_V2_ROUTER_ABI_RESOURCE, compare=False)
    chain: Optional[Chain] = None
    swap_log_parser: SwapLogParser = field(default=parse_swap_log, compare=False)


class Exchange:
    """
    One DEX router on one chain.

    State machine: Uninitialized -> Initialized (router contract bound).
    Quoting and swapping before initialize() raise PreconditionError.
    """

    def __init__(self, config: ExchangeConfig, client: ChainClient):
        self.config = config
        self.client = client
        self.router_address = Web3.to_checksum_address(config.router_address)
        self._router_contract: Optional[ContractHandle] = None
        self._init_lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"Exchange({self.name}, router={self.router_address})"

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def chain(self) -> Optional[Chain]:
        return self.config.chain

    @property
    def key(self) -> Tuple[str, str]:
        """Stable identity for this exchange, independent of the Python object."""
        return (self.name, self.router_address.lower())

    @property
    def is_initialized(self) -> bool:
        return self._router_contract is not None

    async def initialize(self):
        """Load the router ABI and bind the router contract. No-op once bound."""
        async with self._init_lock:
            if self._router_contract is not None:
                return
            router_abi = load_abi(self.config.abi)
            self._router_contract = ContractHandle(self.client, self.router_address, router_abi)
            missing = [m for m in ROUTER_METHODS if not self._router_contract.has_method(m)]
            if missing:
                logger.warning(f"{self.name} router ABI lacks {', '.join(missing)}; calls to them will fail")
            logger.info(f"{self.name} router contract created: address={self.router_address}")

    @property
    def router_contract(self) -> ContractHandle:
        if self._router_contract is None:
            raise PreconditionError(f"Router contract for {self.name} not created; call initialize() first")
        return self._router_contract

    # ========================================
    # QUOTING
    # ========================================

    async def get_token_price(
        self,
        token_pair: TokenPair,
        amount: Amount,
        use_amounts_in: bool = False,
    ) -> Decimal:
        """
        Quote the price of the input token in output-token units.

        Args:
            token_pair: (input, output) tokens; both must have resolved decimals
            amount: Human amount of the input token, or of the output token
                when use_amounts_in is True
            use_amounts_in: Quote via getAmountsIn (desired output -> required
                input) instead of getAmountsOut (input -> achievable output)

        Returns:
            amount_out / amount_in * 10**(input_decimals - output_decimals)

        Raises:
            PreconditionError: router not bound or decimals unresolved
            NumericConversionError: amount not representable in base units
            RemoteCallError: router call failed or returned too few amounts
        """
        router_contract = self.router_contract
        input_token = token_pair.input_token
        output_token = token_pair.output_token

        input_decimals = input_token.require_decimals()
        output_decimals = output_token.require_decimals()

        amount_in = to_base_units(amount, input_decimals)
        amount_out = to_base_units(amount, output_decimals)
        path = token_pair.path

        if use_amounts_in:
            amounts = await router_contract.call("getAmountsIn", amount_out, path)
            amount_in = self._amount_at(amounts, 0, "getAmountsIn")
        else:
            amounts = await router_contract.call("getAmountsOut", amount_in, path)
            amount_out = self._amount_at(amounts, 1, "getAmountsOut")

        if amount_in == 0:
            raise NumericConversionError(f"Resolved input amount is zero for {token_pair} on {self.name}")

        price = (
            Decimal(amount_out) / Decimal(amount_in)
            * Decimal(10) ** (input_decimals - output_decimals)
        )

        logger.debug(
            f"{self.name}, Amount-in: {amount_in}({input_token.symbol}), "
            f"Amount-out: {amount_out}({output_token.symbol}), Price: {price:.6f}"
        )
        return price

    def _amount_at(self, amounts, index: int, method: str) -> int:
        try:
            return int(amounts[index])
        except (IndexError, TypeError, ValueError) as e:
            raise RemoteCallError(f"{self.name} {method} returned unexpected result {amounts!r}") from e

    async def has_token_pair(self, input_token: FungibleToken, output_token: FungibleToken) -> bool:
        """
        Probe whether the router can quote input -> output.

        Quotes one base unit; any failure counts as "no pair" and is logged,
        never raised.
        """
        try:
            amounts = await self.router_contract.call(
                "getAmountsOut", 1, [input_token.address, output_token.address]
            )
            return len(amounts) > 1 and int(amounts[1]) != 0
        except (DexError, TypeError, ValueError) as e:
            logger.error(
                f"{self.name}: pair probe {input_token.symbol}->{output_token.symbol} failed: {e}"
            )
            return False

    # ========================================
    # SWAP EXECUTION
    # ========================================

    async def swap_token(
        self,
        token_pair: TokenPair,
        amount: Amount,
        signing_client: ChainClient,
        recipient: str,
        deadline_secs: Optional[int] = None,
    ) -> Decimal:
        """
        Swap an exact input amount for as many output tokens as the router gives.

        Submits exactly one swapExactTokensForTokens transaction with a zero
        minimum output, waits for one confirmation, and reads the realized
        output from the receipt logs.

        Args:
            token_pair: (input, output) tokens; both must have resolved decimals
            amount: Input amount in input-token human units
            signing_client: Client able to sign and submit (can_sign == True)
            recipient: Address that receives the output tokens
            deadline_secs: Seconds from now until the router rejects the swap
                (defaults to settings.swap_deadline_secs)

        Returns:
            Realized output amount in output-token human units

        Raises:
            PreconditionError: router not bound, decimals unresolved, or client cannot sign
            NumericConversionError: amount not representable in base units
            DeadlineError: deadline could not be computed
            MethodEncodingError: swap method missing from the router ABI
            RemoteCallError: submission or confirmation failed
            TransactionFailedError: no receipt, or receipt status != 1
            DataExtractionError: no decodable log from the output token
        """
        router_contract = self.router_contract
        if not signing_client.can_sign:
            raise PreconditionError(f"{self.name}: swap_token requires a signing chain client")

        input_token = token_pair.input_token
        output_token = token_pair.output_token
        input_decimals = input_token.require_decimals()
        output_decimals = output_token.require_decimals()

        amount_in = to_base_units(amount, input_decimals)
        if deadline_secs is None:
            deadline_secs = settings.swap_deadline_secs
        deadline = self._deadline(deadline_secs)

        connected_contract = router_contract.connect(signing_client)

        logger.info(
            f"{self.name} swap: {token_pair} amount_in={amount_in} recipient={recipient} deadline={deadline}"
        )

        swap_transaction = await connected_contract.send(
            "swapExactTokensForTokens",
            amount_in,
            0,
            token_pair.path,
            checksum_address(recipient),
            deadline,
        )

        receipt = await connected_contract.confirm(swap_transaction, SWAP_CONFIRMATIONS)

        if receipt is None:
            raise TransactionFailedError("Transaction receipt is none", tx_hash=swap_transaction.tx_hash)

        if not receipt.succeeded:
            raise TransactionFailedError(
                f"Token swap transaction failed: {swap_transaction.tx_hash}",
                tx_hash=swap_transaction.tx_hash,
            )

        output_amount = find_output_amount(receipt, output_token.address, self.config.swap_log_parser)
        output_amount_in_token = from_base_units(output_amount, output_decimals)

        logger.info(
            f"{self.name} swap confirmed: tx_hash={swap_transaction.tx_hash}, "
            f"received={output_amount_in_token} {output_token.symbol}, gas_used={receipt.gas_used}"
        )
        return output_amount_in_token

    @staticmethod
    def _deadline(deadline_secs: int) -> int:
        if isinstance(deadline_secs, bool) or not isinstance(deadline_secs, int) or deadline_secs < 0:
            raise DeadlineError(f"deadline_secs must be a non-negative integer, got {deadline_secs!r}")
        try:
            return int(time.time()) + deadline_secs
        except (OverflowError, ValueError) as e:
            raise DeadlineError(f"Could not compute swap deadline: {e}") from e

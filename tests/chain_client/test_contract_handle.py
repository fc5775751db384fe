"""
Tests for multidex/chain_client/contract.py

Covers ABI validation before dispatch, error mapping onto RemoteCallError,
and re-binding a handle to another client.
"""

import pytest
from unittest.mock import AsyncMock

from multidex.abi import UNISWAP_V2_ROUTER_ABI_RESOURCE, load_abi
from multidex.chain_client.base import PendingTransaction, TxReceipt
from multidex.chain_client.contract import ContractHandle, checksum_address
from multidex.exceptions import MethodEncodingError, PreconditionError, RemoteCallError

ROUTER = "0x10ED43C718714eb63d5aA57B78B54704E256024E"


@pytest.fixture
def router_abi():
    return load_abi(UNISWAP_V2_ROUTER_ABI_RESOURCE)


@pytest.fixture
def handle(mock_client, router_abi):
    return ContractHandle(mock_client, ROUTER, router_abi)


class TestContractHandleValidation:
    """Method name and arity are checked against the ABI."""

    def test_has_method(self, handle):
        assert handle.has_method("getAmountsOut")
        assert not handle.has_method("quoteExactInputSingle")

    @pytest.mark.asyncio
    async def test_unknown_method(self, handle, mock_client):
        """Failure: methods missing from the ABI never reach the client."""
        with pytest.raises(MethodEncodingError, match="not found"):
            await handle.call("quoteExactInputSingle", 1)
        mock_client.call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_method_lists_available(self, handle):
        with pytest.raises(MethodEncodingError, match="available: .*getAmountsOut"):
            await handle.call("quoteExactInputSingle", 1)

    @pytest.mark.asyncio
    async def test_wrong_arity(self, handle, mock_client):
        with pytest.raises(MethodEncodingError, match="expects 2"):
            await handle.call("getAmountsOut", 1)
        mock_client.call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_send_validates_too(self, handle, mock_client):
        with pytest.raises(MethodEncodingError):
            await handle.send("swapExactTokensForTokens", 1, 0)
        mock_client.send.assert_not_awaited()

    def test_method_encoding_error_is_remote_call_error(self):
        assert issubclass(MethodEncodingError, RemoteCallError)


class TestChecksumAddress:
    """Address arguments are normalized or rejected as encoding errors."""

    def test_lowercase_is_checksummed(self):
        assert checksum_address(ROUTER.lower()) == ROUTER

    @pytest.mark.parametrize("bad", ["0xnotanaddress", "0x1234", "0xZZ", None, 42])
    def test_malformed_address(self, bad):
        """Failure: malformed addresses become MethodEncodingError, chained to the web3 error."""
        with pytest.raises(MethodEncodingError, match="Invalid address") as exc_info:
            checksum_address(bad)
        assert isinstance(exc_info.value.__cause__, (TypeError, ValueError))


class TestContractHandleDispatch:
    """Calls are delegated to the client with address and ABI."""

    @pytest.mark.asyncio
    async def test_call_delegates(self, handle, mock_client, router_abi):
        mock_client.call.return_value = [1, 2]
        result = await handle.call("getAmountsOut", 1, ["0xa", "0xb"])
        assert result == [1, 2]
        mock_client.call.assert_awaited_once_with(ROUTER, router_abi, "getAmountsOut", (1, ["0xa", "0xb"]))

    @pytest.mark.asyncio
    async def test_call_failure_mapped(self, handle, mock_client):
        """Failure: transport / revert errors become RemoteCallError with the cause chained."""
        cause = RuntimeError("execution reverted: INSUFFICIENT_LIQUIDITY")
        mock_client.call.side_effect = cause
        with pytest.raises(RemoteCallError) as exc_info:
            await handle.call("getAmountsOut", 1, [])
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_dex_errors_pass_through(self, handle, mock_client):
        """Edge case: a DexError raised by the client keeps its kind."""
        mock_client.send.side_effect = PreconditionError("no signing account")
        with pytest.raises(PreconditionError):
            await handle.send("swapExactTokensForTokens", 1, 0, [], ROUTER, 0)

    @pytest.mark.asyncio
    async def test_connect_rebinds_client(self, handle, signing_client, mock_client):
        connected = handle.connect(signing_client)
        assert connected.address == handle.address
        assert connected.client is signing_client

        pending = await connected.send("swapExactTokensForTokens", 1, 0, [], ROUTER, 0)

        assert isinstance(pending, PendingTransaction)
        signing_client.send.assert_awaited_once()
        mock_client.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_confirm(self, handle, mock_client):
        receipt = TxReceipt(transaction_hash="0x01", status=1)
        mock_client.wait_for_confirmations.return_value = receipt
        pending = PendingTransaction(tx_hash="0x01")

        assert await handle.confirm(pending, 1) is receipt
        mock_client.wait_for_confirmations.assert_awaited_once_with(pending, 1)

    @pytest.mark.asyncio
    async def test_confirm_failure_mapped(self, handle, mock_client):
        mock_client.wait_for_confirmations = AsyncMock(side_effect=TimeoutError("rpc timeout"))
        with pytest.raises(RemoteCallError):
            await handle.confirm(PendingTransaction(tx_hash="0x01"))

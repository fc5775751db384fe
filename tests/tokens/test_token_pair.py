"""
Tests for multidex/tokens/pair.py
"""

import dataclasses

import pytest

from multidex.tokens.pair import TokenPair


class TestTokenPair:
    """TokenPair is an immutable (input, output) value."""

    def test_swap_exchanges_legs(self, pair, wbnb, usdc):
        """Happy path: swap() reverses input and output."""
        reversed_pair = pair.swap()
        assert reversed_pair.input_token is usdc
        assert reversed_pair.output_token is wbnb

    def test_swap_leaves_pair_unchanged(self, pair, wbnb, usdc):
        pair.swap()
        assert pair.input_token is wbnb
        assert pair.output_token is usdc

    def test_double_swap_restores_order(self, pair):
        assert pair.swap().swap() == pair

    def test_tokens_are_shared_not_copied(self, wbnb, usdc):
        """Edge case: the same token can back many pairs."""
        first = TokenPair(wbnb, usdc)
        second = TokenPair(usdc, wbnb)
        assert first.input_token is second.output_token

    def test_path(self, pair, wbnb, usdc):
        assert pair.path == [wbnb.address, usdc.address]

    def test_same_token_on_both_legs_allowed(self, wbnb):
        same = TokenPair(wbnb, wbnb)
        assert same.swap() == same

    def test_frozen(self, pair, wbnb):
        with pytest.raises(dataclasses.FrozenInstanceError):
            pair.input_token = wbnb

    def test_str(self, pair):
        assert str(pair) == "WBNB->USDC"

"""
Supported EVM chains.

Chain identity is bookkeeping only: quoting and swapping behave the same on
every chain.
"""

from enum import Enum


class Chain(Enum):
    BSC = 56
    POLYGON = 137
    BASE = 8453

    @property
    def chain_id(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_chain_id(cls, chain_id: int) -> "Chain":
        """Look up a chain by numeric id, raising ValueError if unsupported."""
        try:
            return cls(chain_id)
        except ValueError:
            raise ValueError(f"Unsupported chain id: {chain_id}") from None


_DISPLAY_NAMES = {
    Chain.BSC: "BNB Smart Chain",
    Chain.POLYGON: "Polygon",
    Chain.BASE: "Base",
}

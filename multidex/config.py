from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from multidex.chains import Chain


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MULTIDEX_", env_file=".env", case_sensitive=False)

    # RPC endpoints (public defaults; override with a private node for real trading)
    rpc_url_bsc: str = "https://bsc-dataseed.binance.org"
    rpc_url_polygon: str = "https://polygon-rpc.com"
    rpc_url_base: str = "https://mainnet.base.org"
    rpc_request_timeout_secs: float = 30.0

    # Wallet used by signing clients
    wallet_private_key: str = ""

    @field_validator("wallet_private_key")
    @classmethod
    def normalize_private_key(cls, v: str) -> str:
        """Strip whitespace and add the 0x prefix if missing"""
        v = v.strip()
        if v and not v.startswith("0x"):
            return "0x" + v
        return v

    # Swap execution
    swap_deadline_secs: int = 300  # 5 minutes
    gas_limit: Optional[int] = None  # None lets web3 estimate

    # Receipt waiting
    receipt_timeout_secs: float = 120.0
    confirmation_poll_interval_secs: float = 2.0

    def rpc_url_for(self, chain: Chain) -> str:
        return {
            Chain.BSC: self.rpc_url_bsc,
            Chain.POLYGON: self.rpc_url_polygon,
            Chain.BASE: self.rpc_url_base,
        }[chain]


settings = Settings()

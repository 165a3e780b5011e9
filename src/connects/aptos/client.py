# src/connects/aptos/client.py
# Created: 2026-03-09 14:22:17
# Author: Connects

from typing import List, Optional, Type, TypeVar
from dataclasses import dataclass
from enum import Enum
import hashlib

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from pydantic import BaseModel

from ..api.api_client import APIConfig, ResponseEnvelope, Transport
from ..api.connect import BaseConnect
from ..core.config import Config
from ..core.exceptions import ValidationError
from ..core.utils import validate_string
from . import endpoints
from .errors import APTOS_ERROR_TABLE, APTOS_ERRORS
from .schemas import AccountInfo, AptosAccount, CoinStore, FaucetHashes, NodeError, Transaction

M = TypeVar('M', bound=BaseModel)

# Authentication key scheme byte for single signer Ed25519 accounts
ED25519_SCHEME = b"\x00"

class AptosNetwork(Enum):
    """Aptos networks"""
    DEVNET = "DEVNET"
    TESTNET = "TESTNET"
    MAINNET = "MAINNET"

@dataclass(frozen=True)
class AptosConfig:
    """Immutable Aptos client settings"""
    network: AptosNetwork = AptosNetwork.MAINNET
    version: str = "v1"
    timeout: float = 10.0

    def __post_init__(self):
        network = self.network
        if not isinstance(network, AptosNetwork):
            try:
                network = AptosNetwork(str(network).strip().upper())
            except ValueError:
                raise APTOS_ERRORS.error("CONFIG_INVALID_NETWORK", {"network": network})
            object.__setattr__(self, "network", network)

    @property
    def base_url(self) -> str:
        return f"https://fullnode.{self.network.value.lower()}.aptoslabs.com/{self.version}"

    @property
    def faucet_url(self) -> Optional[str]:
        if self.network is AptosNetwork.MAINNET:
            return None
        return f"https://faucet.{self.network.value.lower()}.aptoslabs.com"

    @classmethod
    def from_config(cls, config: Config) -> "AptosConfig":
        section = config.section("aptos")
        return cls(
            network=section.get("network", AptosNetwork.MAINNET.value),
            version=section.get("version", "v1"),
            timeout=float(section.get("timeout", 10.0))
        )

class Aptos(BaseConnect):
    """
    Aptos full node client.

    Reads accounts, APT balances and transactions, funds accounts through the
    devnet/testnet faucet and generates Ed25519 accounts locally. Addresses
    are validated before any request is made.
    """

    vendor = APTOS_ERRORS.vendor
    catalog = APTOS_ERRORS
    table = APTOS_ERROR_TABLE

    def __init__(self, config: Optional[AptosConfig] = None, transport: Optional[Transport] = None):
        self.config = config or AptosConfig()
        super().__init__(
            APIConfig(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers={"Accept": "application/json"}
            ),
            transport
        )

    @property
    def network(self) -> AptosNetwork:
        return self.config.network

    @property
    def faucet_url(self) -> Optional[str]:
        return self.config.faucet_url

    def _handle(self, response: ResponseEnvelope, schema: Type[M]) -> M:
        if 200 <= response.status < 300:
            return self.responses.validate(schema, response.body, "PARSE_ERROR", status=response.status)

        error = self.responses.matches(NodeError, response.body)
        if error is None:
            info = self.responses.extract_error(response)
            raise self.responses.fail(info["status"], info["code"], body=info["body"])
        raise self.responses.fail(
            response.status,
            error.error_code,
            description=error.message,
            vm_error_code=error.vm_error_code
        )

    @staticmethod
    def is_valid_address(address: str) -> bool:
        """
        Check the format of an account address.

        Accepts ``0x`` followed by 1 to 64 hex digits; short forms with the
        leading zeros dropped are valid.
        """
        return endpoints.is_valid_address(address)

    @staticmethod
    def normalize_address(address: str) -> Optional[str]:
        """Zero-pad and lower-case an address to its full 64 digit form, None when invalid"""
        return endpoints.normalize_address(address)

    @staticmethod
    def account_from_private_key(private_key: str) -> AptosAccount:
        """Rebuild an account from a 32 byte hex encoded Ed25519 private key"""
        key_hex = validate_string(private_key)
        try:
            raw = bytes.fromhex(key_hex[2:] if key_hex.startswith("0x") else key_hex)
            key = Ed25519PrivateKey.from_private_bytes(raw)
        except ValueError as e:
            raise ValidationError(f"Invalid Ed25519 private key: {str(e)}")
        public = key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )
        address = hashlib.sha3_256(public + ED25519_SCHEME).hexdigest()
        return AptosAccount(
            address=f"0x{address}",
            private_key=f"0x{raw.hex()}",
            public_key=f"0x{public.hex()}"
        )

    def create_account(self) -> AptosAccount:
        """Generate a new Ed25519 key pair and derive its account address"""
        raw = Ed25519PrivateKey.generate().private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption()
        )
        return self.account_from_private_key(raw.hex())

    async def get_account(self, address: str) -> AccountInfo:
        """Sequence number and authentication key of an on-chain account"""
        return await self._call(endpoints.account, AccountInfo, address)

    async def get_balance(self, address: str) -> int:
        """APT balance of an account in octas"""
        store = await self._call(endpoints.coin_store, CoinStore, address)
        return int(store.data.coin.value)

    async def get_transaction(self, txn_hash: str) -> Transaction:
        """Look up a transaction by its hash"""
        return await self._call(endpoints.transaction, Transaction, txn_hash)

    async def fund_account(self, address: str, amount: int) -> List[str]:
        """
        Mint test coins into an account through the network faucet

        Args:
            address: Account to fund
            amount: Amount in octas

        Returns:
            Hashes of the faucet transactions
        """
        faucet = self.faucet_url
        if faucet is None:
            raise self._error("FAUCET_UNAVAILABLE", network=self.network.value)
        hashes = await self._call(endpoints.mint, FaucetHashes, faucet, address, amount)
        return hashes.root

"""Request builders for the Aptos full node and faucet.

Account addresses are checked and zero-padded here; a malformed address
raises INVALID_ADDRESS before anything is sent.
"""

import re
from typing import Any, Optional

from ..api.api_client import RequestDescriptor, RequestMethod
from ..core.utils import compact_query
from .errors import APTOS_ERRORS

APT_COIN_STORE = "0x1::coin::CoinStore<0x1::aptos_coin::AptosCoin>"
ADDRESS_LENGTH = 64

_HEX = re.compile(r"^[0-9a-fA-F]+$")

def is_valid_address(address: Any) -> bool:
    if not isinstance(address, str) or not address.startswith("0x"):
        return False
    digits = address[2:]
    return bool(_HEX.match(digits)) and len(digits) <= ADDRESS_LENGTH

def normalize_address(address: Any) -> Optional[str]:
    if not is_valid_address(address):
        return None
    # Lower case so one account always maps to one URL
    return "0x" + address[2:].lower().rjust(ADDRESS_LENGTH, "0")

def _address(address: Any) -> str:
    normalized = normalize_address(address.strip() if isinstance(address, str) else address)
    if normalized is None:
        raise APTOS_ERRORS.error("INVALID_ADDRESS", {"address": address})
    return normalized

def account(address: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"accounts/{_address(address)}", method=RequestMethod.GET)

def coin_store(address: str) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"accounts/{_address(address)}/resource/{APT_COIN_STORE}",
        method=RequestMethod.GET,
    )

def transaction(txn_hash: str) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"transactions/by_hash/{txn_hash.strip().lower()}",
        method=RequestMethod.GET,
    )

def mint(faucet_url: str, address: str, amount: int) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"{faucet_url.rstrip('/')}/mint",
        method=RequestMethod.POST,
        query=compact_query({"amount": int(amount), "address": _address(address)}),
    )

"""
Aptos blockchain connect.
"""

from .client import Aptos, AptosConfig, AptosNetwork
from .errors import APTOS_ERROR_TABLE, APTOS_ERRORS
from .schemas import AccountInfo, AptosAccount, CoinStore, NodeError, Transaction

__all__ = [
    'Aptos',
    'AptosConfig',
    'AptosNetwork',
    'APTOS_ERRORS',
    'APTOS_ERROR_TABLE',
    'AccountInfo',
    'AptosAccount',
    'CoinStore',
    'NodeError',
    'Transaction'
]

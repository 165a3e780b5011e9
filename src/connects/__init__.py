"""
Connects: typed async clients for third-party HTTP APIs.

Each connect validates its responses with pydantic models and reports every
failure as a ConnectError carrying a vendor specific code.
"""

from .api import ConnectError, ErrorCatalog, ErrorTable
from .aptos import Aptos, AptosConfig, AptosNetwork
from .core import Config, Logger
from .openexchange import OpenExchange, OpenExchangeConfig
from .surepass import Surepass, SurepassConfig, SurepassMode

__version__ = "0.1.0"

__all__ = [
    'ConnectError',
    'ErrorCatalog',
    'ErrorTable',
    'Aptos',
    'AptosConfig',
    'AptosNetwork',
    'Config',
    'Logger',
    'OpenExchange',
    'OpenExchangeConfig',
    'Surepass',
    'SurepassConfig',
    'SurepassMode'
]

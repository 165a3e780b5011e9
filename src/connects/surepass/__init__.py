"""
Surepass KYC verification connect.
"""

from .client import Surepass, SurepassConfig, SurepassMode
from .errors import SUREPASS_ERRORS, SUREPASS_STATUS_TABLE
from .schemas import (
    AadhaarOtpInitiation,
    AadhaarVerification,
    BankVerification,
    CompanyDetails,
    GSTINDetails,
    NameMatch,
    PanComprehensive,
    SurepassEnvelope
)

__all__ = [
    'Surepass',
    'SurepassConfig',
    'SurepassMode',
    'SUREPASS_ERRORS',
    'SUREPASS_STATUS_TABLE',
    'AadhaarOtpInitiation',
    'AadhaarVerification',
    'BankVerification',
    'CompanyDetails',
    'GSTINDetails',
    'NameMatch',
    'PanComprehensive',
    'SurepassEnvelope'
]

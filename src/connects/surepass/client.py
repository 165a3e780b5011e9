# src/connects/surepass/client.py
# Created: 2026-03-04 09:51:36
# Author: Connects

from typing import Optional, Type, TypeVar
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel

from ..api.api_client import APIConfig, RequestDescriptor, ResponseEnvelope, Transport
from ..api.connect import BaseConnect
from ..core.config import Config
from . import endpoints
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

M = TypeVar('M', bound=BaseModel)

class SurepassMode(Enum):
    """Surepass environments"""
    SANDBOX = "SANDBOX"
    PRODUCTION = "PRODUCTION"

BASE_URLS = MappingProxyType({
    SurepassMode.SANDBOX: "https://sandbox.surepass.app/api",
    SurepassMode.PRODUCTION: "https://kyc-api.surepass.app/api",
})

@dataclass(frozen=True)
class SurepassConfig:
    """Immutable Surepass client settings"""
    token: str
    mode: SurepassMode = SurepassMode.SANDBOX
    version: str = "v1"
    timeout: float = 10.0

    def __post_init__(self):
        if not isinstance(self.token, str) or not self.token.strip():
            raise SUREPASS_ERRORS.error("CONFIG_INVALID_TOKEN")
        object.__setattr__(self, "token", self.token.strip())

        mode = self.mode
        if not isinstance(mode, SurepassMode):
            try:
                mode = SurepassMode(str(mode).strip().upper())
            except ValueError:
                raise SUREPASS_ERRORS.error("CONFIG_INVALID_MODE", {"mode": mode})
            object.__setattr__(self, "mode", mode)

    @property
    def base_url(self) -> str:
        return f"{BASE_URLS[self.mode]}/{self.version}"

    @classmethod
    def from_config(cls, config: Config) -> "SurepassConfig":
        section = config.section("surepass")
        token = section.get("token")
        return cls(
            token=str(token) if token is not None else "",
            mode=section.get("mode", SurepassMode.SANDBOX.value),
            version=section.get("version", "v1"),
            timeout=float(section.get("timeout", 10.0))
        )

class Surepass(BaseConnect):
    """
    Surepass KYC verification client.

    Supports name matching, bank account, PAN, Aadhaar (OTP flow), company
    (CIN) and GSTIN verification. Each operation resolves with a validated
    model or raises a Surepass ConnectError.

    Example:
        async with Surepass(SurepassConfig(token="...", mode=SurepassMode.SANDBOX)) as surepass:
            result = await surepass.compare_names("John Doe", "john doe")
            print(result.match_score)
    """

    vendor = SUREPASS_ERRORS.vendor
    catalog = SUREPASS_ERRORS
    table = SUREPASS_STATUS_TABLE

    def __init__(self, config: SurepassConfig, transport: Optional[Transport] = None):
        self.config = config
        super().__init__(
            APIConfig(
                base_url=config.base_url,
                timeout=config.timeout,
                headers={"Accept": "application/json"}
            ),
            transport
        )

    def _authorize(self, request: RequestDescriptor) -> RequestDescriptor:
        headers = dict(request.headers or {})
        headers["Authorization"] = f"Bearer {self.config.token}"
        return replace(request, headers=headers)

    def _handle(self, response: ResponseEnvelope, schema: Type[M]) -> M:
        envelope = self.responses.validate(
            SurepassEnvelope,
            response.body,
            "RESPONSE_ERROR",
            status=response.status
        )
        status = envelope.status_code if envelope.status_code is not None else response.status

        failed = envelope.success is False or (envelope.success is None and response.status >= 400)
        if failed:
            raise self.responses.fail(
                status,
                envelope.message,
                message_code=envelope.message_code,
                details=envelope.data
            )

        # Some endpoints answer with the bare result instead of the envelope
        data = envelope.data if envelope.data is not None else response.body
        return self.responses.validate(schema, data, "PARSE_ERROR", status=status)

    async def compare_names(self, name1: str, name2: str, is_company: bool = False) -> NameMatch:
        """
        Compare two names for similarity

        Args:
            name1: First name to compare
            name2: Second name to compare
            is_company: Treat the names as company names instead of person names

        Returns:
            NameMatch with the match score and status
        """
        return await self._call(endpoints.name_match, NameMatch, name1, name2, is_company)

    async def verify_bank_account(self, account_number: str, ifsc: str) -> BankVerification:
        """
        Verify a bank account using account number and IFSC code

        Args:
            account_number: Bank account number
            ifsc: IFSC code of the branch

        Returns:
            BankVerification with holder name and branch details
        """
        return await self._call(endpoints.bank_verification, BankVerification, account_number, ifsc)

    async def verify_pan(self, pan: str) -> PanComprehensive:
        """Verify a PAN (format ABCDE1234F) and fetch its registered details"""
        return await self._call(endpoints.pan_comprehensive, PanComprehensive, pan)

    async def initiate_aadhaar(self, aadhaar: str) -> AadhaarOtpInitiation:
        """
        Start Aadhaar verification by sending an OTP to the registered mobile

        Args:
            aadhaar: 12 digit Aadhaar number

        Returns:
            AadhaarOtpInitiation whose client_id is passed to fetch_aadhaar
        """
        return await self._call(endpoints.aadhaar_generate_otp, AadhaarOtpInitiation, aadhaar)

    async def fetch_aadhaar(self, client_id: str, otp: str) -> AadhaarVerification:
        """
        Complete Aadhaar verification with the OTP

        Args:
            client_id: client_id returned by initiate_aadhaar
            otp: OTP received on the registered mobile

        Returns:
            AadhaarVerification with the holder's details
        """
        return await self._call(endpoints.aadhaar_submit_otp, AadhaarVerification, client_id, otp)

    async def verify_cin(self, cin: str) -> CompanyDetails:
        """Fetch company details and directors for a Corporate Identification Number"""
        return await self._call(endpoints.company_details, CompanyDetails, cin)

    async def verify_gstin(self, gstin: str) -> GSTINDetails:
        """Fetch registration details for a 15 character GSTIN"""
        return await self._call(endpoints.gstin_details, GSTINDetails, gstin)

    def __repr__(self) -> str:
        return f"Surepass(mode={self.config.mode.value})"

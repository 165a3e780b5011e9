"""Response models for the Surepass KYC API.

Every model ignores fields it does not declare, so additions on the vendor
side do not break validation. Dates arrive as ``YYYY-MM-DD`` strings and are
turned into ``datetime.date``.
"""

import re
from datetime import date
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def _iso_date(value: Any) -> Any:
    if isinstance(value, str) and not _ISO_DATE.match(value):
        raise ValueError("date must be formatted as YYYY-MM-DD")
    if not isinstance(value, (str, date)):
        raise ValueError("date must be a YYYY-MM-DD string")
    return value

def _upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value

IsoDate = Annotated[date, BeforeValidator(_iso_date)]
EmailText = Annotated[str, StringConstraints(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")]
Gender = Literal["M", "F", "T", "O"]

class SurepassModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

class SurepassEnvelope(SurepassModel):
    """The JSON wrapper around every Surepass response."""

    status_code: Optional[int] = None
    success: Optional[bool] = None
    message: Optional[str] = None
    message_code: Optional[Annotated[str, BeforeValidator(_upper)]] = None
    data: Optional[Dict[str, Any]] = None

class NameMatch(SurepassModel):
    client_id: str
    name_1: str
    name_2: str
    match_score: float
    match_status: bool

class IfscDetails(SurepassModel):
    id: int
    ifsc: str
    micr: str
    iso3166: str
    swift: Optional[str] = None
    bank: str
    bank_code: str
    bank_name: str
    branch: str
    centre: str
    district: str
    state: str
    city: str
    address: str
    contact: Optional[str] = None
    imps: bool
    rtgs: bool
    neft: bool
    upi: bool
    micr_check: bool

class BankVerification(SurepassModel):
    client_id: str
    account_exists: bool
    upi_id: Optional[str] = None
    full_name: str
    imps_ref_no: Optional[str] = None
    remarks: Optional[str] = None
    status: str
    ifsc_details: IfscDetails

class PanAddress(SurepassModel):
    line_1: str
    line_2: str
    street_name: str
    zip: Optional[str] = None
    city: str
    state: str
    country: str
    full: str

PanCategory = Literal[
    "company",
    "person",
    "huf",
    "firm",
    "aop",
    "aop_trust",
    "boi",
    "local_authority",
    "artificial_juridical_person",
    "government",
]

class PanDetails(SurepassModel):
    full_name: str
    masked_aadhaar: Optional[str] = None
    address: Optional[PanAddress] = None
    email: Optional[EmailText] = None
    phone_number: Optional[str] = None
    gender: Optional[Literal["M", "F", "T", "O", ""]] = None
    dob: IsoDate
    input_dob: Optional[str] = None
    aadhaar_linked: Optional[bool] = None
    dob_verified: bool
    dob_check: bool
    category: PanCategory
    father_name: Optional[str] = None

class PanComprehensive(SurepassModel):
    client_id: str
    pan_number: Annotated[str, StringConstraints(pattern=r"^[A-Z]{5}[0-9]{4}[A-Z]$")]
    pan_details: PanDetails

class AadhaarOtpInitiation(SurepassModel):
    client_id: str
    otp_sent: bool
    if_number: bool
    status: Optional[str] = None

class AadhaarAddress(SurepassModel):
    loc: Optional[str] = None
    country: Optional[str] = None
    house: Optional[str] = None
    subdist: Optional[str] = None
    vtc: Optional[str] = None
    po: Optional[str] = None
    state: Optional[str] = None
    street: Optional[str] = None
    dist: Optional[str] = None
    landmark: Optional[str] = None

class AadhaarVerification(SurepassModel):
    client_id: str
    aadhaar_number: Annotated[str, StringConstraints(pattern=r"^\d{12}$")]
    gender: Gender
    dob: IsoDate
    full_name: str
    care_of: Optional[str] = None
    profile_image: Optional[str] = None
    share_code: Optional[str] = None
    zip_data: str
    raw_xml: str
    zip: str
    address: AadhaarAddress

class CompanyInfo(SurepassModel):
    cin: str
    roc_code: str
    registration_number: str
    company_category: str
    class_of_company: str
    company_sub_category: str
    authorized_capital: str
    paid_up_capital: str
    number_of_members: str
    date_of_incorporation: str
    registered_address: str
    address_other_than_ro: str
    email_id: str
    listed_status: str
    active_compliance: Optional[str] = None
    suspended_at_stock_exchange: str
    last_agm_date: str
    last_bs_date: str
    company_status: str
    status_under_cirp: Optional[str] = None

class Director(SurepassModel):
    din_number: str
    director_name: str
    start_date: IsoDate
    end_date: Optional[IsoDate] = None
    surrendered_din: Optional[str] = None

class CompanyDetailsBody(SurepassModel):
    company_info: CompanyInfo
    directors: List[Director]

class CompanyDetails(SurepassModel):
    client_id: str
    company_id: str
    company_type: str
    company_name: str
    details: CompanyDetailsBody

class GSTINDetails(SurepassModel):
    client_id: str
    address_details: Dict[str, Any]
    gstin: str
    pan_number: str
    business_name: str
    legal_name: str
    center_jurisdiction: str
    state_jurisdiction: str
    date_of_registration: str
    constitution_of_business: str
    taxpayer_type: str
    gstin_status: str
    date_of_cancellation: str
    field_visit_conducted: str
    nature_bus_activities: List[str]
    nature_of_core_business_activity_code: str
    nature_of_core_business_activity_description: str
    aadhaar_validation: str
    aadhaar_validation_date: str
    filing_status: List[str]
    address: str
    hsn_info: Dict[str, Any]
    filing_frequency: List[str]

"""Request builders for Surepass endpoints.

All caller input normalization for an operation happens here and nowhere
else. Identifier formats are not checked; Surepass answers a malformed
identifier with a 422 which maps to VERIFICATION_FAILED.
"""

from typing import Any, Dict

from ..api.api_client import ContentType, RequestDescriptor, RequestMethod

NAME_MATCH = "utils/name-matching/"
BANK_VERIFICATION = "bank-verification"
PAN_COMPREHENSIVE = "pan/pan-comprehensive-plus"
AADHAAR_GENERATE_OTP = "aadhaar-v2/generate-otp"
AADHAAR_SUBMIT_OTP = "aadhaar-v2/submit-otp"
COMPANY_DETAILS = "corporate/company-details"
GSTIN = "corporate/gstin"

def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()

def _code(value: Any) -> str:
    return _text(value).upper()

def _digits(value: Any) -> str:
    return "".join(_text(value).split())

def _post(path: str, payload: Dict[str, Any]) -> RequestDescriptor:
    return RequestDescriptor(
        path=path,
        method=RequestMethod.POST,
        payload=payload,
        content_type=ContentType.JSON,
    )

def name_match(name1: str, name2: str, is_company: bool = False) -> RequestDescriptor:
    return _post(NAME_MATCH, {
        "name_1": _text(name1),
        "name_2": _text(name2),
        "name_type": "company" if is_company else "person",
    })

def bank_verification(account_number: str, ifsc: str) -> RequestDescriptor:
    return _post(BANK_VERIFICATION, {
        "id_number": _digits(account_number),
        "ifsc": _code(ifsc),
        "ifsc_details": True,
    })

def pan_comprehensive(pan: str) -> RequestDescriptor:
    return _post(PAN_COMPREHENSIVE, {"id_number": _code(pan)})

def aadhaar_generate_otp(aadhaar: str) -> RequestDescriptor:
    return _post(AADHAAR_GENERATE_OTP, {"id_number": _digits(aadhaar)})

def aadhaar_submit_otp(client_id: str, otp: str) -> RequestDescriptor:
    return _post(AADHAAR_SUBMIT_OTP, {"client_id": _text(client_id), "otp": _digits(otp)})

def company_details(cin: str) -> RequestDescriptor:
    return _post(COMPANY_DETAILS, {"id_number": _code(cin)})

def gstin_details(gstin: str) -> RequestDescriptor:
    return _post(GSTIN, {"id_number": _code(gstin)})

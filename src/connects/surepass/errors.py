from ..api.errors import ErrorCatalog, ErrorTable

SUREPASS_ERRORS = ErrorCatalog(
    vendor="Surepass",
    templates={
        "UNHANDLED_ERROR": "An unhandled error occurred.",
        "UNKNOWN_ERROR": "An unknown error occurred in Surepass.",
        "CONFIG_INVALID_TOKEN": "Bearer token must be a non-empty string.",
        "CONFIG_INVALID_MODE": "Mode must be SANDBOX or PRODUCTION, got ${mode}.",
        "RESPONSE_ERROR": "Got an invalid response/response status: ${status}. Check details.",
        "INVALID_TOKEN": (
            "The bearer token has either expired or is invalid or does not have "
            "access to this scope."
        ),
        "RATE_LIMIT_EXCEEDED": "You have exceeded the rate limit for this API. Please try again later.",
        "SERVICE_UNAVAILABLE": "Surepass API's are down or facing issues. Please try again later.",
        "VERIFICATION_FAILED": "There is an issue with the data provided. Please re-check.",
        "PARSE_ERROR": (
            "The response from API did not match the expected format. "
            "See details for more information."
        ),
        "UNKNOWN_RESPONSE_ERROR": "Received an unknown response status code from Surepass API.",
    },
)

# Surepass reports failures through the status_code of its JSON envelope
SUREPASS_STATUS_TABLE = ErrorTable(
    default="UNKNOWN_RESPONSE_ERROR",
    statuses={
        401: "INVALID_TOKEN",
        422: "VERIFICATION_FAILED",
        429: "RATE_LIMIT_EXCEEDED",
        500: "SERVICE_UNAVAILABLE",
    },
)

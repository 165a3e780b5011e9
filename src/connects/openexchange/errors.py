from ..api.errors import ErrorCatalog, ErrorTable

OPENEXCHANGE_ERRORS = ErrorCatalog(
    vendor="OpenExchange",
    templates={
        "UNHANDLED_ERROR": "An unhandled error occurred.",
        "UNKNOWN_ERROR": "An unknown error occurred in Open Exchange.",
        "MISSING_APP_ID": "Application ID is required for the API request.",
        "CONFIG_INVALID_APP_ID": "Application ID must be a non-empty string.",
        "CONFIG_INVALID_BASE_CURRENCY": "Base currency must be a 3-character string, got ${base_currency}.",
        "INVALID_APP_ID": "Invalid application ID provided (expired or de-activated application id).",
        "NOT_FOUND": "The requested resource was not found.",
        "NOT_ALLOWED": "This operation is not allowed with the current application ID.",
        "RESPONSE_ERROR": "Got an invalid response/response status: ${status} from Open Exchange API.",
        "SERVICE_UNAVAILABLE": "Open Exchange service is currently unavailable.",
    },
)

# Statuses for which Open Exchange returns its JSON error envelope
ERROR_STATUSES = frozenset({400, 401, 403, 404, 429})

OPENEXCHANGE_MESSAGE_TABLE = ErrorTable(
    default="RESPONSE_ERROR",
    messages={
        "not_found": "NOT_FOUND",
        "missing_app_id": "MISSING_APP_ID",
        "invalid_app_id": "INVALID_APP_ID",
        "not_allowed": "NOT_ALLOWED",
        "access_restricted": "NOT_ALLOWED",
    },
)

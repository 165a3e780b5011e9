from ..api.errors import ErrorCatalog, ErrorTable

APTOS_ERRORS = ErrorCatalog(
    vendor="Aptos",
    templates={
        "UNHANDLED_ERROR": "An unhandled error occurred.",
        "UNKNOWN_ERROR": "An unknown error occurred in Aptos.",
        "CONFIG_INVALID_NETWORK": "Network must be DEVNET, TESTNET or MAINNET, got ${network}.",
        "INVALID_ADDRESS": "${address} is not a valid Aptos account address.",
        "FAUCET_UNAVAILABLE": "No faucet is available on ${network}.",
        "NOT_FOUND": "The requested account, resource or transaction was not found.",
        "INVALID_REQUEST": "The Aptos node rejected the request as invalid.",
        "RATE_LIMIT_EXCEEDED": "You have exceeded the rate limit of the Aptos node. Please try again later.",
        "SERVICE_UNAVAILABLE": "The Aptos node is unavailable. Please try again later.",
        "RESPONSE_ERROR": "Got an invalid response/response status: ${status} from Aptos.",
        "PARSE_ERROR": "The response from Aptos did not match the expected format. See details.",
        "UNKNOWN_RESPONSE_ERROR": "Received an unknown response status code from Aptos.",
    },
)

# Node errors carry an error_code; fall back to the HTTP status otherwise
APTOS_ERROR_TABLE = ErrorTable(
    default="UNKNOWN_RESPONSE_ERROR",
    statuses={
        400: "INVALID_REQUEST",
        404: "NOT_FOUND",
        429: "RATE_LIMIT_EXCEEDED",
        500: "SERVICE_UNAVAILABLE",
        502: "SERVICE_UNAVAILABLE",
        503: "SERVICE_UNAVAILABLE",
    },
    messages={
        "account_not_found": "NOT_FOUND",
        "resource_not_found": "NOT_FOUND",
        "transaction_not_found": "NOT_FOUND",
        "invalid_input": "INVALID_REQUEST",
    },
)

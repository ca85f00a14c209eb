"""
Debuget Explanation Module
Plain-language sentence for an error
"""

from typing import Any, Optional

from .descriptor import ErrorDescriptor, describe

CODE_EXPLANATIONS = {
    "ECONNREFUSED": "Couldn't reach the database. Is it running?",
    "ENOENT": "Tried to access a file that doesn't exist. Check the path.",
    "ENOTFOUND": "Network connection failed. Check your internet connection.",
    "EACCES": "Permission denied. Try running with elevated privileges.",
    "EPIPE": "A broken pipe occurred. Ensure the receiving stream is open.",
    "ETIMEDOUT": "Operation timed out. The resource may be unavailable.",
    "EHOSTUNREACH": "Host unreachable. Verify network settings or DNS.",
    "EAI_AGAIN": "DNS lookup timed out. Try again later.",
    "CERT_HAS_EXPIRED": "SSL certificate expired. Renew the certificate.",
    "UNABLE_TO_VERIFY_LEAF_SIGNATURE": "SSL verification failed. Check your CA chain.",
}

STATUS_EXPLANATIONS = {
    400: "Bad request. Check your inputs or query parameters.",
    401: "Unauthorized. You need to log in or refresh credentials.",
    403: "Forbidden. You don’t have permission to perform this action.",
    404: "Not found. The requested resource doesn’t exist.",
    500: "Internal server error. Something went wrong on the server.",
}

KIND_EXPLANATIONS = {
    "SyntaxError": "There was a syntax problem. Verify your code or JSON.",
    "ReferenceError": "Tried to use a variable or function that doesn't exist.",
    "TypeError": "Tried to use a value in an invalid way (wrong type).",
    "ValidationError": "Input failed validation rules. Check required fields.",
    "JsonWebTokenError": "Your authentication token is invalid or malformed.",
    "TokenExpiredError": "Your authentication token has expired. Please log in again.",
    "AggregateError": "Multiple errors occurred. Check each cause.",
    "AbortError": "The operation was aborted before completion.",
}

DEFAULT_EXPLANATION = "An unexpected error occurred while running the application."


def _lookup_status(descriptor: ErrorDescriptor) -> Optional[int]:
    # `status` wins over `status_code`; the nested response is the last resort
    return descriptor.status or descriptor.status_code or descriptor.response_status


def explain(error: Any) -> str:
    """
    Explain an error in one sentence.

    Lookup order, first hit wins: machine code, numeric status,
    kind name, generic fallback.
    """
    descriptor = describe(error)

    if descriptor.code and descriptor.code in CODE_EXPLANATIONS:
        return CODE_EXPLANATIONS[descriptor.code]

    status = _lookup_status(descriptor)
    if status and status in STATUS_EXPLANATIONS:
        return STATUS_EXPLANATIONS[status]

    if descriptor.kind_name and descriptor.kind_name in KIND_EXPLANATIONS:
        return KIND_EXPLANATIONS[descriptor.kind_name]

    return DEFAULT_EXPLANATION

"""
Debuget Error Descriptor
Read-only view of a raised value, as consumed by the classifier and composer
"""

import asyncio
import errno
import socket
import ssl
import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Optional, Tuple

# Python builtins that play the role of the runtime-neutral kind names
KIND_ALIASES = {
    "NameError": "ReferenceError",
    "UnboundLocalError": "ReferenceError",
    "ExceptionGroup": "AggregateError",
    "BaseExceptionGroup": "AggregateError",
}

# OpenSSL X509_V_ERR_* verify codes
SSL_VERIFY_CODES = {
    2: "UNABLE_TO_GET_ISSUER_CERT",
    9: "CERT_NOT_YET_VALID",
    10: "CERT_HAS_EXPIRED",
    18: "DEPTH_ZERO_SELF_SIGNED_CERT",
    19: "SELF_SIGNED_CERT_IN_CHAIN",
    20: "UNABLE_TO_GET_ISSUER_CERT_LOCALLY",
    21: "UNABLE_TO_VERIFY_LEAF_SIGNATURE",
    62: "ERR_TLS_CERT_ALTNAME_INVALID",
}

_GAI_CODES = {
    getattr(socket, name): name
    for name in dir(socket)
    if name.startswith("EAI_") and isinstance(getattr(socket, name), int)
}
# "Name or service not known" / "No address associated with hostname"
for _name in ("EAI_NONAME", "EAI_NODATA"):
    if isinstance(getattr(socket, _name, None), int):
        _GAI_CODES[getattr(socket, _name)] = "ENOTFOUND"
del _name


@dataclass(frozen=True)
class ErrorDescriptor:
    """Normalized, read-only view of an error"""
    kind_name: Optional[str] = None
    type_name: Optional[str] = None
    message: Optional[str] = None
    code: Optional[str] = None
    status: Optional[int] = None
    status_code: Optional[int] = None
    response_status: Optional[int] = None
    stack: Optional[str] = None
    causes: Tuple["ErrorDescriptor", ...] = ()

    @property
    def display_name(self) -> str:
        return self.type_name or self.kind_name or "Error"

    @property
    def summary(self) -> str:
        """One-line '<type>: <message>' form"""
        return f"{self.display_name}: {self.message or ''}"


def describe(error: Any) -> ErrorDescriptor:
    """Adapt any raised value into an ErrorDescriptor"""
    return _describe(error, frozenset())


def _describe(error: Any, seen: FrozenSet[int]) -> ErrorDescriptor:
    if isinstance(error, ErrorDescriptor):
        return error
    if isinstance(error, BaseException):
        return _from_exception(error, seen | {id(error)})
    if isinstance(error, Mapping):
        return _from_mapping(error, seen | {id(error)})
    return ErrorDescriptor(
        kind_name="Error",
        type_name=type(error).__name__ if error is not None else "Error",
        message=str(error),
        stack=f"Error: {error}",
    )


# ==========================================
# EXCEPTIONS
# ==========================================

def _from_exception(exc: BaseException, seen: FrozenSet[int]) -> ErrorDescriptor:
    type_name = type(exc).__name__
    # Only a name assigned on the instance counts; NameError, AttributeError
    # and ImportError carry an unrelated builtin `name` member.
    explicit_name = vars(exc).get("name")
    if isinstance(explicit_name, str) and explicit_name:
        kind_name = explicit_name
    elif isinstance(exc, asyncio.CancelledError):
        kind_name = "AbortError"
    else:
        kind_name = KIND_ALIASES.get(type_name, type_name)

    response = getattr(exc, "response", None)

    return ErrorDescriptor(
        kind_name=kind_name,
        type_name=type_name,
        message=str(exc),
        code=_exception_code(exc) or _exception_code(exc.__cause__),
        status=_as_status(getattr(exc, "status", None)),
        status_code=_as_status(
            getattr(exc, "status_code", None) or getattr(exc, "statusCode", None)
        ),
        response_status=_response_status(response),
        stack=_format_stack(exc),
        causes=_describe_causes(_nested_causes(exc), seen),
    )


def _exception_code(exc: Optional[BaseException]) -> Optional[str]:
    if exc is None:
        return None

    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code

    if isinstance(exc, ssl.SSLCertVerificationError):
        verify_code = getattr(exc, "verify_code", None)
        return SSL_VERIFY_CODES.get(verify_code, "UNABLE_TO_VERIFY_LEAF_SIGNATURE")

    if isinstance(exc, socket.gaierror) and exc.errno in _GAI_CODES:
        return _GAI_CODES[exc.errno]

    if isinstance(exc, OSError) and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]

    return None


def _response_status(response: Any) -> Optional[int]:
    if response is None:
        return None
    if isinstance(response, Mapping):
        return _as_status(response.get("status_code") or response.get("status"))
    return _as_status(getattr(response, "status_code", None) or getattr(response, "status", None))


def _nested_causes(exc: BaseException) -> Tuple[Any, ...]:
    nested = getattr(exc, "exceptions", None)
    if nested is None:
        nested = getattr(exc, "errors", None)
    if isinstance(nested, (list, tuple)):
        return tuple(nested)
    return ()


def _describe_causes(causes: Iterable[Any], seen: FrozenSet[int]) -> Tuple[ErrorDescriptor, ...]:
    """Describe nested errors, skipping ones already on the path above"""
    return tuple(_describe(c, seen) for c in causes if id(c) not in seen)


def _format_stack(exc: BaseException) -> str:
    if exc.__traceback__ is None:
        return "".join(traceback.format_exception_only(type(exc), exc)).rstrip("\n")
    lines = traceback.format_exception(type(exc), exc, exc.__traceback__, chain=False)
    return "".join(lines).rstrip("\n")


# ==========================================
# MAPPINGS
# ==========================================

def _from_mapping(data: Mapping, seen: FrozenSet[int]) -> ErrorDescriptor:
    """Build a descriptor from a plain dict ({"name": ..., "code": ...})"""
    name = data.get("name") or data.get("kind_name")
    message = data.get("message")
    code = data.get("code")
    causes = data.get("causes") or data.get("errors") or ()
    type_name = data.get("type_name") or name
    stack = data.get("stack")
    if stack is None:
        stack = f"{type_name or 'Error'}: {message or ''}"

    return ErrorDescriptor(
        kind_name=name,
        type_name=type_name,
        message=None if message is None else str(message),
        code=code if isinstance(code, str) and code else None,
        status=_as_status(data.get("status")),
        status_code=_as_status(data.get("status_code") or data.get("statusCode")),
        response_status=_response_status(data.get("response")),
        stack=stack,
        causes=_describe_causes(causes, seen),
    )


def _as_status(value: Any) -> Optional[int]:
    """Coerce an HTTP-style status to int, None when it is not one"""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None

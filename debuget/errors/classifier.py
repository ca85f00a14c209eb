"""
Debuget Error Classification Module
Maps an error to one of a fixed set of categories
"""

from enum import Enum
from typing import Any, Callable, List, Tuple
import re

from .descriptor import ErrorDescriptor, describe

# ==========================================
# CATEGORIES
# ==========================================

class Category(Enum):
    DATABASE = "database"
    SYNTAX = "syntax"
    NETWORK = "network"
    AUTH = "auth"
    VALIDATION = "validation"
    CODE = "code"
    JWT = "jwt"
    FS = "fs"
    ABORT = "abort"
    AGGREGATE = "aggregate"
    HTTP = "http"
    DNS = "dns"
    TLS = "tls"
    STREAM = "stream"
    DEFAULT = "default"


CATEGORY_HEADERS = {
    Category.DATABASE: "🔥 DATABASE MELTDOWN",
    Category.SYNTAX: "📜 SCRIPT ERROR",
    Category.NETWORK: "🌐 NETWORK FAIL",
    Category.AUTH: "🔐 ACCESS DENIED",
    Category.VALIDATION: "🛡️ VALIDATION FAILED",
    Category.CODE: "💻 CODE ISSUE",
    Category.JWT: "🔑 JWT ERROR",
    Category.FS: "📂 FILE SYSTEM ERROR",
    Category.ABORT: "⏹️ ABORTED",
    Category.AGGREGATE: "🔗 AGGREGATE FAILURE",
    Category.HTTP: "🌐 HTTP ERROR",
    Category.DNS: "📡 DNS ERROR",
    Category.TLS: "🔒 TLS FAILURE",
    Category.STREAM: "🔄 STREAM ERROR",
    Category.DEFAULT: "💥 RUNTIME ISSUE",
}

# ==========================================
# RULES
# ==========================================

Rule = Tuple[Callable[[ErrorDescriptor], bool], Category]


def _kind_is(*names: str) -> Callable[[ErrorDescriptor], bool]:
    return lambda d: d.kind_name in names


def _code_matches(pattern: str) -> Callable[[ErrorDescriptor], bool]:
    regex = re.compile(pattern, re.IGNORECASE)
    return lambda d: regex.search(d.code or "") is not None


def _message_matches(pattern: str) -> Callable[[ErrorDescriptor], bool]:
    regex = re.compile(pattern, re.IGNORECASE)
    return lambda d: regex.search(d.message or "") is not None


def _http_response_failed(d: ErrorDescriptor) -> bool:
    return d.response_status is not None and 400 <= d.response_status < 600


# Order matters: rules overlap (a TypeError carrying a failed response is
# still a code issue, ECONNRESET is caught by the database rule first).
CLASSIFICATION_RULES: List[Rule] = [
    (_kind_is("SyntaxError"), Category.SYNTAX),
    (_kind_is("TypeError", "ReferenceError"), Category.CODE),
    (_kind_is("ValidationError"), Category.VALIDATION),
    (_kind_is("JsonWebTokenError", "TokenExpiredError"), Category.JWT),
    (_kind_is("AbortError"), Category.ABORT),
    (_kind_is("AggregateError"), Category.AGGREGATE),
    (_http_response_failed, Category.HTTP),
    (_code_matches(r"ECONN|MONGO|POSTGRES"), Category.DATABASE),
    (_code_matches(r"ENOTFOUND|ETIMEDOUT|ECONNRESET|EHOSTUNREACH"), Category.NETWORK),
    (_code_matches(r"EACCES|EPERM"), Category.AUTH),
    (_code_matches(r"ENOENT|EEXIST|EISDIR|ENOTDIR"), Category.FS),
    (_code_matches(r"EAI_AGAIN|ENETUNREACH|EADDRINFO"), Category.DNS),
    (_code_matches(r"EPIPE|ERR_STREAM_PREMATURE_CLOSE"), Category.STREAM),
    (_code_matches(r"CERT_|UNABLE_TO_VERIFY"), Category.TLS),
    (_message_matches(r"EJSON|EPARSE"), Category.SYNTAX),
]

# ==========================================
# CLASSIFIER
# ==========================================

def classify(error: Any) -> Category:
    """Return the category of the first matching rule, DEFAULT if none match"""
    descriptor = describe(error)
    for matches, category in CLASSIFICATION_RULES:
        if matches(descriptor):
            return category
    return Category.DEFAULT


def header_for(category: Category, emoji: bool = True) -> str:
    """
    Header text for a category.

    With emoji disabled the leading glyph is dropped by keeping everything
    after the first space; a header without a space is returned unchanged.
    """
    header = CATEGORY_HEADERS.get(category, CATEGORY_HEADERS[Category.DEFAULT])
    if emoji:
        return header
    _, space, rest = header.partition(" ")
    return rest if space else header

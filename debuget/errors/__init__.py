"""
Debuget Error Handling Module
Error descriptors, classification and explanations
"""

from .descriptor import ErrorDescriptor, describe
from .classifier import (
    Category,
    CATEGORY_HEADERS,
    CLASSIFICATION_RULES,
    classify,
    header_for,
)
from .explanations import explain, DEFAULT_EXPLANATION

__all__ = [
    "ErrorDescriptor",
    "describe",
    "Category",
    "CATEGORY_HEADERS",
    "CLASSIFICATION_RULES",
    "classify",
    "header_for",
    "explain",
    "DEFAULT_EXPLANATION",
]

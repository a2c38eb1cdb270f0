"""
component-verifier: parameter and connectivity verification results.

Verifiers receive a scope and a parameter mapping and answer with a
Result made of a status and structured VerificationError values. Errors
are assembled with ResultErrorBuilder.
"""

from .errors import (
    ERROR_TYPE_EXCEPTION,
    ERROR_TYPE_HTTP,
    EXCEPTION_ATTRIBUTES,
    GROUP_ATTRIBUTES,
    HTTP_ATTRIBUTES,
    Attribute,
    Code,
    ErrorAttribute,
    ErrorCode,
    StandardAttribute,
    StandardCode,
    VerificationError,
    as_attribute,
    as_code,
)
from .exceptions import ComponentVerifierError, UnknownScopeError
from .builder import ResultErrorBuilder
from .result import Result, ResultBuilder, Scope, Status
from .helpers import OptionsGroup, requires_any, requires_option, requires_options
from .verifier import ComponentVerifier
from .summary import error_summary, format_error, format_result_summary, result_summary

__version__ = "0.1.0"
__all__ = [
    # Codes and attributes
    "Code",
    "StandardCode",
    "ErrorCode",
    "as_code",
    "Attribute",
    "StandardAttribute",
    "ErrorAttribute",
    "as_attribute",
    "EXCEPTION_ATTRIBUTES",
    "HTTP_ATTRIBUTES",
    "GROUP_ATTRIBUTES",
    "ERROR_TYPE_EXCEPTION",
    "ERROR_TYPE_HTTP",
    # Values
    "VerificationError",
    "Scope",
    "Status",
    "Result",
    # Builders
    "ResultErrorBuilder",
    "ResultBuilder",
    # Checks
    "OptionsGroup",
    "requires_option",
    "requires_options",
    "requires_any",
    # Verifier
    "ComponentVerifier",
    # Summary
    "error_summary",
    "format_error",
    "result_summary",
    "format_result_summary",
    # Exceptions
    "ComponentVerifierError",
    "UnknownScopeError",
]

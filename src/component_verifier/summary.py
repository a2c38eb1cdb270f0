"""
Result summary utilities for human-readable inspection.

Renders code, description and parameter keys together without touching
the underlying values.
"""

from typing import Any

from .errors import VerificationError
from .result import Result


def _code_name(error: VerificationError) -> str:
    return error.code.name if error.code is not None else "UNKNOWN"


def error_summary(error: VerificationError) -> dict[str, Any]:
    """
    Extract a summary of a single error.

    Returns:
        Dict with code, description, parameter_keys and detail names
    """
    return {
        "code": _code_name(error),
        "description": error.description or "",
        "parameter_keys": sorted(error.parameter_keys),
        "details": sorted(key.name for key in error.details),
    }


def format_error(error: VerificationError) -> str:
    """
    Format an error as a single line.

    Returns:
        String like "MISSING_PARAMETER: username should be set [username]"
    """
    text = _code_name(error)
    if error.description:
        text += f": {error.description}"
    if error.parameter_keys:
        text += f" [{', '.join(sorted(error.parameter_keys))}]"
    return text


def result_summary(result: Result) -> dict[str, Any]:
    """
    Extract a summary from a verification result.

    Returns:
        Dict with scope, status, error_count, codes and parameter_keys
    """
    keys: set[str] = set()
    for error in result.errors:
        keys.update(error.parameter_keys)

    return {
        "scope": result.scope.name if result.scope is not None else "",
        "status": result.status.name,
        "error_count": len(result.errors),
        "codes": sorted(set(_code_name(e) for e in result.errors)),
        "parameter_keys": sorted(keys),
    }


def format_result_summary(result: Result) -> str:
    """
    Format a result as a single-line human-readable string.

    Returns:
        String like "CONNECTIVITY: ERROR | 2 errors [AUTHENTICATION, GENERIC]"
    """
    s = result_summary(result)
    line = f"{s['scope']}: {s['status']}"
    if s["error_count"]:
        noun = "error" if s["error_count"] == 1 else "errors"
        line += f" | {s['error_count']} {noun} [{', '.join(s['codes'])}]"
    return line

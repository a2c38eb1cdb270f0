"""
Incremental construction of VerificationError values.

ResultErrorBuilder collects a code, a description, parameter keys and
details in any order and snapshots them into an immutable
VerificationError on build(). None inputs are absorbed as no-ops so that
optional lookups can be passed straight through.
"""

from types import MappingProxyType
from typing import Any, Callable, Iterable

from .errors import (
    ERROR_TYPE_EXCEPTION,
    ERROR_TYPE_HTTP,
    Attribute,
    Code,
    StandardAttribute,
    StandardCode,
    VerificationError,
    as_attribute,
    as_code,
)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _http_code_to_error_code(code: int) -> StandardCode:
    # The whole 4xx band is treated as a credential problem.
    return StandardCode.AUTHENTICATION if 400 <= code < 500 else StandardCode.GENERIC


class ResultErrorBuilder:
    """
    Fluent, single-use builder for one VerificationError.

    Not safe for concurrent mutation from several threads.
    """

    def __init__(self) -> None:
        self._code: Code | None = None
        self._description: str | None = None
        self._parameter_keys: set[str] = set()
        self._details: dict[Attribute, Any] = {}

    # Accessors

    def code(self, code: Code | str) -> "ResultErrorBuilder":
        """Set the error code. Strings become custom codes."""
        self._code = as_code(code) if isinstance(code, str) and not isinstance(code, StandardCode) else code
        return self

    def description(self, description: str | None) -> "ResultErrorBuilder":
        self._description = description
        return self

    def parameter_key(self, parameter: str | None) -> "ResultErrorBuilder":
        """Add a parameter key. None and empty strings are ignored."""
        if parameter:
            self._parameter_keys.add(parameter)
        return self

    def parameter_keys(self, parameters: Iterable[str] | None) -> "ResultErrorBuilder":
        if parameters is not None:
            for parameter in parameters:
                self.parameter_key(parameter)
        return self

    def detail(self, key: Attribute | str, value: Any) -> "ResultErrorBuilder":
        """
        Add a detail. A None value is dropped silently.

        String keys become custom attributes.
        """
        if value is not None:
            if isinstance(key, str) and not isinstance(key, StandardAttribute):
                key = as_attribute(key)
            self._details[key] = value
        return self

    def detail_from(
        self,
        key: Attribute | str,
        supplier: Callable[[], Any],
    ) -> "ResultErrorBuilder":
        """Call supplier and add its value as a detail unless it is None."""
        return self.detail(key, supplier())

    # Build

    def build(self) -> VerificationError:
        return VerificationError(
            code=self._code,
            description=self._description,
            parameter_keys=frozenset(self._parameter_keys),
            details=MappingProxyType(dict(self._details)),
        )

    # Helpers

    @classmethod
    def with_code(cls, code: Code | str) -> "ResultErrorBuilder":
        return cls().code(code)

    @classmethod
    def with_code_and_description(cls, code: Code | str, description: str | None) -> "ResultErrorBuilder":
        return cls().code(code).description(description)

    @classmethod
    def with_unsupported_scope(cls, scope: str) -> "ResultErrorBuilder":
        return cls.with_code_and_description(
            StandardCode.UNSUPPORTED_SCOPE,
            f"Unsupported scope: {scope}",
        )

    @classmethod
    def with_exception(cls, exception: BaseException) -> "ResultErrorBuilder":
        """
        Describe a raised exception.

        The description is the exception message. Details hold the origin
        type, the exception object and its qualified class name.
        """
        exc_type = type(exception)
        return (
            cls.with_code_and_description(StandardCode.EXCEPTION, str(exception) or None)
            .detail(StandardAttribute.TYPE, ERROR_TYPE_EXCEPTION)
            .detail(StandardAttribute.EXCEPTION_INSTANCE, exception)
            .detail(StandardAttribute.EXCEPTION_CLASS, f"{exc_type.__module__}.{exc_type.__qualname__}")
        )

    @classmethod
    def with_missing_option(cls, name: str) -> "ResultErrorBuilder":
        return (
            cls.with_code_and_description(StandardCode.MISSING_PARAMETER, f"{name} should be set")
            .parameter_key(name)
        )

    @classmethod
    def with_unknown_option(cls, name: str) -> "ResultErrorBuilder":
        return (
            cls.with_code_and_description(StandardCode.UNKNOWN_PARAMETER, f"Unknown option {name}")
            .parameter_key(name)
        )

    @classmethod
    def with_illegal_option(cls, name: str, value: Any = None) -> "ResultErrorBuilder":
        """
        Report an illegal option, or an illegal value for it.

        A None or blank value is reported as an illegal option.
        """
        if _is_blank(value):
            return (
                cls.with_code_and_description(StandardCode.ILLEGAL_PARAMETER, f"Illegal option {name}")
                .parameter_key(name)
            )
        return (
            cls.with_code_and_description(
                StandardCode.ILLEGAL_PARAMETER_VALUE,
                f"{name} has wrong value ({value})",
            )
            .parameter_key(name)
        )

    @classmethod
    def with_http_code(cls, code: int) -> "ResultErrorBuilder":
        return (
            cls.with_code(_http_code_to_error_code(code))
            .detail(StandardAttribute.TYPE, ERROR_TYPE_HTTP)
            .detail(StandardAttribute.HTTP_CODE, code)
        )

    @classmethod
    def with_http_code_and_text(cls, code: int, text: str | None) -> "ResultErrorBuilder":
        """Like with_http_code, with the response body as description and detail."""
        return (
            cls.with_code_and_description(_http_code_to_error_code(code), text)
            .detail(StandardAttribute.TYPE, ERROR_TYPE_HTTP)
            .detail(StandardAttribute.HTTP_CODE, code)
            .detail(StandardAttribute.HTTP_TEXT, text)
        )

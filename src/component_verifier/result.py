"""
Verification scope, status and the aggregate Result.

A Result carries the scope it was verified against, an overall status and
the ordered errors found. ResultBuilder keeps status and errors consistent:
adding an error switches the status to ERROR.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

from .builder import ResultErrorBuilder
from .errors import VerificationError
from .exceptions import UnknownScopeError


T = TypeVar("T")


class Scope(str, Enum):
    """
    How parameters should be verified.

    PARAMETERS only checks presence and syntax and must be fast.
    CONNECTIVITY may reach out to the backend to check credentials and
    addresses.
    """
    PARAMETERS = "PARAMETERS"
    CONNECTIVITY = "CONNECTIVITY"

    @classmethod
    def from_string(cls, scope: str) -> "Scope":
        """
        Parse a scope name in any case.

        Raises:
            UnknownScopeError: If the text does not name a scope
        """
        if isinstance(scope, str):
            for value in cls:
                if value.name == scope.upper():
                    return value
        raise UnknownScopeError(scope)


class Status(str, Enum):
    """Overall outcome of a verification."""
    OK = "OK"
    ERROR = "ERROR"
    UNSUPPORTED = "UNSUPPORTED"


@dataclass(frozen=True)
class Result:
    """
    Result of a verification.

    errors is empty (never None) when the verification succeeded.
    """
    scope: Scope
    status: Status
    errors: tuple[VerificationError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors or ()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "scope": self.scope.value if self.scope is not None else None,
            "status": self.status.value,
            "errors": [e.to_dict() for e in self.errors],
        }


class ResultBuilder:
    """Fluent assembler for a Result."""

    def __init__(self) -> None:
        self._scope: Scope | None = None
        self._status: Status | None = None
        self._errors: list[VerificationError] = []

    def scope(self, scope: Scope) -> "ResultBuilder":
        self._scope = scope
        return self

    def status(self, status: Status) -> "ResultBuilder":
        self._status = status
        return self

    def error(self, error: VerificationError | None) -> "ResultBuilder":
        """Add an error and switch the status to ERROR. None is ignored."""
        if error is not None:
            self._errors.append(error)
            self._status = Status.ERROR
        return self

    def errors(self, errors: Iterable[VerificationError] | None) -> "ResultBuilder":
        if errors is not None:
            for error in errors:
                self.error(error)
        return self

    def error_from(
        self,
        data: T,
        fn: Callable[[T], VerificationError | None],
    ) -> "ResultBuilder":
        """Apply fn to data and add the error it returns, if any."""
        return self.error(fn(data))

    def build(self) -> Result:
        """
        Build the Result.

        Without an explicit status the result is ERROR when errors were
        added and OK otherwise. An OK status is never paired with errors;
        UNSUPPORTED may carry errors explaining why.
        """
        status = self._status
        if status is None or (status is Status.OK and self._errors):
            status = Status.ERROR if self._errors else Status.OK
        return Result(scope=self._scope, status=status, errors=tuple(self._errors))

    # Shortcuts

    @classmethod
    def with_scope(cls, scope: Scope) -> "ResultBuilder":
        return cls().scope(scope)

    @classmethod
    def with_status_and_scope(cls, status: Status, scope: Scope) -> "ResultBuilder":
        return cls().status(status).scope(scope)

    @classmethod
    def unsupported(cls) -> "ResultBuilder":
        return cls().status(Status.UNSUPPORTED)

    @classmethod
    def unsupported_scope(cls, scope: Scope) -> "ResultBuilder":
        """UNSUPPORTED result for a scope the verifier does not implement."""
        builder = cls.with_status_and_scope(Status.UNSUPPORTED, scope)
        builder._errors.append(ResultErrorBuilder.with_unsupported_scope(scope.name).build())
        return builder

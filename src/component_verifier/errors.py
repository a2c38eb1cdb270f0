"""
Error codes, detail attributes and the VerificationError value.

Codes and attributes are open identifiers: a fixed set of standard members
backed by an enum, plus free-form custom values created with as_code() and
as_attribute(). Both variants expose a ``name`` and are used interchangeably
wherever a Code or Attribute is expected.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union


# Values stored under StandardAttribute.TYPE to mark where an error came from.
ERROR_TYPE_EXCEPTION = "exception"
ERROR_TYPE_HTTP = "http"


class StandardCode(str, Enum):
    """
    Standard set of error codes.

    The *_OPTION names are aliases of the matching *_PARAMETER members.
    """
    AUTHENTICATION = "AUTHENTICATION"
    EXCEPTION = "EXCEPTION"
    INTERNAL = "INTERNAL"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    UNKNOWN_PARAMETER = "UNKNOWN_PARAMETER"
    ILLEGAL_PARAMETER = "ILLEGAL_PARAMETER"
    ILLEGAL_PARAMETER_GROUP_COMBINATION = "ILLEGAL_PARAMETER_GROUP_COMBINATION"
    ILLEGAL_PARAMETER_VALUE = "ILLEGAL_PARAMETER_VALUE"
    INCOMPLETE_PARAMETER_GROUP = "INCOMPLETE_PARAMETER_GROUP"
    UNSUPPORTED = "UNSUPPORTED"
    UNSUPPORTED_SCOPE = "UNSUPPORTED_SCOPE"
    GENERIC = "GENERIC"

    MISSING_OPTION = "MISSING_PARAMETER"
    UNKNOWN_OPTION = "UNKNOWN_PARAMETER"
    ILLEGAL_OPTION = "ILLEGAL_PARAMETER"
    ILLEGAL_OPTION_GROUP_COMBINATION = "ILLEGAL_PARAMETER_GROUP_COMBINATION"
    ILLEGAL_OPTION_VALUE = "ILLEGAL_PARAMETER_VALUE"
    INCOMPLETE_OPTION_GROUP = "INCOMPLETE_PARAMETER_GROUP"


class StandardAttribute(str, Enum):
    """
    Standard detail attributes.

    EXCEPTION_INSTANCE holds the raised object itself and can be large when
    serialized. HTTP_REDIRECT, when present, holds the redirect URL.
    """
    TYPE = "TYPE"
    EXCEPTION_INSTANCE = "EXCEPTION_INSTANCE"
    EXCEPTION_CLASS = "EXCEPTION_CLASS"
    HTTP_CODE = "HTTP_CODE"
    HTTP_TEXT = "HTTP_TEXT"
    HTTP_REDIRECT = "HTTP_REDIRECT"
    GROUP_NAME = "GROUP_NAME"
    GROUP_OPTIONS = "GROUP_OPTIONS"

    @property
    def family(self) -> str:
        """Attribute family: "type", "exception", "http" or "group"."""
        if self is StandardAttribute.TYPE:
            return "type"
        return self.value.split("_", 1)[0].lower()


EXCEPTION_ATTRIBUTES = (
    StandardAttribute.EXCEPTION_INSTANCE,
    StandardAttribute.EXCEPTION_CLASS,
)
HTTP_ATTRIBUTES = (
    StandardAttribute.HTTP_CODE,
    StandardAttribute.HTTP_TEXT,
    StandardAttribute.HTTP_REDIRECT,
)
GROUP_ATTRIBUTES = (
    StandardAttribute.GROUP_NAME,
    StandardAttribute.GROUP_OPTIONS,
)


@dataclass(frozen=True)
class ErrorCode:
    """A custom error code. The name is stored upper-cased."""
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", (self.name or "").upper())

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ErrorAttribute:
    """A custom detail attribute. The name is stored upper-cased."""
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", (self.name or "").upper())

    def __str__(self) -> str:
        return self.name


Code = Union[StandardCode, ErrorCode]
Attribute = Union[StandardAttribute, ErrorAttribute]


def as_code(code: str) -> ErrorCode:
    """Create a custom error code from a string."""
    return ErrorCode(code)


def as_attribute(attribute: str) -> ErrorAttribute:
    """Create a custom detail attribute from a string."""
    return ErrorAttribute(attribute)


def _detail_key(key: Attribute) -> str:
    if isinstance(key, StandardAttribute):
        return key.name
    return key.name.lower()


@dataclass(frozen=True)
class VerificationError:
    """
    A single verification error.

    parameter_keys names the input parameters that caused the failure and is
    empty when the error is not tied to a parameter. details maps attributes
    to arbitrary diagnostic values and is exposed read-only.
    """
    code: Code | None
    description: str | None = None
    parameter_keys: frozenset[str] = frozenset()
    details: Mapping[Attribute, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameter_keys", frozenset(self.parameter_keys or ()))
        object.__setattr__(self, "details", MappingProxyType(dict(self.details or {})))

    def __hash__(self) -> int:
        # details may hold unhashable values and stays out of the hash.
        return hash((self.code, self.description, self.parameter_keys))

    def to_dict(self) -> dict[str, Any]:
        """
        Render as plain data.

        Custom detail keys are rendered lower-case so they never collide
        with a standard attribute of the same name.
        """
        return {
            "code": self.code.name if self.code is not None else None,
            "description": self.description,
            "parameter_keys": sorted(self.parameter_keys),
            "details": {_detail_key(key): value for key, value in self.details.items()},
        }
